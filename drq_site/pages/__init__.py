"""Server-rendered HTML pages (landing and not-found)."""

from drq_site.pages.not_found import render_not_found_page
from drq_site.pages.root import render_root_page

__all__ = ["render_not_found_page", "render_root_page"]
