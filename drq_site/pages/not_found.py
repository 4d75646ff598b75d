"""Not-found page: section message, did-you-mean links and the emergency call to action."""

from html import escape

from drq_site.application.dtos.suggestion import NotFoundContext
from drq_site.pages._layout import emergency_card, render_page

_FALLBACK_MESSAGE = "The page you're looking for couldn't be found."


def _link_list(items: list[tuple[str, str]]) -> str:
    rows = "".join(
        f'\n                <li><a href="{escape(href)}">{escape(label)}</a></li>'
        for href, label in items
    )
    return f"<ul>{rows}\n            </ul>"


def render_not_found_page(context: NotFoundContext | None, path: str, phone: str) -> str:
    """Return HTML for a 404 on path; context None renders only the fallback message."""
    message = context.message if context else _FALLBACK_MESSAGE
    sections = ""
    if context and context.suggestions:
        links = _link_list([(s.path, s.title) for s in context.suggestions])
        sections += f"""
        <section class="card" aria-labelledby="suggestions-heading">
            <h2 id="suggestions-heading">Did you mean</h2>
            {links}
        </section>"""
    if context and context.section_links:
        links = _link_list([(url, url) for url in context.section_links])
        sections += f"""
        <section class="card" aria-labelledby="section-heading">
            <h2 id="section-heading">Browse this section</h2>
            {links}
        </section>"""
    body = f"""
        <header>
            <h1>Page not found</h1>
            <p class="lead">{escape(message)}</p>
            <p class="muted">{escape(path)}</p>
        </header>{sections}
        <section class="card">
            <a href="/">Back to home</a>
        </section>{emergency_card(phone)}"""
    return render_page("Page not found", body)
