"""HTTP API (JSON under /api)."""

from drq_site.api.router import api_router

__all__ = ["api_router"]
