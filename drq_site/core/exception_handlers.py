"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses; unknown routes get suggestions instead of a
bare 404.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from drq_site.core.config import get_settings
from drq_site.domain.exceptions import SiteException
from drq_site.pages.not_found import render_not_found_page

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "OUTSIDE_SERVICE_AREA": 400,
    "FEATURE_DISABLED": 403,
    "RESOURCE_NOT_FOUND": 404,
    "SERVICE_AREA_NOT_FOUND": 404,
    "SERVICE_UNAVAILABLE": 503,
}

_API_PREFIX = "/api"
_SEARCH_PATH = "/api/search"


def _is_api_path(path: str) -> bool:
    return path == _API_PREFIX or path.startswith(_API_PREFIX + "/")


def _site_exception_handler(request: Request, exc: SiteException) -> JSONResponse:
    """Return JSON from SiteException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _not_found_response(request: Request) -> Response:
    """Suggestions for an unknown route: JSON under /api, HTML page elsewhere."""
    path = request.url.path
    engine = getattr(request.app.state, "suggestion_engine", None)
    context = engine.not_found_context(path) if engine is not None else None
    tracking = getattr(request.app.state, "tracking", None)
    if tracking is not None:
        tracking.track_error_occurrence("404", path)

    if _is_api_path(path):
        return JSONResponse(
            status_code=404,
            content={
                "error": "NOT_FOUND",
                "message": context.message if context else "Not found",
                "suggestions": [
                    {
                        "path": s.path,
                        "title": s.title,
                        "type": s.type.value,
                        "distance": s.distance,
                        "relevance": round(s.relevance, 4),
                    }
                    for s in (context.suggestions if context else [])
                ],
            },
        )
    settings = get_settings()
    return HTMLResponse(
        status_code=404,
        content=render_not_found_page(context, path, settings.emergency_phone),
    )


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Return JSON for Starlette HTTP exceptions; unknown routes get suggestions."""
    if exc.status_code == 404 and exc.detail in (None, "Not Found"):
        return _not_found_response(request)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True.

    Search failures also carry the emergency phone so the UI can offer a call.
    """
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    tracking = getattr(request.app.state, "tracking", None)
    if tracking is not None:
        tracking.track_error_occurrence(type(exc).__name__, request.url.path)
    content: dict[str, Any] = {
        "error": "INTERNAL_ERROR",
        "message": str(exc) if settings.debug else "Internal server error",
    }
    if request.url.path == _SEARCH_PATH:
        content["emergencyContact"] = {"phone": settings.emergency_phone}
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: SiteException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(SiteException, _site_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
