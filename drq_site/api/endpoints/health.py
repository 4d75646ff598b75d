"""Health check endpoints: liveness and readiness (with cache stats)."""

from fastapi import APIRouter, Request, Response

from drq_site.schemas.health import CacheStats, HealthResponse, ReadinessResponse
from drq_site.shared.utils.datetime import iso_timestamp

router = APIRouter()

_NO_STORE = "no-store, no-cache, must-revalidate"


@router.get("", response_model=HealthResponse)
def health_check(response: Response) -> HealthResponse:
    """Return ok for liveness probes."""
    response.headers["Cache-Control"] = _NO_STORE
    return HealthResponse(timestamp=iso_timestamp())


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(request: Request, response: Response) -> ReadinessResponse:
    """Return ok once the catalog and result cache are in place."""
    response.headers["Cache-Control"] = _NO_STORE
    return ReadinessResponse(
        cache=CacheStats(**request.app.state.cache.stats()),
        catalog_entries=len(request.app.state.catalog),
    )
