"""Site search API: cached relevance search over the catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from drq_site.api.dependencies import get_search_service
from drq_site.application.dtos.search import SearchKind, SearchOptions
from drq_site.application.use_cases.search import SearchService
from drq_site.core.config import Settings, get_settings
from drq_site.core.limiter import limit_search
from drq_site.domain.exceptions import ValidationException
from drq_site.schemas.search import SearchResponse, SearchResultItem
from drq_site.shared.utils.datetime import iso_timestamp

router = APIRouter()

SEARCH_HEAD_CACHE_CONTROL = "public, max-age=60, stale-while-revalidate=30"


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    q: str | None = Query(None, max_length=200, description="Search text"),
    kind: SearchKind | None = Query(None, alias="type", description="Restrict to one catalog kind"),
    location: str | None = Query(None, max_length=64),
    service: str | None = Query(None, max_length=64),
    limit: int | None = Query(None, description="Maximum results"),
):
    """Ranked results for q; `cached` tells whether the result cache served them."""
    if not q or not q.strip():
        raise ValidationException("Query parameter is required", field="q")
    if limit is None:
        limit = settings.search_default_limit
    options = SearchOptions(
        kind=kind,
        location=location or None,
        service=service or None,
        limit=min(limit, settings.search_max_limit),
    )
    outcome = search_svc.search(q, options)
    return SearchResponse(
        query=outcome.query,
        results=[SearchResultItem(**r.to_dict()) for r in outcome.results],
        timestamp=iso_timestamp(),
        total=outcome.total,
        cached=outcome.cached,
    )


@router.head("")
def search_head() -> Response:
    """Cache probe: 200 with public cache headers, no body."""
    return Response(
        status_code=200,
        media_type="application/json",
        headers={"Cache-Control": SEARCH_HEAD_CACHE_CONTROL},
    )
