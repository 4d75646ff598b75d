"""Search API schemas."""

from pydantic import BaseModel, Field

from drq_site.application.dtos.search import SearchKind


class SearchResultItem(BaseModel):
    """One ranked hit."""

    type: SearchKind
    id: str
    title: str
    description: str
    url: str
    priority: int
    relevance: int


class SearchResponse(BaseModel):
    """Response for GET /api/search."""

    query: str
    results: list[SearchResultItem]
    timestamp: str = Field(..., description="ISO-8601 time the response was built")
    total: int
    cached: bool = Field(..., description="True when served from the result cache")
