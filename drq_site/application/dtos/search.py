"""DTOs for relevance search (no dependency on the web layer)."""

from dataclasses import asdict, dataclass
from typing import Any, Literal

SearchKind = Literal["service", "location", "article"]


@dataclass(frozen=True)
class SearchOptions:
    """Optional filters for a search call.

    kind limits the catalog kinds scanned; location and service restrict
    location / service entries to one id. limit truncates the ranked list.
    """

    kind: SearchKind | None = None
    location: str | None = None
    service: str | None = None
    limit: int = 10

    def as_filters(self) -> dict[str, str | int | None]:
        """Filter mapping used for cache key generation."""
        return {
            "type": self.kind,
            "location": self.location,
            "service": self.service,
            "limit": self.limit,
        }


@dataclass(frozen=True)
class SearchResult:
    """Single ranked hit; created per search call, never persisted."""

    type: SearchKind
    id: str
    title: str
    description: str
    url: str
    priority: int
    relevance: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SearchOutcome:
    """Search results plus whether they were served from the result cache."""

    query: str
    results: list[SearchResult]
    cached: bool

    @property
    def total(self) -> int:
        return len(self.results)
