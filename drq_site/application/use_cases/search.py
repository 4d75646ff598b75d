"""Site search use case: result cache in front of RelevanceSearch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drq_site.application.dtos.search import SearchOptions, SearchOutcome
from drq_site.application.services.relevance_search import is_emergency_search
from drq_site.infrastructure.cache.keys import search_key
from drq_site.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from drq_site.application.interfaces.services import IResultCache
    from drq_site.application.services.relevance_search import RelevanceSearch
    from drq_site.application.services.tracking_service import TrackingService

logger = logging.getLogger(__name__)

SEARCH_CACHE_NAMESPACE = "search"


class SearchService:
    """Cached relevance search with search / emergency tracking."""

    def __init__(
        self,
        engine: "RelevanceSearch",
        cache: "IResultCache",
        tracking: "TrackingService",
        ttl: float = 300,
    ) -> None:
        self.engine = engine
        self.cache = cache
        self.tracking = tracking
        self.ttl = ttl

    @traced("search.query")
    def search(self, query: str, options: SearchOptions | None = None) -> SearchOutcome:
        """Return ranked results, from cache when an identical search ran within the TTL.

        Errors raised by the search itself propagate; nothing is cached for them.
        """
        options = options or SearchOptions()
        if is_emergency_search(query):
            self.tracking.track_emergency_contact("form", "search-api")
        key = search_key(query, options.as_filters())
        results, cached = self.cache.get_or_compute(
            key,
            lambda: self.engine.search(query, options),
            ttl=self.ttl,
            namespace=SEARCH_CACHE_NAMESPACE,
        )
        add_span_attributes(**{"search.results": len(results), "search.cached": cached})
        logger.debug("Search %r: %s results (cached=%s)", query, len(results), cached)
        self.tracking.track_search(query, len(results), cached)
        return SearchOutcome(query=query, results=results, cached=cached)
