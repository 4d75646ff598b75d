"""Application services: relevance search, route suggestions, tracking."""

from drq_site.application.services.relevance_search import (
    RelevanceSearch,
    get_emergency_keywords,
    is_emergency_search,
)
from drq_site.application.services.suggestion_engine import (
    SuggestionEngine,
    levenshtein_distance,
)
from drq_site.application.services.tracking_service import TrackingService

__all__ = [
    "RelevanceSearch",
    "SuggestionEngine",
    "TrackingService",
    "get_emergency_keywords",
    "is_emergency_search",
    "levenshtein_distance",
]
