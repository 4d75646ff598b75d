"""Did-you-mean suggestions for broken routes.

Matches the last segment of a path against known service ids, location ids
and nav-item path tails using Levenshtein edit distance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drq_site.application.dtos.suggestion import NotFoundContext, SuggestionCandidate
from drq_site.core.constants import SUGGESTION_LIMIT, SUGGESTION_MAX_DISTANCE
from drq_site.domain.enums import CatalogKind, SuggestionType
from drq_site.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from drq_site.application.interfaces.repositories import ICatalog

_SECTION_MESSAGES = {
    "services": (
        "We couldn't find the service you're looking for. "
        "Check out our available services below."
    ),
    "locations": (
        "We couldn't find the location you're looking for. "
        "View our service areas below."
    ),
    "inspection": (
        "The inspection page you're looking for is not available. "
        "Please start a new inspection request."
    ),
}
_DEFAULT_MESSAGE = (
    "The page you're looking for couldn't be found. "
    "Here are some suggestions that might help."
)


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum single-character insertions, deletions or substitutions turning a into b."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str, distance: int) -> float:
    """1 - distance / max(len(a), len(b)); 0.0 when both strings are empty."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return 1 - distance / longest


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


class SuggestionEngine:
    """Nearest known routes for a path that did not resolve."""

    def __init__(
        self,
        catalog: "ICatalog",
        max_distance: int = SUGGESTION_MAX_DISTANCE,
        limit: int = SUGGESTION_LIMIT,
    ) -> None:
        self.catalog = catalog
        self.max_distance = max_distance
        self.limit = limit

    def _pool(self) -> list[tuple[str, str, str, SuggestionType]]:
        """(identifier, path, title, type) in match order: services, locations, nav items."""
        pool: list[tuple[str, str, str, SuggestionType]] = []
        for entry in self.catalog.entries(CatalogKind.SERVICE):
            pool.append((entry.id, entry.url, entry.title, SuggestionType.SERVICE))
        for entry in self.catalog.entries(CatalogKind.LOCATION):
            pool.append((entry.id, entry.url, entry.title, SuggestionType.LOCATION))
        for entry in self.catalog.entries(CatalogKind.NAV_ITEM):
            pool.append((entry.path_tail, entry.url, entry.title, SuggestionType.PAGE))
        return pool

    def suggest(self, broken_path: str) -> list[SuggestionCandidate]:
        """Return up to `limit` candidates within `max_distance`, most relevant first.

        Ties keep pool order (services, then locations, then nav items).
        Never raises; an empty list means no close match.
        """
        segments = _segments(broken_path)
        target = segments[-1].lower() if segments else ""
        candidates: list[SuggestionCandidate] = []
        for identifier, path, title, kind in self._pool():
            distance = levenshtein_distance(target, identifier)
            if distance > self.max_distance:
                continue
            candidates.append(
                SuggestionCandidate(
                    path=path,
                    title=title,
                    type=kind,
                    distance=distance,
                    relevance=similarity(target, identifier, distance),
                )
            )
        candidates.sort(key=lambda c: c.relevance, reverse=True)
        return candidates[: self.limit]

    def error_message(self, path: str) -> str:
        """Section-specific not-found message (services, locations, inspection)."""
        segments = _segments(path)
        if segments:
            return _SECTION_MESSAGES.get(segments[0], _DEFAULT_MESSAGE)
        return _DEFAULT_MESSAGE

    def section_suggestions(self, path: str) -> list[str]:
        """Every url in the section the path points into; empty for other sections."""
        segments = _segments(path)
        if not segments:
            return []
        if segments[0] == "services":
            return [e.url for e in self.catalog.entries(CatalogKind.SERVICE)]
        if segments[0] == "locations":
            return [e.url for e in self.catalog.entries(CatalogKind.LOCATION)]
        return []

    @traced("suggestions.not_found")
    def not_found_context(self, path: str) -> NotFoundContext:
        """Bundle suggestions, message and section links for a not-found response."""
        suggestions = self.suggest(path)
        add_span_attributes(**{"suggestions.count": len(suggestions)})
        return NotFoundContext(
            path=path,
            message=self.error_message(path),
            suggestions=suggestions,
            section_links=self.section_suggestions(path),
        )
