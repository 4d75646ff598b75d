"""Relevance search over the static site catalog.

Scores a free-text query against service, location and article entries and
returns a ranked list. Pure computation: no I/O, no caching (the search use
case wraps this with the result cache).

Scoring, all comparisons case-insensitive:
    +10  the combined title + description contains the whole query
    +5   per entry keyword equal to one of the query tokens
    +2   per query token found inside the combined title + description
Entries scoring 0 are dropped; ties are broken by base priority.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drq_site.application.dtos.search import SearchOptions, SearchResult
from drq_site.domain.catalog import CatalogEntry
from drq_site.domain.enums import CatalogKind
from drq_site.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from drq_site.application.interfaces.repositories import ICatalog

FULL_MATCH_SCORE = 10
KEYWORD_SCORE = 5
TOKEN_SCORE = 2

EMERGENCY_KEYWORDS = (
    "emergency",
    "urgent",
    "flood",
    "fire",
    "water",
    "smoke",
    "mould",
    "damage",
    "leak",
    "storm",
)


def normalize_query(query: str) -> str:
    """Lower-case and collapse whitespace runs; the form used for scoring and cache keys."""
    return " ".join(query.lower().split())


def tokenize(query: str) -> list[str]:
    """Split on whitespace and lower-case; empty query gives no tokens."""
    return query.lower().split()


def score_entry(query: str, tokens: list[str], entry: CatalogEntry) -> int:
    """Return the relevance of entry for an already tokenized query.

    Args:
        query: Lower-cased, stripped query string (non-empty).
        tokens: tokenize(query).
        entry: Catalog entry to score.

    Returns:
        Non-negative integer score.
    """
    text = entry.search_text
    score = 0
    if query in text:
        score += FULL_MATCH_SCORE
    token_set = set(tokens)
    score += KEYWORD_SCORE * sum(1 for kw in entry.keywords if kw.lower() in token_set)
    score += TOKEN_SCORE * sum(1 for token in tokens if token in text)
    return score


def get_emergency_keywords() -> list[str]:
    """Words that mark a search as an emergency."""
    return list(EMERGENCY_KEYWORDS)


def is_emergency_search(query: str) -> bool:
    """True when any query token is an emergency keyword."""
    return any(token in EMERGENCY_KEYWORDS for token in tokenize(query))


class RelevanceSearch:
    """Rank catalog entries against a free-text query."""

    def __init__(self, catalog: "ICatalog") -> None:
        self.catalog = catalog

    def _candidates(self, options: SearchOptions) -> list[CatalogEntry]:
        kinds = (
            (CatalogKind(options.kind),) if options.kind else CatalogKind.searchable()
        )
        location = options.location.lower() if options.location else None
        service = options.service.lower() if options.service else None
        candidates: list[CatalogEntry] = []
        for kind in kinds:
            for entry in self.catalog.entries(kind):
                if kind is CatalogKind.LOCATION and location and entry.id != location:
                    continue
                if kind is CatalogKind.SERVICE and service and entry.id != service:
                    continue
                candidates.append(entry)
        return candidates

    def search(self, query: str, options: SearchOptions | None = None) -> list[SearchResult]:
        """Return entries ranked by relevance, then base priority, at most options.limit.

        An empty or whitespace-only query returns an empty list.

        Raises:
            ValidationException: If options.limit is less than 1.
        """
        options = options or SearchOptions()
        if options.limit < 1:
            raise ValidationException("limit must be at least 1", field="limit")
        normalized = normalize_query(query)
        if not normalized:
            return []
        tokens = tokenize(normalized)

        results: list[SearchResult] = []
        for entry in self._candidates(options):
            relevance = score_entry(normalized, tokens, entry)
            if relevance == 0:
                continue
            results.append(
                SearchResult(
                    type=entry.kind.value,
                    id=entry.id,
                    title=entry.title,
                    description=entry.description,
                    url=entry.url,
                    priority=entry.base_priority,
                    relevance=relevance,
                )
            )
        results.sort(key=lambda r: (-r.relevance, -r.priority))
        return results[: options.limit]
