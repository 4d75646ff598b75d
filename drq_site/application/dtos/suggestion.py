"""DTOs for not-found route suggestions."""

from dataclasses import dataclass

from drq_site.domain.enums import SuggestionType


@dataclass(frozen=True)
class SuggestionCandidate:
    """A known route close (by edit distance) to a broken path segment."""

    path: str
    title: str
    type: SuggestionType
    distance: int
    relevance: float  # 1 - distance / max(len(a), len(b)), in [0, 1]


@dataclass(frozen=True)
class NotFoundContext:
    """Everything a not-found page needs to help the visitor recover."""

    path: str
    message: str
    suggestions: list[SuggestionCandidate]
    section_links: list[str]
