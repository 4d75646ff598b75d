"""Domain enumerations for the restoration site.

Enums represent fixed sets of domain values (e.g. catalog entry kind).
"""

from enum import Enum


class CatalogKind(str, Enum):
    """Kind of a static catalog entry.

    Services, locations and articles are searchable; nav items only feed
    not-found suggestions.
    """

    SERVICE = "service"
    LOCATION = "location"
    ARTICLE = "article"
    NAV_ITEM = "nav-item"

    @classmethod
    def searchable(cls) -> tuple["CatalogKind", ...]:
        """Kinds the relevance search scans, in result order."""
        return (cls.SERVICE, cls.LOCATION, cls.ARTICLE)


class SuggestionType(str, Enum):
    """Where a not-found suggestion came from."""

    SERVICE = "service"
    LOCATION = "location"
    PAGE = "page"
