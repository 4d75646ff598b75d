"""Catalog entry: the immutable unit of the static site catalog.

Entries are built once at startup from compiled-in data and never mutated.
"""

import re
from dataclasses import dataclass, field

from drq_site.domain.enums import CatalogKind

# Catalog ids are url slugs: lowercase alphanumeric with optional hyphens.
_SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@dataclass(frozen=True)
class CatalogEntry:
    """A service, location, article or nav item known to the site.

    Attributes:
        kind: Catalog kind; ids are unique within a kind.
        id: Stable slug identifier (e.g. 'water-damage').
        title: Display title.
        description: Display description.
        keywords: Search-boost terms, matched exactly against query tokens.
        url: Canonical path (e.g. '/services/water-damage').
        base_priority: Static tie-break weight (higher ranks first).
    """

    kind: CatalogKind
    id: str
    title: str
    description: str
    url: str
    base_priority: int = 0
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not _SLUG_RE.match(self.id):
            raise ValueError(f"Catalog id must be a lowercase slug, got: {self.id!r}")
        if not self.url.startswith("/"):
            raise ValueError(f"Catalog url must be an absolute path, got: {self.url!r}")

    @property
    def search_text(self) -> str:
        """Lower-cased title and description joined for substring matching."""
        return f"{self.title} {self.description}".lower()

    @property
    def path_tail(self) -> str:
        """Last segment of the url (empty for '/')."""
        return self.url.rstrip("/").rsplit("/", 1)[-1]
