"""Read-only site catalog built from compiled-in data.

Implements ICatalog. Built once (build_default_catalog) and shared by the
relevance search and the suggestion engine; never mutated afterwards.
"""

import logging
from collections.abc import Iterable
from types import MappingProxyType

from drq_site.domain.catalog import CatalogEntry
from drq_site.domain.enums import CatalogKind
from drq_site.infrastructure.catalog import data

logger = logging.getLogger(__name__)

SERVICE_PRIORITY = 10
LOCATION_PRIORITY = 5
ARTICLE_PRIORITY = 3
NAV_ITEM_PRIORITY = 1


class StaticCatalog:
    """Immutable, per-kind ordered catalog with unique ids within a kind."""

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        """Index entries by kind, preserving order.

        Raises:
            ValueError: If an id repeats within a kind.
        """
        by_kind: dict[CatalogKind, list[CatalogEntry]] = {kind: [] for kind in CatalogKind}
        index: dict[tuple[CatalogKind, str], CatalogEntry] = {}
        for entry in entries:
            key = (entry.kind, entry.id)
            if key in index:
                raise ValueError(f"Duplicate {entry.kind.value} id in catalog: {entry.id!r}")
            index[key] = entry
            by_kind[entry.kind].append(entry)
        self._by_kind = MappingProxyType({k: tuple(v) for k, v in by_kind.items()})
        self._index = MappingProxyType(index)

    def __len__(self) -> int:
        return len(self._index)

    def entries(self, kind: CatalogKind) -> tuple[CatalogEntry, ...]:
        return self._by_kind[kind]

    def get(self, kind: CatalogKind, entry_id: str) -> CatalogEntry | None:
        return self._index.get((kind, entry_id))

    def ids(self, kind: CatalogKind) -> list[str]:
        return [e.id for e in self._by_kind[kind]]


def _service_entries() -> list[CatalogEntry]:
    return [
        CatalogEntry(
            kind=CatalogKind.SERVICE,
            id=s["id"],
            title=s["title"],
            description=s["description"],
            url=f"/services/{s['id']}",
            base_priority=SERVICE_PRIORITY,
            keywords=tuple(s["keywords"]),
        )
        for s in data.SERVICES
    ]


def _location_entries() -> list[CatalogEntry]:
    entries = []
    for loc in data.LOCATIONS:
        regions = ", ".join(loc["regions"])
        entries.append(
            CatalogEntry(
                kind=CatalogKind.LOCATION,
                id=loc["id"],
                title=loc["name"],
                description=(
                    f"Emergency services available in {loc['name']} and surrounding areas "
                    f"including {regions}"
                ),
                url=f"/locations/{loc['id']}",
                base_priority=LOCATION_PRIORITY,
                keywords=tuple(s.lower() for s in loc["suburbs"]),
            )
        )
    return entries


def _article_entries() -> list[CatalogEntry]:
    return [
        CatalogEntry(
            kind=CatalogKind.ARTICLE,
            id=a["id"],
            title=a["title"],
            description=a["description"],
            url=f"/blog/{a['id']}",
            base_priority=ARTICLE_PRIORITY,
            keywords=tuple(a["tags"]),
        )
        for a in data.ARTICLES
    ]


def _nav_entries() -> list[CatalogEntry]:
    return [
        CatalogEntry(
            kind=CatalogKind.NAV_ITEM,
            id=n["id"],
            title=n["title"],
            description="",
            url=n["href"],
            base_priority=NAV_ITEM_PRIORITY,
        )
        for n in data.NAV_ITEMS
    ]


def build_default_catalog() -> StaticCatalog:
    """Build the site catalog from drq_site.infrastructure.catalog.data."""
    catalog = StaticCatalog(
        [*_service_entries(), *_location_entries(), *_article_entries(), *_nav_entries()]
    )
    logger.info("Catalog loaded: %s entries", len(catalog))
    return catalog
