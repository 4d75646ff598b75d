"""Static site catalog (compiled-in content)."""

from drq_site.infrastructure.catalog.static_catalog import (
    StaticCatalog,
    build_default_catalog,
)

__all__ = ["StaticCatalog", "build_default_catalog"]
