"""Domain layer: catalog entries, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from drq_site.domain.catalog import CatalogEntry
from drq_site.domain.enums import CatalogKind, SuggestionType
from drq_site.domain.exceptions import (
    FeatureDisabledException,
    OutsideServiceAreaException,
    ResourceNotFoundException,
    ServiceAreaNotFoundException,
    ServiceUnavailableException,
    SiteException,
    ValidationException,
)

__all__ = [
    # Catalog
    "CatalogEntry",
    # Enums
    "CatalogKind",
    "SuggestionType",
    # Exceptions
    "FeatureDisabledException",
    "OutsideServiceAreaException",
    "ResourceNotFoundException",
    "ServiceAreaNotFoundException",
    "ServiceUnavailableException",
    "SiteException",
    "ValidationException",
]
