"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain objects or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from drq_site.application.dtos.analytics import AnalyticsEvent
    from drq_site.application.dtos.intake import (
        ContactSubmissionCreate,
        ContactSubmissionResult,
        EmergencyRequestCreate,
        EmergencyRequestResult,
    )
    from drq_site.application.dtos.service_area import PostcodeRange, ServiceArea
    from drq_site.domain.catalog import CatalogEntry
    from drq_site.domain.enums import CatalogKind


# Static catalog interface
class ICatalog(Protocol):
    """Protocol for the read-only site catalog (services, locations, articles, nav items)."""

    def entries(self, kind: CatalogKind) -> tuple[CatalogEntry, ...]:
        """Return all entries of a kind in declaration order."""

    def get(self, kind: CatalogKind, entry_id: str) -> CatalogEntry | None:
        """Return the entry with id in kind, or None."""

    def ids(self, kind: CatalogKind) -> list[str]:
        """Return entry ids of a kind in declaration order."""


# Service area repository interface
class IServiceAreaRepository(Protocol):
    """Protocol for service areas and postcode ranges (read-only)."""

    def list_all(self) -> list[ServiceArea]:
        """Return every service area."""

    def find_by_postcode(self, postcode: str) -> list[ServiceArea]:
        """Return service areas whose postcode equals postcode."""

    def postcode_ranges(self) -> list[PostcodeRange]:
        """Return covered postcode ranges in declaration order."""


# Emergency request repository interface
class IEmergencyRequestRepository(Protocol):
    """Protocol for storing emergency callback requests."""

    def add(self, request_id: str, data: EmergencyRequestCreate) -> EmergencyRequestResult:
        """Store a new request under request_id and return it."""

    def get_by_id(self, request_id: str) -> EmergencyRequestResult | None:
        """Return a stored request or None."""

    def count(self) -> int:
        """Return the number of stored requests."""


# Contact submission repository interface
class IContactRepository(Protocol):
    """Protocol for storing contact form submissions."""

    def add(self, submission_id: str, data: ContactSubmissionCreate) -> ContactSubmissionResult:
        """Store a submission and return it."""

    def list_recent(self, limit: int = 50) -> list[ContactSubmissionResult]:
        """Return most recent submissions first."""


# Analytics event repository interface
class IAnalyticsRepository(Protocol):
    """Protocol for storing client analytics events."""

    def add(self, event: AnalyticsEvent) -> AnalyticsEvent:
        """Store an event and return it."""

    def list_all(self) -> list[AnalyticsEvent]:
        """Return stored events, oldest first."""
