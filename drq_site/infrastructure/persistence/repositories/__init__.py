"""Persistence repositories. Re-exports for dependency injection."""

from drq_site.infrastructure.persistence.repositories.analytics_repo import (
    InMemoryAnalyticsRepository,
)
from drq_site.infrastructure.persistence.repositories.contact_repo import (
    InMemoryContactRepository,
)
from drq_site.infrastructure.persistence.repositories.emergency_request_repo import (
    InMemoryEmergencyRequestRepository,
)
from drq_site.infrastructure.persistence.repositories.service_area_repo import (
    StaticServiceAreaRepository,
)

__all__ = [
    "InMemoryAnalyticsRepository",
    "InMemoryContactRepository",
    "InMemoryEmergencyRequestRepository",
    "StaticServiceAreaRepository",
]
