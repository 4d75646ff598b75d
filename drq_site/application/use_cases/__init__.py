"""Application use cases (orchestrate services, cache, repositories)."""

from drq_site.application.use_cases.analytics import AnalyticsService
from drq_site.application.use_cases.intake import ContactService, EmergencyRequestService
from drq_site.application.use_cases.search import SearchService
from drq_site.application.use_cases.service_areas import ServiceAreaService, validate_postcode
from drq_site.application.use_cases.services_listing import list_services

__all__ = [
    "AnalyticsService",
    "ContactService",
    "EmergencyRequestService",
    "SearchService",
    "ServiceAreaService",
    "list_services",
    "validate_postcode",
]
