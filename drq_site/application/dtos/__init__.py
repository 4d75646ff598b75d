"""Application DTOs (no web-layer dependency)."""

from drq_site.application.dtos.analytics import AnalyticsEvent
from drq_site.application.dtos.intake import (
    ContactSubmissionCreate,
    ContactSubmissionResult,
    EmergencyRequestCreate,
    EmergencyRequestResult,
    ProcessStep,
    ServiceDetail,
)
from drq_site.application.dtos.search import (
    SearchKind,
    SearchOptions,
    SearchOutcome,
    SearchResult,
)
from drq_site.application.dtos.service_area import (
    PostcodeCoverage,
    PostcodeRange,
    ServiceArea,
)
from drq_site.application.dtos.suggestion import NotFoundContext, SuggestionCandidate

__all__ = [
    "AnalyticsEvent",
    "ContactSubmissionCreate",
    "ContactSubmissionResult",
    "EmergencyRequestCreate",
    "EmergencyRequestResult",
    "NotFoundContext",
    "PostcodeCoverage",
    "PostcodeRange",
    "ProcessStep",
    "SearchKind",
    "SearchOptions",
    "SearchOutcome",
    "SearchResult",
    "ServiceArea",
    "ServiceDetail",
    "SuggestionCandidate",
]
