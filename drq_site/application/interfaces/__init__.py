"""Application ports: repository and service Protocols."""

from drq_site.application.interfaces.repositories import (
    IAnalyticsRepository,
    ICatalog,
    IContactRepository,
    IEmergencyRequestRepository,
    IServiceAreaRepository,
)
from drq_site.application.interfaces.services import IResultCache, ITrackingSink

__all__ = [
    "IAnalyticsRepository",
    "ICatalog",
    "IContactRepository",
    "IEmergencyRequestRepository",
    "IResultCache",
    "IServiceAreaRepository",
    "ITrackingSink",
]
