"""Client analytics intake: store events and forward them to the tracking sink."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from drq_site.application.dtos.analytics import AnalyticsEvent
from drq_site.domain.exceptions import FeatureDisabledException
from drq_site.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from drq_site.application.interfaces.repositories import IAnalyticsRepository
    from drq_site.application.services.tracking_service import TrackingService

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Record client events; listing them is a development-only feature."""

    def __init__(
        self,
        repo: "IAnalyticsRepository",
        tracking: "TrackingService",
        listing_enabled: bool = False,
    ) -> None:
        self.repo = repo
        self.tracking = tracking
        self.listing_enabled = listing_enabled

    def record(self, event: str, data: dict[str, Any]) -> AnalyticsEvent:
        stored = self.repo.add(AnalyticsEvent(event=event, data=dict(data), received_at=utc_now()))
        logger.debug("Analytics event %s from %s", event, data.get("path"))
        self.tracking.track_client_event(event, data)
        return stored

    def list_events(self) -> list[AnalyticsEvent]:
        """Stored events, oldest first.

        Raises:
            FeatureDisabledException: Outside debug mode.
        """
        if not self.listing_enabled:
            raise FeatureDisabledException("Not available in production")
        return self.repo.list_all()
