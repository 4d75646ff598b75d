"""Tracking sinks: where TrackingService events end up.

Selected by TRACKING_SINK: "none" drops events, "logging" writes one log
line per event, "otel" attaches them to the current span as events.
Sinks never raise into request handling.
"""

import logging
from typing import Any

from drq_site.core.config import Settings
from drq_site.shared.telemetry.tracing import add_span_event

logger = logging.getLogger(__name__)


def _event_attributes(
    category: str,
    action: str,
    label: str | None,
    value: int | float | None,
    attributes: dict[str, Any] | None,
) -> dict[str, Any]:
    attrs: dict[str, Any] = {"event_category": category, "event_action": action}
    if label is not None:
        attrs["event_label"] = label
    if value is not None:
        attrs["value"] = value
    if attributes:
        attrs.update(attributes)
    return attrs


class NoOpTrackingSink:
    """Discards every event."""

    def emit(
        self,
        event: str,
        category: str,
        action: str,
        label: str | None = None,
        value: int | float | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        return None


class LoggingTrackingSink:
    """Writes events to the drq_site.tracking logger at INFO."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logging.getLogger("drq_site.tracking")

    def emit(
        self,
        event: str,
        category: str,
        action: str,
        label: str | None = None,
        value: int | float | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        try:
            self.log.info(
                "track %s %s", event, _event_attributes(category, action, label, value, attributes)
            )
        except Exception:
            logger.exception("Tracking sink failed for event %s", event)


class SpanEventTrackingSink:
    """Adds events to the active OpenTelemetry span (dropped when none is recording)."""

    def emit(
        self,
        event: str,
        category: str,
        action: str,
        label: str | None = None,
        value: int | float | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        try:
            attrs = _event_attributes(category, action, label, value, attributes)
            add_span_event(
                f"track.{event}",
                {k: v if isinstance(v, (str, int, float, bool)) else str(v) for k, v in attrs.items()},
            )
        except Exception:
            logger.exception("Tracking sink failed for event %s", event)


def build_tracking_sink(
    settings: Settings,
) -> NoOpTrackingSink | LoggingTrackingSink | SpanEventTrackingSink:
    """Sink for the configured TRACKING_SINK (NoOp when tracking is disabled)."""
    if not settings.tracking_enabled or settings.tracking_sink == "none":
        return NoOpTrackingSink()
    if settings.tracking_sink == "otel":
        return SpanEventTrackingSink()
    return LoggingTrackingSink()
