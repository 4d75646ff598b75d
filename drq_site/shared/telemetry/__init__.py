"""Shared telemetry: logging setup, OpenTelemetry config, tracing helpers, tracking sinks."""

from drq_site.shared.telemetry.logging import setup_logging
from drq_site.shared.telemetry.sinks import (
    LoggingTrackingSink,
    NoOpTrackingSink,
    SpanEventTrackingSink,
    build_tracking_sink,
)
from drq_site.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry
from drq_site.shared.telemetry.tracing import add_span_attributes, add_span_event, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "NoOpTrackingSink",
    "LoggingTrackingSink",
    "SpanEventTrackingSink",
    "build_tracking_sink",
]
