"""Tests for TrackingService and the tracking sinks."""

import logging

from opentelemetry.sdk.trace import TracerProvider

from drq_site.core.config import Settings
from drq_site.shared.telemetry.sinks import (
    LoggingTrackingSink,
    NoOpTrackingSink,
    SpanEventTrackingSink,
    build_tracking_sink,
)


class TestTrackingService:
    def test_track_search(self, tracking, sink) -> None:
        tracking.track_search("water", 3, cached=True)
        assert sink.events == [
            {
                "event": "search",
                "category": "Search",
                "action": "cached",
                "label": "water",
                "value": 3,
                "attributes": None,
            }
        ]

    def test_track_emergency_contact_default_location(self, tracking, sink) -> None:
        tracking.track_emergency_contact("phone")
        assert sink.events[0]["label"] == "unknown"
        assert sink.events[0]["action"] == "phone"

    def test_track_service_area(self, tracking, sink) -> None:
        tracking.track_service_area("4217", found=False)
        assert sink.events[0]["action"] == "area_not_found"

    def test_track_form_and_error(self, tracking, sink) -> None:
        tracking.track_form_submission("contact", success=True)
        tracking.track_error_occurrence("404", "/nope")
        assert sink.names() == ["form_submission", "error_occurrence"]
        assert sink.events[1]["attributes"] == {"non_interaction": True}


class TestSinks:
    def test_noop_accepts_events(self) -> None:
        assert NoOpTrackingSink().emit("search", "Search", "fresh") is None

    def test_logging_sink_writes_info(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="drq_site.tracking"):
            LoggingTrackingSink().emit("search", "Search", "fresh", label="mould", value=2)
        assert "track search" in caplog.text
        assert "mould" in caplog.text

    def test_span_sink_adds_event_to_current_span(self) -> None:
        tracer = TracerProvider().get_tracer(__name__)
        with tracer.start_as_current_span("request") as span:
            SpanEventTrackingSink().emit("search", "Search", "fresh", label="fire", value=1)
        assert [e.name for e in span.events] == ["track.search"]
        assert span.events[0].attributes["event_label"] == "fire"

    def test_span_sink_without_span_does_not_raise(self) -> None:
        SpanEventTrackingSink().emit("search", "Search", "fresh")


class TestBuildTrackingSink:
    def test_disabled_is_noop(self) -> None:
        sink = build_tracking_sink(Settings(tracking_enabled=False, tracking_sink="logging"))
        assert isinstance(sink, NoOpTrackingSink)

    def test_selects_by_name(self) -> None:
        assert isinstance(build_tracking_sink(Settings(tracking_sink="none")), NoOpTrackingSink)
        assert isinstance(build_tracking_sink(Settings(tracking_sink="logging")), LoggingTrackingSink)
        assert isinstance(build_tracking_sink(Settings(tracking_sink="otel")), SpanEventTrackingSink)
