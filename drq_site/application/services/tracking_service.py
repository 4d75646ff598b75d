"""Site analytics tracking.

Named business events (searches, emergency contacts, service-area checks,
form submissions, errors) routed to an injected ITrackingSink. The sink is
chosen in the composition root; NoOpTrackingSink is used when tracking is
disabled so call sites never check for availability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from drq_site.application.interfaces.services import ITrackingSink

ContactMethod = Literal["phone", "form"]


class TrackingService:
    """Thin event vocabulary over a tracking sink."""

    def __init__(self, sink: "ITrackingSink") -> None:
        self.sink = sink

    def track_search(self, query: str, result_count: int, cached: bool) -> None:
        self.sink.emit(
            "search",
            "Search",
            "cached" if cached else "fresh",
            label=query,
            value=result_count,
        )

    def track_emergency_contact(self, method: ContactMethod, location: str | None = None) -> None:
        self.sink.emit(
            "emergency_contact",
            "Emergency",
            method,
            label=location or "unknown",
        )

    def track_service_area(self, area: str, found: bool) -> None:
        self.sink.emit(
            "service_area_check",
            "Service Areas",
            "area_found" if found else "area_not_found",
            label=area,
        )

    def track_form_submission(self, form_type: str, success: bool) -> None:
        self.sink.emit(
            "form_submission",
            "Forms",
            "success" if success else "failure",
            label=form_type,
        )

    def track_error_occurrence(self, error_type: str, message: str) -> None:
        self.sink.emit(
            "error_occurrence",
            "Errors",
            error_type,
            label=message,
            attributes={"non_interaction": True},
        )

    def track_client_event(self, event: str, data: dict[str, Any]) -> None:
        """Forward a browser-reported event; its type (if any) becomes the action."""
        self.sink.emit(
            event,
            "Client",
            str(data.get("type") or "event"),
            label=data.get("path"),
        )
