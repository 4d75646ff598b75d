"""In-memory analytics event store (per application instance, bounded)."""

from __future__ import annotations

import threading
from collections import deque

from drq_site.application.dtos.analytics import AnalyticsEvent


class InMemoryAnalyticsRepository:
    """Most recent client events; the oldest are dropped past max_events."""

    def __init__(self, max_events: int = 1000) -> None:
        self._items: deque[AnalyticsEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def add(self, event: AnalyticsEvent) -> AnalyticsEvent:
        with self._lock:
            self._items.append(event)
        return event

    def list_all(self) -> list[AnalyticsEvent]:
        with self._lock:
            return list(self._items)

    def count(self) -> int:
        with self._lock:
            return len(self._items)
