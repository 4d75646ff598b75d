"""In-memory contact submission repository (per application instance)."""

from __future__ import annotations

import threading

from drq_site.application.dtos.intake import ContactSubmissionCreate, ContactSubmissionResult
from drq_site.shared.utils.datetime import utc_now


class InMemoryContactRepository:
    """Contact form submissions in arrival order."""

    def __init__(self) -> None:
        self._items: list[ContactSubmissionResult] = []
        self._lock = threading.Lock()

    def add(self, submission_id: str, data: ContactSubmissionCreate) -> ContactSubmissionResult:
        result = ContactSubmissionResult(
            id=submission_id,
            name=data.name,
            email=data.email,
            message=data.message,
            phone=data.phone,
            postcode=data.postcode,
            service_type=data.service_type,
            is_emergency=data.is_emergency,
            received_at=utc_now(),
        )
        with self._lock:
            self._items.append(result)
        return result

    def list_recent(self, limit: int = 50) -> list[ContactSubmissionResult]:
        with self._lock:
            return list(reversed(self._items[-limit:])) if limit > 0 else []
