"""In-memory emergency request repository.

One instance per application (created in the lifespan and held on
app.state); contents are lost on restart. Guarded by a lock so concurrent
request handlers can add safely.
"""

from __future__ import annotations

import threading

from drq_site.application.dtos.intake import EmergencyRequestCreate, EmergencyRequestResult
from drq_site.shared.utils.datetime import utc_now


class InMemoryEmergencyRequestRepository:
    """Emergency callback requests keyed by request id."""

    def __init__(self, response_time: str = "1-2 hours") -> None:
        self.response_time = response_time
        self._items: dict[str, EmergencyRequestResult] = {}
        self._lock = threading.Lock()

    def add(self, request_id: str, data: EmergencyRequestCreate) -> EmergencyRequestResult:
        """Store a new request.

        Raises:
            ValueError: If request_id is already stored.
        """
        result = EmergencyRequestResult(
            id=request_id,
            name=data.name,
            phone=data.phone,
            service=data.service,
            postcode=data.postcode,
            message=data.message,
            received_at=utc_now(),
            response_time=self.response_time,
        )
        with self._lock:
            if request_id in self._items:
                raise ValueError(f"Emergency request id already exists: {request_id}")
            self._items[request_id] = result
        return result

    def get_by_id(self, request_id: str) -> EmergencyRequestResult | None:
        with self._lock:
            return self._items.get(request_id)

    def count(self) -> int:
        with self._lock:
            return len(self._items)
