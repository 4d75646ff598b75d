"""DTOs for client analytics events."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class AnalyticsEvent:
    """A client-reported event as stored by the analytics repository."""

    event: str
    data: dict[str, Any] = field(default_factory=dict)
    received_at: datetime | None = None
