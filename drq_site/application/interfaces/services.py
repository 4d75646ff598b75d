"""Service interfaces (ports) for the application layer.

Protocols define contracts for infrastructure services used by use cases (DIP).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


# Result cache interface
class IResultCache(Protocol):
    """Protocol for the process-local result cache."""

    def get_or_compute(
        self,
        key: str,
        compute: Callable[[], T],
        ttl: float,
        use_cache: bool = True,
        namespace: str | None = None,
    ) -> tuple[T, bool]:
        """Return (value, cached). Invoke compute only on miss or expiry."""


# Tracking sink interface
class ITrackingSink(Protocol):
    """Destination for analytics events (replaces a browser analytics global)."""

    def emit(
        self,
        event: str,
        category: str,
        action: str,
        label: str | None = None,
        value: int | float | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Record one analytics event. Must not raise."""
