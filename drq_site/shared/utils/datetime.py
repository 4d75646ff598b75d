"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def iso_timestamp(dt: datetime | None = None) -> str:
    """
    ISO 8601 UTC timestamp with millisecond precision and a 'Z' suffix
    (e.g. '2026-10-19T03:04:05.123Z'), as used in API response bodies.

    Args:
        dt: Datetime to format; defaults to now. Naive values are taken as UTC.

    Returns:
        Formatted timestamp string
    """
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
