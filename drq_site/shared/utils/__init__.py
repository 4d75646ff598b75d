"""Shared utilities: datetime and generators."""

from drq_site.shared.utils.datetime import iso_timestamp, utc_now
from drq_site.shared.utils.generators import (
    generate_cuid,
    generate_emergency_request_id,
    to_base36,
)

__all__ = [
    "generate_cuid",
    "generate_emergency_request_id",
    "iso_timestamp",
    "to_base36",
    "utc_now",
]
