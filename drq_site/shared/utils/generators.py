"""ID and value generators (e.g. CUID, emergency request references)."""

import secrets
import string
import time

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

_BASE36 = string.digits + string.ascii_uppercase


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def to_base36(value: int) -> str:
    """Upper-case base-36 representation of a non-negative integer."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_emergency_request_id(now_ms: int | None = None) -> str:
    """Human-quotable reference: EMG-<base36 epoch ms>-<5 random base36 chars>."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
    return f"EMG-{to_base36(now_ms)}-{suffix}"
