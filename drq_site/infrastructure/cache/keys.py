"""Cache key builders. Single place for key format (DRY).

Fixed key components (prefixes, literal segments) must not contain
CACHE_KEY_SEP. Free-text components (search queries, filter values) are
percent-encoded so user input can never produce an ambiguous key.
"""

from collections.abc import Iterable, Mapping
from urllib.parse import quote

from drq_site.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_SEARCH,
    CACHE_PREFIX_SERVICE_AREAS,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value contains CACHE_KEY_SEP.
    """
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def _encode(value: object) -> str:
    """Percent-encode a free-text component (the separator included)."""
    return quote(str(value), safe="")


def generate_cache_key(parts: Iterable[str]) -> str:
    """Join ordered fixed parts with the separator.

    Raises:
        ValueError: If a part contains CACHE_KEY_SEP.
    """
    parts = list(parts)
    for index, part in enumerate(parts):
        _validate_key_component(part, f"parts[{index}]")
    return CACHE_KEY_SEP.join(parts)


def search_key(query: str, filters: Mapping[str, object] | None = None) -> str:
    """Cache key for a search; independent of filter order.

    The query is lower-cased with whitespace runs collapsed, the same form the
    scorer matches on. Unset (None) filters are omitted and the rest are
    emitted sorted by name as name=value.
    """
    normalized = " ".join(query.lower().split())
    parts = [CACHE_PREFIX_SEARCH, _encode(normalized)]
    for name in sorted(filters or {}):
        value = (filters or {})[name]
        if value is None:
            continue
        _validate_key_component(name, "filter name")
        parts.append(f"{name}={_encode(value)}")
    return CACHE_KEY_SEP.join(parts)


def service_areas_all_key() -> str:
    """Cache key for the full service-area list."""
    return generate_cache_key([CACHE_PREFIX_SERVICE_AREAS, "all"])


def service_areas_postcode_key(postcode: str) -> str:
    """Cache key for service areas matching one postcode."""
    _validate_key_component(postcode, "postcode")
    return generate_cache_key([CACHE_PREFIX_SERVICE_AREAS, "postcode", postcode])
