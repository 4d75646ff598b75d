"""Tests for cache key builders."""

import pytest

from drq_site.infrastructure.cache.keys import (
    generate_cache_key,
    search_key,
    service_areas_all_key,
    service_areas_postcode_key,
)


def test_search_key_ignores_filter_order() -> None:
    a = search_key("water", {"type": "service", "limit": 10, "location": None})
    b = search_key("water", {"limit": 10, "location": None, "type": "service"})
    assert a == b


def test_search_key_normalizes_query() -> None:
    assert search_key("  Water   Damage ") == search_key("water damage")


def test_search_key_differs_by_filter_value() -> None:
    assert search_key("water", {"limit": 10}) != search_key("water", {"limit": 5})


def test_search_key_omits_unset_filters() -> None:
    assert search_key("water", {"service": None}) == search_key("water", {})


def test_search_key_escapes_separator() -> None:
    key = search_key("a:b")
    assert key == "search:a%3Ab"


def test_service_area_keys() -> None:
    assert service_areas_all_key() == "service-areas:all"
    assert service_areas_postcode_key("4217") == "service-areas:postcode:4217"


def test_fixed_parts_reject_separator() -> None:
    with pytest.raises(ValueError):
        generate_cache_key(["service-areas", "bad:part"])
