"""Tests for ServiceAreaService (listing, postcode lookup, coverage)."""

import pytest

from drq_site.application.use_cases.service_areas import ServiceAreaService, validate_postcode
from drq_site.domain.exceptions import ServiceAreaNotFoundException, ValidationException
from drq_site.infrastructure.cache.memory_cache import ResultCache
from drq_site.infrastructure.persistence.repositories import StaticServiceAreaRepository


@pytest.fixture
def cache(clock) -> ResultCache:
    return ResultCache(clock=clock)


@pytest.fixture
def service(cache, tracking) -> ServiceAreaService:
    return ServiceAreaService(StaticServiceAreaRepository(), cache, tracking)


@pytest.mark.parametrize("postcode", [None, ""])
def test_missing_postcode(postcode) -> None:
    with pytest.raises(ValidationException, match="required"):
        validate_postcode(postcode)


@pytest.mark.parametrize(
    "postcode", ["abc1", "400", "40000", " 4000", "4o00", 4217, 0, ["4217"]]
)
def test_malformed_postcode(postcode) -> None:
    with pytest.raises(ValidationException, match="4 digits"):
        validate_postcode(postcode)


def test_list_areas_is_cached(service, cache) -> None:
    areas = service.list_areas()
    assert [a.name for a in areas] == ["Brisbane", "Gold Coast", "Sunshine Coast"]
    assert cache.get("service-areas:all") == areas


def test_find_by_postcode_exact_match(service, sink) -> None:
    areas = service.find_by_postcode("4217")
    assert [a.postcode for a in areas] == ["4217"]
    assert sink.events[-1]["action"] == "area_found"


def test_find_by_postcode_none_found(service, sink) -> None:
    with pytest.raises(ServiceAreaNotFoundException):
        service.find_by_postcode("9999")
    assert sink.events[-1]["action"] == "area_not_found"


def test_postcode_cache_ttl(service, cache, clock) -> None:
    service.find_by_postcode("4000")
    assert cache.get("service-areas:postcode:4000") is not None
    clock.advance(12 * 60 * 60)
    assert cache.get("service-areas:postcode:4000") is None


def test_check_coverage_inside_range(service) -> None:
    coverage = service.check_coverage("4120")
    assert coverage.is_serviced is True
    assert coverage.areas == ["Brisbane", "Logan"]


def test_check_coverage_outside(service) -> None:
    coverage = service.check_coverage("2000")
    assert coverage.is_serviced is False
    assert coverage.areas == []


def test_range_bounds_inclusive(service) -> None:
    assert service.is_serviced("4207")
    assert service.is_serviced("4230")
    assert not service.is_serviced("4231")
    assert not service.is_serviced("abcd")


def test_find_region_returns_first_match(service, sink) -> None:
    assert service.find_region("4120").area == "Brisbane"
    assert sink.events[-1]["action"] == "area_found"
    assert service.find_region("2000") is None
    assert sink.events[-1]["action"] == "area_not_found"


def test_find_region_rejects_numbers(service) -> None:
    with pytest.raises(ValidationException):
        service.find_region(4120)
