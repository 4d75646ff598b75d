"""Tests for SearchService (cache in front of RelevanceSearch, tracking)."""

import pytest

from drq_site.application.dtos.search import SearchOptions
from drq_site.application.services.relevance_search import RelevanceSearch
from drq_site.application.use_cases.search import SearchService
from drq_site.infrastructure.cache.memory_cache import ResultCache


class CountingEngine(RelevanceSearch):
    def __init__(self, catalog) -> None:
        super().__init__(catalog)
        self.calls = 0

    def search(self, query, options=None):
        self.calls += 1
        return super().search(query, options)


@pytest.fixture
def engine(catalog) -> CountingEngine:
    return CountingEngine(catalog)


@pytest.fixture
def service(engine, tracking, clock) -> SearchService:
    return SearchService(engine, ResultCache(clock=clock), tracking, ttl=300)


def test_second_identical_search_is_cached(service, engine) -> None:
    first = service.search("water damage")
    second = service.search("water damage")
    assert first.cached is False
    assert second.cached is True
    assert second.results == first.results
    assert engine.calls == 1


def test_cache_expires_after_ttl(service, engine, clock) -> None:
    service.search("mould")
    clock.advance(300)
    assert service.search("mould").cached is False
    assert engine.calls == 2


def test_different_options_are_separate_entries(service, engine) -> None:
    service.search("water", SearchOptions(kind="service"))
    service.search("water", SearchOptions(kind="article"))
    assert engine.calls == 2


def test_tracks_search_and_emergency(service, sink) -> None:
    service.search("emergency flood")
    assert sink.names() == ["emergency_contact", "search"]
    assert sink.events[0]["label"] == "search-api"
    assert sink.events[1]["action"] == "fresh"


def test_engine_failure_propagates_and_is_not_cached(catalog, tracking, clock) -> None:
    class Broken(RelevanceSearch):
        def search(self, query, options=None):
            raise RuntimeError("index corrupted")

    cache = ResultCache(clock=clock)
    svc = SearchService(Broken(catalog), cache, tracking)
    with pytest.raises(RuntimeError):
        svc.search("water")
    assert len(cache) == 0


def test_whitespace_variants_share_key_and_scores(service, engine) -> None:
    service.search("water  damage")
    second = service.search("  Water damage ")
    assert second.cached is True
    assert second.results == engine.search("water damage")
    assert engine.calls == 2
