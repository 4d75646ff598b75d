"""Tests for RelevanceSearch scoring, ordering and filters."""

import pytest

from drq_site.application.dtos.search import SearchOptions
from drq_site.application.services.relevance_search import (
    FULL_MATCH_SCORE,
    KEYWORD_SCORE,
    TOKEN_SCORE,
    RelevanceSearch,
    get_emergency_keywords,
    is_emergency_search,
    score_entry,
    tokenize,
)
from drq_site.domain.catalog import CatalogEntry
from drq_site.domain.enums import CatalogKind
from drq_site.domain.exceptions import ValidationException
from drq_site.infrastructure.catalog import StaticCatalog


def _entry(id: str, title: str, description: str = "", keywords=(), priority: int = 0, kind=CatalogKind.SERVICE) -> CatalogEntry:
    return CatalogEntry(
        kind=kind,
        id=id,
        title=title,
        description=description,
        url=f"/{kind.value}/{id}",
        base_priority=priority,
        keywords=tuple(keywords),
    )


class TestScoreEntry:
    def test_full_match_keyword_and_tokens(self) -> None:
        entry = _entry("water-damage", "Water Damage Restoration", keywords=["water"])
        query = "water damage"
        score = score_entry(query, tokenize(query), entry)
        assert score == FULL_MATCH_SCORE + KEYWORD_SCORE + 2 * TOKEN_SCORE

    def test_keyword_compare_is_case_insensitive(self) -> None:
        entry = _entry("fire", "Something", keywords=["Smoke"])
        assert score_entry("smoke", ["smoke"], entry) == KEYWORD_SCORE

    def test_no_overlap_scores_zero(self) -> None:
        entry = _entry("fire", "Fire Recovery", keywords=["fire"])
        assert score_entry("asbestos", ["asbestos"], entry) == 0


class TestRelevanceSearch:
    @pytest.mark.parametrize("query", ["water", "water damage", "mould", "brisbane", "fire smoke", "flood"])
    def test_results_sorted_by_relevance_then_priority(self, catalog, query: str) -> None:
        results = RelevanceSearch(catalog).search(query, SearchOptions(limit=50))
        assert results
        for a, b in zip(results, results[1:]):
            assert a.relevance > b.relevance or (
                a.relevance == b.relevance and a.priority >= b.priority
            )

    def test_empty_query_returns_empty_list(self, catalog) -> None:
        engine = RelevanceSearch(catalog)
        assert engine.search("") == []
        assert engine.search("   ") == []

    def test_repeated_whitespace_keeps_full_match(self, catalog) -> None:
        engine = RelevanceSearch(catalog)
        assert engine.search("water \t damage") == engine.search("water damage")

    def test_zero_scores_are_dropped(self, catalog) -> None:
        assert RelevanceSearch(catalog).search("qwertyuiop") == []

    def test_best_match_first(self, catalog) -> None:
        results = RelevanceSearch(catalog).search("water damage")
        assert results[0].id == "water-damage"
        assert results[0].type == "service"
        assert results[0].url == "/services/water-damage"

    def test_priority_breaks_ties(self) -> None:
        catalog = StaticCatalog([
            _entry("low", "Roof leak", priority=1, kind=CatalogKind.ARTICLE),
            _entry("high", "Roof leak", priority=10),
        ])
        results = RelevanceSearch(catalog).search("roof leak")
        assert [r.id for r in results] == ["high", "low"]
        assert results[0].relevance == results[1].relevance

    def test_limit_truncates(self, catalog) -> None:
        results = RelevanceSearch(catalog).search("damage", SearchOptions(limit=2))
        assert len(results) == 2

    def test_limit_below_one_rejected(self, catalog) -> None:
        with pytest.raises(ValidationException):
            RelevanceSearch(catalog).search("water", SearchOptions(limit=0))

    def test_kind_filter(self, catalog) -> None:
        results = RelevanceSearch(catalog).search("water", SearchOptions(kind="article"))
        assert results
        assert {r.type for r in results} == {"article"}

    def test_location_filter_restricts_locations(self, catalog) -> None:
        results = RelevanceSearch(catalog).search(
            "emergency services", SearchOptions(kind="location", location="Logan")
        )
        assert [r.id for r in results] == ["logan"]

    def test_service_filter_restricts_services(self, catalog) -> None:
        results = RelevanceSearch(catalog).search(
            "restoration", SearchOptions(kind="service", service="fire-damage")
        )
        assert [r.id for r in results] == ["fire-damage"]

    def test_nav_items_not_searchable(self, catalog) -> None:
        results = RelevanceSearch(catalog).search("faq", SearchOptions(limit=50))
        assert all(r.type != "nav-item" for r in results)

    def test_location_suburb_keyword(self, catalog) -> None:
        results = RelevanceSearch(catalog).search("springfield")
        assert results[0].id == "ipswich"


class TestEmergencyKeywords:
    def test_keywords_listed(self) -> None:
        assert "emergency" in get_emergency_keywords()

    def test_is_emergency_search(self) -> None:
        assert is_emergency_search("Emergency plumber")
        assert is_emergency_search("burst pipe leak")
        assert not is_emergency_search("about us")
        assert not is_emergency_search("")
