"""Tests for Levenshtein distance and SuggestionEngine."""

import pytest

from drq_site.application.services.suggestion_engine import (
    SuggestionEngine,
    levenshtein_distance,
    similarity,
)
from drq_site.domain.enums import SuggestionType


class TestLevenshtein:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("", "", 0),
            ("", "abc", 3),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("wter-damage", "water-damage", 1),
            ("same", "same", 0),
        ],
    )
    def test_known_distances(self, a: str, b: str, expected: int) -> None:
        assert levenshtein_distance(a, b) == expected

    @pytest.mark.parametrize(
        ("a", "b"),
        [("brisbane", "brisbnae"), ("logan", "ipswich"), ("", "faq"), ("mould", "mold")],
    )
    def test_symmetric(self, a: str, b: str) -> None:
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_similarity_guards_empty(self) -> None:
        assert similarity("", "", 0) == 0.0
        assert similarity("abcd", "abce", 1) == 0.75


class TestSuggest:
    def test_typo_suggests_water_damage(self, catalog) -> None:
        suggestions = SuggestionEngine(catalog).suggest("/services/wter-damage")
        assert len(suggestions) <= 5
        match = next(s for s in suggestions if s.path == "/services/water-damage")
        assert match.distance == 1
        assert match.relevance > 0.9
        assert match.type is SuggestionType.SERVICE
        assert suggestions[0] is match

    def test_no_close_match(self, catalog) -> None:
        suggestions = SuggestionEngine(catalog).suggest("/services/xyzxyzxyz")
        assert len(suggestions) < 5

    def test_location_typo(self, catalog) -> None:
        suggestions = SuggestionEngine(catalog).suggest("/locations/brisbne")
        assert suggestions[0].path == "/locations/brisbane"
        assert suggestions[0].type is SuggestionType.LOCATION

    def test_nav_page_typo(self, catalog) -> None:
        suggestions = SuggestionEngine(catalog).suggest("/contcat")
        assert "/contact" in [s.path for s in suggestions]

    def test_target_is_case_insensitive(self, catalog) -> None:
        suggestions = SuggestionEngine(catalog).suggest("/Services/Water-Damage")
        assert suggestions[0].distance == 0
        assert suggestions[0].relevance == 1.0

    def test_trailing_slash_ignored(self, catalog) -> None:
        engine = SuggestionEngine(catalog)
        assert engine.suggest("/locations/logan/") == engine.suggest("/locations/logan")

    def test_sorted_and_limited(self, catalog) -> None:
        suggestions = SuggestionEngine(catalog, max_distance=20, limit=5).suggest("/x/abc")
        assert len(suggestions) == 5
        relevances = [s.relevance for s in suggestions]
        assert relevances == sorted(relevances, reverse=True)


class TestNotFoundContext:
    def test_section_message_and_links(self, catalog) -> None:
        engine = SuggestionEngine(catalog)
        context = engine.not_found_context("/services/wter-damage")
        assert "service" in context.message
        assert "/services/fire-damage" in context.section_links
        assert context.suggestions

    def test_default_message_outside_sections(self, catalog) -> None:
        engine = SuggestionEngine(catalog)
        assert engine.section_suggestions("/nowhere") == []
        assert "couldn't be found" in engine.error_message("/nowhere")

    def test_location_section_links(self, catalog) -> None:
        links = SuggestionEngine(catalog).section_suggestions("/locations/nope")
        assert "/locations/gold-coast" in links
