"""Tests for fuzzy location suggestions with rapidfuzz."""

from navigatex.suggestions import suggest_locations

CITIES = ["Mumbai", "Delhi", "Bangalore", "Chennai"]


def test_suggests_closest_name():
    assert suggest_locations("Mumbay", CITIES)[0] == "Mumbai"


def test_suggestions_ignore_case():
    assert suggest_locations("CHENAI", CITIES)[0] == "Chennai"
    assert suggest_locations("bengalore", CITIES)[0] == "Bangalore"


def test_no_suggestion_for_unrelated_name():
    assert suggest_locations("Zz", CITIES) == []


def test_empty_inputs():
    assert suggest_locations("   ", CITIES) == []
    assert suggest_locations("Mumbai", []) == []


def test_limit_is_respected():
    names = ["Pune", "Puna", "Pane", "Pone"]

    assert len(suggest_locations("Pune", names, limit=2, score_cutoff=0)) == 2
