"""
Tests for record matching against search term, category and city.
"""

from __future__ import annotations

from service_directory.application.utils.filter_predicate import matches
from service_directory.domain.entities.service_record import ServiceRecord


def _record(**overrides) -> ServiceRecord:
    values = dict(
        id=1,
        name="Acme Plumbing",
        tagline="Pipes and drains",
        description="Residential plumbing repairs.",
        category="Home Services",
        city="Austin",
        rating=4.8,
        reviews=120,
        price="$",
    )
    values.update(overrides)
    return ServiceRecord(**values)


def test_empty_search_matches_everything():
    assert matches(_record(), "", "All", "All") is True
    assert matches(_record(name="", tagline="", description=""), "", "All", "All") is True


def test_search_is_case_insensitive_across_text_fields():
    record = _record()
    assert matches(record, "ACME", "All", "All") is True
    assert matches(record, "drains", "All", "All") is True
    assert matches(record, "Residential", "All", "All") is True
    assert matches(record, "bakery", "All", "All") is False


def test_search_term_is_not_trimmed():
    record = _record(name="Acme", tagline="", description="")
    assert matches(record, " acme", "All", "All") is False
    assert matches(record, "acme", "All", "All") is True


def test_search_does_not_look_at_category_or_city():
    record = _record()
    assert matches(record, "austin", "All", "All") is False
    assert matches(record, "home services", "All", "All") is False


def test_none_text_fields_are_treated_as_empty():
    record = ServiceRecord(id=9, name=None, tagline=None, description="handyman")  # type: ignore[arg-type]
    assert matches(record, "handy", "All", "All") is True
    assert matches(record, "acme", "All", "All") is False


def test_category_match_is_exact_and_case_sensitive():
    record = _record()
    assert matches(record, "", "Home Services", "All") is True
    assert matches(record, "", "home services", "All") is False
    assert matches(record, "", "Technology", "All") is False


def test_city_match_is_exact():
    record = _record()
    assert matches(record, "", "All", "Austin") is True
    assert matches(record, "", "All", "Dallas") is False


def test_unknown_filter_value_matches_nothing():
    assert matches(_record(), "", "Space Travel", "All") is False
    assert matches(_record(), "", "All", "Atlantis") is False


def test_all_conditions_are_combined():
    record = _record()
    assert matches(record, "acme", "Home Services", "Austin") is True
    assert matches(record, "acme", "Home Services", "Dallas") is False
    assert matches(record, "zen", "Home Services", "Austin") is False
