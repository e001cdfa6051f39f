"""
Tests for deriving the filtered and ordered catalog view.
"""

from __future__ import annotations

from dataclasses import replace

from service_directory.application.use_cases.derive_view import (
    DeriveViewUseCase,
    derive_view,
    summarize_view,
)
from service_directory.domain.entities.catalog_state import CatalogState
from service_directory.domain.entities.selection_state import SelectionState
from service_directory.infrastructure.catalog.memory_catalog_source import MemoryCatalogSource


def _ids(records):
    return [record.id for record in records]


def test_scenario_search_acme_by_rating(scenario_records):
    state = CatalogState(records=scenario_records, search_term="acme", sort_mode="rating")
    assert _ids(derive_view(state)) == [3, 1]


def test_scenario_city_austin_by_rating(scenario_records):
    state = CatalogState(records=scenario_records, selected_city="Austin", sort_mode="rating")
    assert _ids(derive_view(state)) == [1, 2]


def test_scenario_search_and_city(scenario_records):
    state = CatalogState(records=scenario_records, search_term="acme", selected_city="Austin")
    assert _ids(derive_view(state)) == [1]


def test_no_filters_returns_every_record_sorted():
    records = MemoryCatalogSource().load_records()
    for mode in ("rating", "reviews", "name", "price"):
        view = derive_view(CatalogState(records=records, sort_mode=mode))
        assert sorted(_ids(view)) == sorted(_ids(records))

    by_reviews = derive_view(CatalogState(records=records, sort_mode="reviews"))
    reviews = [record.reviews for record in by_reviews]
    assert reviews == sorted(reviews, reverse=True)

    by_price = derive_view(CatalogState(records=records, sort_mode="price"))
    lengths = [len(record.price) for record in by_price]
    assert lengths == sorted(lengths)


def test_every_search_result_contains_the_term():
    records = MemoryCatalogSource().load_records()
    for term in ("ac", "SUPPORT", "same", "x"):
        view = derive_view(CatalogState(records=records, search_term=term))
        needle = term.lower()
        for record in view:
            assert any(needle in text.lower() for text in (record.name, record.tagline, record.description))
        excluded = [record for record in records if record not in view]
        for record in excluded:
            assert not any(needle in text.lower() for text in (record.name, record.tagline, record.description))


def test_category_filter_keeps_only_that_category():
    records = MemoryCatalogSource().load_records()
    view = derive_view(CatalogState(records=records, selected_category="Home Services"))
    assert view
    assert all(record.category == "Home Services" for record in view)


def test_unknown_category_gives_empty_view(scenario_records):
    view = derive_view(CatalogState(records=scenario_records, selected_category="Pets"))
    assert view == ()


def test_view_ignores_favorites_and_selection(scenario_records):
    state = CatalogState(records=scenario_records, search_term="a")
    other = replace(state, favorites=frozenset({2}), selection=SelectionState(status="open", record_id=3))
    assert derive_view(state) == derive_view(other)


def test_use_case_recomputes_only_when_inputs_change(scenario_records):
    use_case = DeriveViewUseCase()
    state = CatalogState(records=scenario_records)
    first = use_case.execute(state)
    assert use_case.execute(replace(state, favorites=frozenset({1}))) is first

    narrowed = use_case.execute(replace(state, selected_city="Dallas"))
    assert _ids(narrowed) == [3]


def test_summary_text(scenario_records):
    state = CatalogState(records=scenario_records)
    summary = summarize_view(state, derive_view(state))
    assert summary.result_count == 3
    assert summary.headline == "3 Services Found"
    assert summary.description == "Showing results for all categories"

    state = CatalogState(records=scenario_records, selected_category="Technology", selected_city="Dallas")
    summary = summarize_view(state, derive_view(state))
    assert summary.headline == "1 Services Found"
    assert summary.description == "Showing results for Technology in Dallas"
