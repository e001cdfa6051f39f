"""
Tests for the in-memory session store.
"""

from __future__ import annotations

import pytest

from service_directory.application.exceptions import UnknownSessionError
from service_directory.infrastructure.catalog.memory_catalog_source import MemoryCatalogSource
from service_directory.infrastructure.store.memory_session_store import MemorySessionStore


def test_sessions_are_independent(scenario_raw):
    store = MemorySessionStore(catalog=MemoryCatalogSource(scenario_raw))
    first_id, first = store.create()
    second_id, second = store.create()
    assert first_id != second_id

    first.set_search_term("zen")
    first.toggle_favorite(2)
    assert [r.id for r in store.get(first_id).view] == [2]
    assert [r.id for r in store.get(second_id).view] == [3, 1, 2]
    assert second.favorites == frozenset()


def test_sessions_share_the_loaded_catalog(scenario_raw):
    store = MemorySessionStore(catalog=MemoryCatalogSource(scenario_raw))
    _, first = store.create()
    _, second = store.create()
    assert first.records == second.records
    assert first.records[0] is second.records[0]


def test_oldest_session_is_evicted(scenario_raw):
    store = MemorySessionStore(catalog=MemoryCatalogSource(scenario_raw), session_limit=2)
    first_id, _ = store.create()
    second_id, _ = store.create()
    store.get(first_id)  # touch, so second becomes the oldest
    store.create()
    assert len(store) == 2
    store.get(first_id)
    with pytest.raises(UnknownSessionError):
        store.get(second_id)


def test_default_sort_mode_is_applied(scenario_raw):
    store = MemorySessionStore(catalog=MemoryCatalogSource(scenario_raw), default_sort_mode="name")
    _, session = store.create()
    assert [r.id for r in session.view] == [1, 3, 2]
    session.set_sort_mode("reviews")
    session.reset_filters()
    assert session.state.sort_mode == "name"


def test_discard(scenario_raw):
    store = MemorySessionStore(catalog=MemoryCatalogSource(scenario_raw))
    session_id, _ = store.create()
    store.discard(session_id)
    store.discard(session_id)
    with pytest.raises(UnknownSessionError):
        store.get(session_id)
