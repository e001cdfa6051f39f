"""
Tests for favorites toggling and the detail selection state machine.
"""

from __future__ import annotations

from service_directory.application.use_cases.selection import SelectionUseCase
from service_directory.application.utils.favorites import toggle
from service_directory.domain.entities.selection_state import SelectionState


def test_toggle_adds_then_removes():
    assert toggle(frozenset(), 1) == frozenset({1})
    assert toggle(frozenset({1}), 1) == frozenset()


def test_toggle_is_its_own_inverse():
    for favorites in (frozenset(), frozenset({1}), frozenset({1, 2, "x"})):
        for record_id in (1, 2, "x", 99):
            assert toggle(toggle(favorites, record_id), record_id) == favorites


def test_toggle_does_not_mutate_input():
    favorites = {1, 2}
    result = toggle(favorites, 3)
    assert favorites == {1, 2}
    assert result == frozenset({1, 2, 3})


def test_select_close_select():
    use_case = SelectionUseCase()
    state = SelectionState()
    state = use_case.select(state, 3)
    state = use_case.close(state)
    assert state == SelectionState()
    state = use_case.select(state, 3)
    assert state.is_open
    assert state.record_id == 3


def test_select_replaces_open_record():
    use_case = SelectionUseCase()
    state = use_case.select(SelectionState(), 1)
    state = use_case.select(state, 2)
    assert state == SelectionState(status="open", record_id=2)


def test_close_without_selection_is_noop():
    use_case = SelectionUseCase()
    state = SelectionState()
    assert use_case.close(state) is state
    assert use_case.close(use_case.close(state)) == SelectionState()
