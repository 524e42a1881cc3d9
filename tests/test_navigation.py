"""Tests for termslides.navigation — key interpretation and buffering."""

from __future__ import annotations

import pytest

from termslides.navigation import (
    MAX_COUNT_DIGITS,
    NavigationState,
    Outcome,
    clamp,
    interpret,
    navigate,
)


def _press(state: NavigationState, *keys: str) -> NavigationState:
    for key in keys:
        state = navigate(state, key)
    return state


class TestSingleKeys:
    @pytest.mark.parametrize("key", [" ", "right", "down", "enter", "j", "l", "n", "pagedown"])
    def test_next(self, key):
        assert navigate(NavigationState(page=1, total_slides=5), key).page == 2

    @pytest.mark.parametrize("key", ["left", "up", "h", "k", "p", "pageup"])
    def test_previous(self, key):
        assert navigate(NavigationState(page=1, total_slides=5), key).page == 0

    def test_next_stops_at_last_slide(self):
        assert navigate(NavigationState(page=4, total_slides=5), "j").page == 4

    def test_previous_stops_at_first_slide(self):
        assert navigate(NavigationState(page=0, total_slides=5), "k").page == 0

    def test_last_slide(self):
        assert navigate(NavigationState(page=0, total_slides=5), "G").page == 4
        assert navigate(NavigationState(page=0, total_slides=5), "end").page == 4

    def test_first_slide(self):
        assert _press(NavigationState(page=3, total_slides=5), "g", "g").page == 0
        assert navigate(NavigationState(page=3, total_slides=5), "home").page == 0


class TestNumericBuffer:
    def test_digits_accumulate_without_moving(self):
        state = _press(NavigationState(page=0, total_slides=20), "1", "2")
        assert state.buffer == "12"
        assert state.page == 0

    def test_jump_to_numbered_slide(self):
        state = _press(NavigationState(page=0, total_slides=20), "1", "2", "G")
        assert state.page == 11
        assert state.buffer == ""

    def test_jump_past_end_clamps_to_last(self):
        state = _press(NavigationState(page=0, total_slides=5), "1", "2", "G")
        assert state.page == 4

    def test_jump_to_zero_clamps_to_first(self):
        state = _press(NavigationState(page=3, total_slides=5), "0", "G")
        assert state.page == 0

    def test_numbered_gg(self):
        state = _press(NavigationState(page=0, total_slides=5), "3", "g", "g")
        assert state.page == 2

    def test_count_before_next(self):
        state = _press(NavigationState(page=0, total_slides=10), "3", "j")
        assert state.page == 3

    def test_count_before_previous_clamps(self):
        state = _press(NavigationState(page=2, total_slides=10), "5", "k")
        assert state.page == 0

    def test_invalid_key_discards_buffer(self):
        state = _press(NavigationState(page=1, total_slides=10), "4", "x")
        assert state.buffer == ""
        assert state.page == 1

    def test_discarded_buffer_is_not_applied_later(self):
        state = _press(NavigationState(page=1, total_slides=10), "4", "x", "G")
        assert state.page == 9

    def test_long_count_is_capped(self):
        state = _press(NavigationState(page=0, total_slides=5), *("9" * 5000))
        assert len(state.buffer) == MAX_COUNT_DIGITS
        assert navigate(state, "G").page == 4

    def test_long_count_then_gg(self):
        state = _press(NavigationState(page=3, total_slides=5), *("1" * 20), "g", "g")
        assert state.page == 4

    def test_pending_g_discarded_by_other_key(self):
        state = _press(NavigationState(page=3, total_slides=5), "g", "j")
        assert state.buffer == ""
        assert state.page == 3


class TestInterpret:
    def test_outcomes(self):
        state = NavigationState(buffer="1", page=0, total_slides=5)
        assert interpret(state, "2")[0] is Outcome.ACCUMULATE
        assert interpret(state, "G")[0] is Outcome.RESOLVE
        assert interpret(state, "z")[0] is Outcome.DISCARD


class TestClamp:
    @pytest.mark.parametrize("page,total,expected", [
        (-3, 5, 0), (0, 5, 0), (4, 5, 4), (99, 5, 4), (2, 0, 0),
    ])
    def test_clamp(self, page, total, expected):
        assert clamp(page, total) == expected
