"""Navigation — turns keystrokes into page changes.

Keys are interpreted against a small pending-input buffer.  Digits (and a
first ``g``) accumulate; a command key resolves the buffer into a target
page and clears it; anything else discards the buffer without moving.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

NEXT_KEYS = frozenset({" ", "space", "right", "down", "enter", "j", "l", "n", "pagedown"})
PREVIOUS_KEYS = frozenset({"left", "up", "h", "k", "p", "pageup"})
FIRST_KEYS = frozenset({"home"})
LAST_KEYS = frozenset({"end"})
JUMP_KEY = "G"
PREFIX_KEY = "g"
# Digits typed past this many are ignored.
MAX_COUNT_DIGITS = 9


class Outcome(enum.Enum):
    ACCUMULATE = "accumulate"
    RESOLVE = "resolve"
    DISCARD = "discard"


@dataclass(frozen=True)
class NavigationState:
    buffer: str = ""
    page: int = 0
    total_slides: int = 0


def _count(buffer: str) -> int | None:
    digits = buffer.rstrip(PREFIX_KEY)
    return int(digits) if digits else None


def clamp(page: int, total_slides: int) -> int:
    """Saturate *page* to ``[0, total_slides - 1]``."""
    if total_slides <= 0:
        return 0
    return max(0, min(page, total_slides - 1))


def interpret(state: NavigationState, key: str) -> tuple[Outcome, int]:
    """Classify *key* against the pending buffer.

    Returns the outcome and, for ``RESOLVE``, the (unclamped) target page.
    """
    buffer = state.buffer
    count = _count(buffer)
    last = state.total_slides - 1

    if buffer.endswith(PREFIX_KEY):
        if key == PREFIX_KEY:
            return Outcome.RESOLVE, (count - 1 if count is not None else 0)
        return Outcome.DISCARD, state.page

    if len(key) == 1 and key.isdigit():
        return Outcome.ACCUMULATE, state.page
    if key == PREFIX_KEY:
        return Outcome.ACCUMULATE, state.page
    if key == JUMP_KEY:
        return Outcome.RESOLVE, (count - 1 if count is not None else last)
    if key in FIRST_KEYS:
        return Outcome.RESOLVE, 0
    if key in LAST_KEYS:
        return Outcome.RESOLVE, last
    if key in NEXT_KEYS:
        return Outcome.RESOLVE, state.page + (count or 1)
    if key in PREVIOUS_KEYS:
        return Outcome.RESOLVE, state.page - (count or 1)
    return Outcome.DISCARD, state.page


def navigate(state: NavigationState, key: str) -> NavigationState:
    """Apply *key* to *state* and return the new state."""
    outcome, target = interpret(state, key)
    if outcome is Outcome.ACCUMULATE:
        if key != PREFIX_KEY and len(state.buffer) >= MAX_COUNT_DIGITS:
            return state
        return replace(state, buffer=state.buffer + key)
    if outcome is Outcome.RESOLVE:
        return replace(state, buffer="", page=clamp(target, state.total_slides))
    return replace(state, buffer="")
