"""Shared key-handling helpers for the browsing modes."""

from __future__ import annotations

from collections.abc import Callable

from ..navigator.state import NavigatorState

CHORD_KEY = "g"


def handle_jump_chord(key: str, state: NavigatorState, jump_to_top: Callable[[], None]) -> bool:
    """Run the ``g g`` jump-to-top chord.

    Returns ``True`` when ``key`` was consumed by the chord. Any other key
    disarms a pending chord and is left for the caller to handle.
    """
    if key != CHORD_KEY:
        state.chord_pending = False
        return False
    if state.chord_pending:
        state.chord_pending = False
        jump_to_top()
    else:
        state.chord_pending = True
    return True


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a literal character rather than a named token."""
    return len(key) == 1 and key.isprintable()
