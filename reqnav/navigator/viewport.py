"""Cursor and scroll-offset arithmetic shared by both browsing modes.

All helpers are pure: they take the current ``(cursor, offset)`` pair and
return the new one. Mode-private state lives in ``ViewportState``; nothing in
here knows which mode it serves.
"""

from __future__ import annotations


def clamp_cursor(cursor: int, count: int) -> int:
    """Clamp ``cursor`` into ``[0, count - 1]``; empty lists pin it to 0."""
    if count <= 0:
        return 0
    return max(0, min(cursor, count - 1))


def move_cursor(cursor: int, delta: int, count: int) -> int:
    """Step ``cursor`` by ``delta`` without leaving the list."""
    return clamp_cursor(cursor + delta, count)


def adjust_offset(cursor: int, offset: int, height: int) -> int:
    """Return the smallest scroll change that keeps ``cursor`` visible."""
    height = max(1, height)
    offset = max(0, offset)
    if cursor < offset:
        return cursor
    if cursor >= offset + height:
        return cursor - height + 1
    return offset


def move_viewport(
    cursor: int,
    offset: int,
    delta: int,
    count: int,
    height: int,
) -> tuple[int, int]:
    """Move by ``delta`` rows, clamp, then pull the offset along."""
    new_cursor = move_cursor(cursor, delta, count)
    return new_cursor, adjust_offset(new_cursor, offset, height)


def jump_to_top() -> tuple[int, int]:
    """Cursor and offset for the first row."""
    return 0, 0


def jump_to_bottom(offset: int, count: int, height: int) -> tuple[int, int]:
    """Put the cursor on the last row, scrolling only as far as needed."""
    cursor = clamp_cursor(count - 1, count)
    return cursor, adjust_offset(cursor, offset, height)
