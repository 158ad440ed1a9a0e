"""Row budgets for the stacked History/Collections sidebar.

The sidebar is drawn inside a bordered box (two rows) and reserves three
rows for the search bar and the two section headers. What remains is split
30/70 between History on top and Collections below.
"""

from __future__ import annotations

BORDER_ROWS = 2
CHROME_ROWS = 3
MIN_AVAILABLE_ROWS = 2
HISTORY_SHARE_NUMERATOR = 3
HISTORY_SHARE_DENOMINATOR = 10


def available_rows(height: int) -> int:
    return max(MIN_AVAILABLE_ROWS, height - BORDER_ROWS - CHROME_ROWS)


def section_heights(height: int) -> tuple[int, int]:
    """Return ``(history_rows, collection_rows)`` for a sidebar ``height``.

    Both values are at least one row so cursor arithmetic always has a
    non-empty viewport.
    """
    available = available_rows(height)
    history_rows = max(1, available * HISTORY_SHARE_NUMERATOR // HISTORY_SHARE_DENOMINATOR)
    collection_rows = max(1, available - history_rows)
    return history_rows, collection_rows
