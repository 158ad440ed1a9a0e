"""Plain-text sidebar composition.

The sidebar is a rounded box holding, top to bottom: the search bar, the
History header and rows, then the Collections header and rows. Row budgets
come from ``navigator.layout.section_heights`` so rendering and cursor math
agree on viewport sizes.
"""

from __future__ import annotations

from datetime import datetime

from ..history.rendering import format_history_entry
from ..navigator.controller import CollectionNavigator
from ..navigator.layout import BORDER_ROWS, section_heights
from ..navigator.state import NavigatorState, ViewMode
from ..tree_model.rendering import display_width, format_tree_item, pad_or_clip, truncate_text
from .help import help_hint, help_lines

SEARCH_ICON = "/ "
SEARCH_PLACEHOLDER = "search..."
SEARCH_CARET = "▌"
STALE_MARKER = "stale"
EMPTY_HISTORY_NO_STORE = "History not available"
EMPTY_HISTORY_FILTERED = "No matching entries (m:method s:status x:clear)"
EMPTY_HISTORY = "No history entries"

__all__ = [
    "render_sidebar",
    "render_search_bar",
    "history_header",
    "collections_header",
    "help_lines",
    "help_hint",
]


def _result_feedback(count: int) -> str:
    if count == 0:
        return " (No matches)"
    return f" ({count} result{'s' if count != 1 else ''})"


def render_search_bar(state: NavigatorState, width: int) -> str:
    """Render the always-present search row for the active mode."""
    query = state.active_query
    if not state.searching and not query:
        content = SEARCH_ICON + SEARCH_PLACEHOLDER
    else:
        content = SEARCH_ICON + query + (SEARCH_CARET if state.searching else "")

    if query and not state.searching:
        count = len(state.history_entries) if state.in_history else len(state.filtered_items)
        feedback = _result_feedback(count)
        if display_width(content) + display_width(feedback) <= width:
            content += feedback
    return pad_or_clip(truncate_text(content, width), width)


def history_header(state: NavigatorState) -> str:
    header = "History" if state.view_mode is ViewMode.HISTORY else "History (H)"
    filters = [value for value in (state.history_method_filter, state.history_status_filter) if value]
    if filters:
        header += " [" + ",".join(filters) + "]"
    if state.history_stale:
        header += f" {STALE_MARKER}"
    return header


def collections_header(state: NavigatorState) -> str:
    return "Collections" if state.view_mode is ViewMode.COLLECTIONS else "Collections (C)"


def _history_rows(
    navigator: CollectionNavigator,
    width: int,
    height: int,
    now: datetime | None,
) -> list[str]:
    state = navigator.state
    entries = state.history_entries
    if not entries:
        if not navigator.history_available:
            message = EMPTY_HISTORY_NO_STORE
        elif state.history_method_filter or state.history_status_filter:
            message = EMPTY_HISTORY_FILTERED
        else:
            message = EMPTY_HISTORY
        return [pad_or_clip(truncate_text(message, width).center(width), width)]
    view = state.history_view
    visible = entries[view.offset : view.offset + height]
    return [
        format_history_entry(entry, view.offset + idx == view.cursor, width, now)
        for idx, entry in enumerate(visible)
    ]


def _collection_rows(state: NavigatorState, width: int, height: int) -> list[str]:
    view = state.collections_view
    visible = state.filtered_items[view.offset : view.offset + height]
    return [
        format_tree_item(item, view.offset + idx == view.cursor, width)
        for idx, item in enumerate(visible)
    ]


def _fill(rows: list[str], width: int, height: int) -> list[str]:
    return rows[:height] + [" " * width] * max(0, height - len(rows))


def _boxed(rows: list[str], inner_width: int) -> list[str]:
    top = "╭" + "─" * inner_width + "╮"
    bottom = "╰" + "─" * inner_width + "╯"
    return [top] + ["│" + row + "│" for row in rows] + [bottom]


def render_sidebar(navigator: CollectionNavigator, now: datetime | None = None) -> list[str]:
    """Return the sidebar as ``height`` lines of ``width`` cells.

    Returns no lines until a size has been received.
    """
    state = navigator.state
    if state.width <= 0 or state.height <= 0:
        return []
    inner_width = max(1, state.width - 2)
    inner_height = max(1, state.height - BORDER_ROWS)
    history_rows, collection_rows = section_heights(state.height)

    rows = [render_search_bar(state, inner_width)]
    rows.append(pad_or_clip(history_header(state), inner_width))
    rows.extend(_fill(_history_rows(navigator, inner_width, history_rows, now), inner_width, history_rows))
    rows.append(pad_or_clip(collections_header(state), inner_width))
    rows.extend(_fill(_collection_rows(state, inner_width, collection_rows), inner_width, collection_rows))
    return _boxed(rows[:inner_height], inner_width)
