"""Search-editing keyboard handling, shared by both browsing modes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..navigator.state import NavigatorState
from .key_common import is_text_key


@dataclass(frozen=True)
class SearchKeyContext:
    """Operations the search prompt needs from the navigator.

    ``set_query`` stores the active mode's query and re-filters (collections)
    or re-queries (history) immediately. ``finish`` leaves edit mode;
    ``apply`` tells it to re-apply the current query once more.
    """

    state: NavigatorState
    set_query: Callable[[str], None]
    finish: Callable[..., None]


def handle_search_key(key: str, context: SearchKeyContext) -> bool:
    """Handle one key while the search prompt is being edited.

    Every printable character, including navigation letters such as ``j`` or
    ``k``, is taken as query text. Named keys other than the editing ones are
    swallowed so they cannot move the cursor mid-edit.
    """
    state = context.state
    query = state.active_query
    if key == "ESC":
        context.finish(apply=False)
        return True
    if key == "ENTER":
        context.finish(apply=True)
        return True
    if key in {"BACKSPACE", "DELETE"}:
        if query:
            context.set_query(query[:-1])
        return True
    if key == "CTRL_U":
        context.set_query("")
        return True
    if is_text_key(key):
        context.set_query(query + key)
        return True
    return True
