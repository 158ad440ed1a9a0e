"""Contextual key help for the sidebar.

One tuple of lines per input context; ``help_lines`` picks the one matching
the navigator's current flags. The interactive runtime shows them in a panel
below the sidebar, toggled with ``?``.
"""

from __future__ import annotations

from ..navigator.state import NavigatorState
from ..tree_model.rendering import pad_or_clip

HELP_COLLECTIONS_LINES: tuple[str, ...] = (
    "COLLECTIONS",
    "j/k or Up/Down  move",
    "l/h or Right/Left  expand/collapse",
    "Enter  open request / toggle folder",
    "gg/Home  top    G/End  bottom",
    "/  search    Esc  clear search",
    "H or Tab  history",
    "?  toggle help    q  quit",
)

HELP_HISTORY_LINES: tuple[str, ...] = (
    "HISTORY",
    "j/k or Up/Down  move",
    "Enter  open entry",
    "gg/Home  top    G/End  bottom",
    "/  search    Esc  clear search / back",
    "r  refresh",
    "m  method filter    s  status filter    x  clear filters",
    "C, H or Tab  collections",
    "?  toggle help    q  quit",
)

HELP_SEARCH_LINES: tuple[str, ...] = (
    "SEARCH",
    "type  edit query",
    "Backspace  delete char    Ctrl+U  clear",
    "Enter  apply    Esc  stop editing",
)


def help_lines(state: NavigatorState) -> tuple[str, ...]:
    """Help rows for the context the navigator is currently in."""
    if state.searching:
        return HELP_SEARCH_LINES
    if state.in_history:
        return HELP_HISTORY_LINES
    return HELP_COLLECTIONS_LINES


def help_hint(state: NavigatorState) -> str:
    """Single-line hint for the status row of the interactive runtime."""
    if state.searching:
        return "type to search  Enter apply  Esc done"
    if state.in_history:
        return "j/k move  Enter open  / search  m/s filters  C collections  ? help  q quit"
    return "j/k move  l/h expand  Enter open  / search  H history  ? help  q quit"


def help_panel_row_count(max_lines: int, show_help: bool, state: NavigatorState) -> int:
    """Rows reserved for the help panel, always leaving one row of content."""
    if not show_help or max_lines <= 1:
        return 0
    return min(len(help_lines(state)), max_lines - 1)


def help_panel_lines(state: NavigatorState, width: int, rows: int) -> list[str]:
    lines = help_lines(state)[: max(0, rows)]
    return [pad_or_clip(line, width) for line in lines]
