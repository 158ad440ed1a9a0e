"""Interactive read-dispatch-paint loop for the demo runtime.

The loop is wiring only: it feeds terminal size changes and key tokens to a
``CollectionNavigator`` and repaints the sidebar, an optional help panel toggled
with ``?``, and a one-line status row.
Terminal access is injected through ``RuntimeLoopCallbacks`` so the loop can
be driven by scripted keys in tests.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..input.reader import read_key
from ..navigator.controller import CollectionNavigator
from ..navigator.messages import (
    HistoryEntrySelected,
    KeyPress,
    OutboundMessage,
    RequestSelected,
    Resize,
    SocketSelected,
)
from ..render import render_sidebar
from ..render.help import help_hint, help_panel_lines, help_panel_row_count
from ..tree_model.rendering import pad_or_clip
from .terminal import TerminalController

QUIT_KEYS = frozenset({"q"})
FORCE_QUIT_KEYS = frozenset({"CTRL_C"})
HELP_KEY = "?"
KEY_POLL_TIMEOUT_MS = 100
STATUS_ROWS = 1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Terminal operations used by ``run_main_loop``."""

    read_key: Callable[[], str]
    terminal_size: Callable[[], tuple[int, int]]
    paint: Callable[[list[str]], None]
    now: Callable[[], datetime | None] = lambda: None


def describe_selection(message: OutboundMessage) -> str:
    """One-line status text for a selection message."""
    if isinstance(message, RequestSelected):
        request = message.request
        return f"request: {request.method} {request.name} {request.url}".rstrip()
    if isinstance(message, SocketSelected):
        socket = message.socket
        return f"socket: {socket.name} {socket.endpoint}".rstrip()
    if isinstance(message, HistoryEntrySelected):
        entry = message.entry
        return f"history: {entry.method} {entry.url} {entry.status}"
    return ""


def compose_screen(
    navigator: CollectionNavigator,
    status: str,
    columns: int,
    now: datetime | None = None,
    help_rows: int = 0,
) -> list[str]:
    """Return sidebar rows, ``help_rows`` rows of key help, then the status row."""
    lines = render_sidebar(navigator, now)
    if help_rows > 0:
        lines.extend(help_panel_lines(navigator.state, max(1, columns), help_rows))
    hint = status or help_hint(navigator.state)
    lines.append(pad_or_clip(hint, max(1, columns)))
    return lines


def run_main_loop(navigator: CollectionNavigator, callbacks: RuntimeLoopCallbacks) -> OutboundMessage | None:
    """Run until a quit key arrives; return the last selection made.

    ``q`` quits and ``?`` toggles the help panel unless the search prompt is
    being edited, where both are text. ``Ctrl+C`` always quits.
    """
    last_layout: tuple[int, int, int] | None = None
    last_selection: OutboundMessage | None = None
    status = ""
    show_help = False
    dirty = True
    while True:
        columns, rows = callbacks.terminal_size()
        content_rows = max(1, rows - STATUS_ROWS)
        help_rows = help_panel_row_count(content_rows, show_help, navigator.state)
        if (columns, rows, help_rows) != last_layout:
            navigator.update(Resize(columns, content_rows - help_rows))
            last_layout = (columns, rows, help_rows)
            dirty = True
        if dirty:
            callbacks.paint(compose_screen(navigator, status, columns, callbacks.now(), help_rows))
            dirty = False

        key = callbacks.read_key()
        if not key:
            continue
        if key in FORCE_QUIT_KEYS or (key in QUIT_KEYS and not navigator.searching):
            return last_selection
        if key == HELP_KEY and not navigator.searching:
            show_help = not show_help
            dirty = True
            continue
        outbound = navigator.update(KeyPress(key))
        if outbound is not None:
            last_selection = outbound
            status = describe_selection(outbound)
            logger.debug("selection emitted: %s", status)
        dirty = True


def run_interactive(navigator: CollectionNavigator) -> OutboundMessage | None:
    """Run the navigator full-screen on the process's controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def terminal_size() -> tuple[int, int]:
        size = shutil.get_terminal_size((80, 24))
        return size.columns, size.lines

    callbacks = RuntimeLoopCallbacks(
        read_key=lambda: read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS),
        terminal_size=terminal_size,
        paint=terminal.paint,
    )
    with terminal.raw_mode():
        return run_main_loop(navigator, callbacks)
