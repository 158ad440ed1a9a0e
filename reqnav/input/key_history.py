"""History-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..navigator.state import NavigatorState, ViewMode
from .key_common import handle_jump_chord
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class HistoryKeyContext:
    """Navigator state and bound operations used by history-mode keys."""

    state: NavigatorState
    move_cursor: Callable[[int], None]
    jump_to_top: Callable[[], None]
    jump_to_bottom: Callable[[], None]
    activate_selected: Callable[[], None]
    start_search: Callable[[], None]
    clear_search: Callable[[], None]
    switch_view: Callable[[ViewMode], None]
    refresh: Callable[[], None]
    cycle_method_filter: Callable[[], None]
    cycle_status_filter: Callable[[], None]
    clear_filters: Callable[[], None]


def handle_history_key(key: str, context: HistoryKeyContext) -> bool:
    """Handle one key while browsing the history log.

    Expand/collapse keys are accepted and ignored: history rows are flat.
    """
    state = context.state
    if handle_jump_chord(key, state, context.jump_to_top):
        return True

    def move(delta: int) -> Callable[[], bool]:
        def action() -> bool:
            context.move_cursor(delta)
            return True

        return action

    def run(operation: Callable[[], None]) -> Callable[[], bool]:
        def action() -> bool:
            operation()
            return True

        return action

    def cancel_action() -> bool:
        if state.history_query:
            context.clear_search()
        else:
            context.switch_view(ViewMode.COLLECTIONS)
        return True

    bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("j", "DOWN"), move(1)),
        KeyComboBinding(("k", "UP"), move(-1)),
        KeyComboBinding(("h", "l", "LEFT", "RIGHT"), lambda: True),
        KeyComboBinding(("G", "END"), run(context.jump_to_bottom)),
        KeyComboBinding(("HOME",), run(context.jump_to_top)),
        KeyComboBinding(("/",), run(context.start_search)),
        KeyComboBinding(("ENTER",), run(context.activate_selected)),
        KeyComboBinding(("ESC",), cancel_action),
        KeyComboBinding(("H", "C", "TAB"), run(lambda: context.switch_view(ViewMode.COLLECTIONS))),
        KeyComboBinding(("r",), run(context.refresh)),
        KeyComboBinding(("m",), run(context.cycle_method_filter)),
        KeyComboBinding(("s",), run(context.cycle_status_filter)),
        KeyComboBinding(("x",), run(context.clear_filters)),
    )
    return bool(bindings.dispatch(key))
