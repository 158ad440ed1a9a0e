"""Collections-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..navigator.state import NavigatorState, ViewMode
from .key_common import handle_jump_chord
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class CollectionsKeyContext:
    """Navigator state and bound operations used by collections-mode keys."""

    state: NavigatorState
    move_cursor: Callable[[int], None]
    jump_to_top: Callable[[], None]
    jump_to_bottom: Callable[[], None]
    expand_selected: Callable[[], None]
    collapse_selected: Callable[[], None]
    activate_selected: Callable[[], None]
    start_search: Callable[[], None]
    clear_search: Callable[[], None]
    switch_view: Callable[[ViewMode], None]


def handle_collections_key(key: str, context: CollectionsKeyContext) -> bool:
    """Handle one key while browsing the collection tree.

    Returns ``True`` when the key was bound in this mode.
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
        if state.collections_query:
            context.clear_search()
        return True

    bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("j", "DOWN"), move(1)),
        KeyComboBinding(("k", "UP"), move(-1)),
        KeyComboBinding(("l", "RIGHT"), run(context.expand_selected)),
        KeyComboBinding(("h", "LEFT"), run(context.collapse_selected)),
        KeyComboBinding(("G", "END"), run(context.jump_to_bottom)),
        KeyComboBinding(("HOME",), run(context.jump_to_top)),
        KeyComboBinding(("/",), run(context.start_search)),
        KeyComboBinding(("ENTER",), run(context.activate_selected)),
        KeyComboBinding(("ESC",), cancel_action),
        KeyComboBinding(("H", "TAB"), run(lambda: context.switch_view(ViewMode.HISTORY))),
        KeyComboBinding(("C",), run(lambda: context.switch_view(ViewMode.COLLECTIONS))),
    )
    return bool(bindings.dispatch(key))
