"""Key-token dispatch table shared by the per-mode key handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyAction = Callable[[], "bool | None"]


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable from one or more key tokens."""

    combos: tuple[str, ...]
    handler: KeyAction


class KeyComboRegistry:
    """Map key tokens to actions.

    ``dispatch`` returns ``None`` for unbound keys so callers can fall
    through to the next table; bound actions return ``True``/``False`` (or
    ``None`` to decline the key after all).
    """

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else str
        self._handlers: dict[str, KeyAction] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Bind every combo of ``binding``; later bindings win on conflicts."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bound(self, key: str) -> bool:
        """Whether ``key`` has a handler in this table."""
        return self._normalize(key) in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Run the handler bound to ``key``, or return ``None`` when unbound."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()
