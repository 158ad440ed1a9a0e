"""Open/closed state for tree nodes, keyed by stable node ID."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class ExpansionState:
    """Immutable-by-convention mapping of node ID to expanded flag.

    Absent IDs are collapsed. ``toggled`` returns a new instance so previous
    states can be kept and compared.
    """

    __slots__ = ("_expanded",)

    def __init__(self, expanded: Mapping[str, bool] | Iterable[str] | None = None) -> None:
        if expanded is None:
            self._expanded: dict[str, bool] = {}
        elif isinstance(expanded, Mapping):
            self._expanded = {str(key): bool(value) for key, value in expanded.items()}
        else:
            self._expanded = {str(key): True for key in expanded}

    def is_expanded(self, node_id: str) -> bool:
        return self._expanded.get(node_id, False)

    def toggled(self, node_id: str, expanded: bool) -> ExpansionState:
        """Return a copy with ``node_id`` set to ``expanded``."""
        updated = dict(self._expanded)
        updated[node_id] = expanded
        return ExpansionState(updated)

    def expanded_ids(self) -> frozenset[str]:
        return frozenset(key for key, value in self._expanded.items() if value)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self.is_expanded(node_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpansionState):
            return NotImplemented
        return self.expanded_ids() == other.expanded_ids()

    def __hash__(self) -> int:
        return hash(self.expanded_ids())

    def __repr__(self) -> str:
        return f"ExpansionState({sorted(self.expanded_ids())!r})"
