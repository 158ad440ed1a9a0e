from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..domain.models import Collection
from ..history.types import HistoryEntry
from ..tree_model.expansion import ExpansionState
from ..tree_model.types import TreeItem


class ViewMode(Enum):
    COLLECTIONS = "collections"
    HISTORY = "history"

    @classmethod
    def parse(cls, value: object, default: ViewMode | None = None) -> ViewMode:
        """Return the mode named ``value`` or ``default`` (Collections)."""
        fallback = default if default is not None else cls.COLLECTIONS
        if isinstance(value, ViewMode):
            return value
        if isinstance(value, str):
            for mode in cls:
                if mode.value == value.strip().lower():
                    return mode
        return fallback

    def toggled(self) -> ViewMode:
        return ViewMode.HISTORY if self is ViewMode.COLLECTIONS else ViewMode.COLLECTIONS


@dataclass
class ViewportState:
    cursor: int = 0
    offset: int = 0

    def reset(self) -> None:
        self.cursor = 0
        self.offset = 0


@dataclass
class NavigatorState:
    width: int = 0
    height: int = 0
    focused: bool = True
    view_mode: ViewMode = ViewMode.COLLECTIONS
    searching: bool = False
    chord_pending: bool = False
    collections: list[Collection] = field(default_factory=list)
    expansion: ExpansionState = field(default_factory=ExpansionState)
    tree_items: list[TreeItem] = field(default_factory=list)
    filtered_items: list[TreeItem] = field(default_factory=list)
    collections_view: ViewportState = field(default_factory=ViewportState)
    collections_query: str = ""
    history_view: ViewportState = field(default_factory=ViewportState)
    history_query: str = ""
    history_method_filter: str = ""
    history_status_filter: str = ""
    history_entries: list[HistoryEntry] = field(default_factory=list)
    history_error: Exception | None = None

    @property
    def in_history(self) -> bool:
        return self.view_mode is ViewMode.HISTORY

    @property
    def active_query(self) -> str:
        return self.history_query if self.in_history else self.collections_query

    @property
    def history_filters_active(self) -> bool:
        return bool(self.history_method_filter or self.history_status_filter or self.history_query)

    @property
    def history_stale(self) -> bool:
        return self.history_error is not None
