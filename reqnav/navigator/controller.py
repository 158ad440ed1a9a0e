"""Modal sidebar navigator over request collections and request history.

``CollectionNavigator`` owns one ``NavigatorState`` and is driven one message
at a time through ``update``. Each call runs to completion and returns the
outbound selection message it produced, if any; the caller dispatches it.
Keys are routed to the search prompt, the collections tree, or the history
log depending on the current flags.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..domain.models import Collection, RequestDefinition
from ..history.query import DEFAULT_QUERY_TIMEOUT_SECONDS, HistoryQueryAdapter
from ..history.store import HistoryStore
from ..history.types import (
    DEFAULT_HISTORY_LIMIT,
    HistoryEntry,
    QueryOptions,
    build_query_options,
    next_method_filter,
    next_status_filter,
)
from ..input.key_collections import CollectionsKeyContext, handle_collections_key
from ..input.key_history import HistoryKeyContext, handle_history_key
from ..input.key_search import SearchKeyContext, handle_search_key
from ..tree_model.build import find_item_index, flatten_collections
from ..tree_model.filtering import filter_tree_items
from ..tree_model.types import ItemKind, TreeItem
from .layout import section_heights
from .messages import (
    FocusGained,
    FocusLost,
    HistoryEntrySelected,
    InboundMessage,
    KeyPress,
    OutboundMessage,
    RequestSelected,
    Resize,
    SocketSelected,
)
from .state import NavigatorState, ViewMode, ViewportState
from .viewport import adjust_offset, clamp_cursor, jump_to_bottom, move_viewport

DEFAULT_COLLECTION_NAME = "Default"

logger = logging.getLogger(__name__)


class CollectionNavigator:
    """Sidebar navigator with independent Collections and History modes."""

    def __init__(
        self,
        collections: Iterable[Collection] = (),
        history_store: HistoryStore | None = None,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        query_timeout_seconds: float = DEFAULT_QUERY_TIMEOUT_SECONDS,
        view_mode: ViewMode = ViewMode.COLLECTIONS,
    ) -> None:
        self.state = NavigatorState(collections=list(collections), view_mode=view_mode)
        self.history_limit = history_limit
        self._history = HistoryQueryAdapter(history_store, query_timeout_seconds)
        self._outbox: OutboundMessage | None = None

        self._collections_keys = CollectionsKeyContext(
            state=self.state,
            move_cursor=self._move_collections_cursor,
            jump_to_top=self._collections_jump_to_top,
            jump_to_bottom=self._collections_jump_to_bottom,
            expand_selected=lambda: self._set_selected_expanded(True),
            collapse_selected=lambda: self._set_selected_expanded(False),
            activate_selected=self._activate_tree_item,
            start_search=self._start_search,
            clear_search=self._clear_collections_search,
            switch_view=self._switch_view,
        )
        self._history_keys = HistoryKeyContext(
            state=self.state,
            move_cursor=self._move_history_cursor,
            jump_to_top=self.state.history_view.reset,
            jump_to_bottom=self._history_jump_to_bottom,
            activate_selected=self._activate_history_entry,
            start_search=self._start_search,
            clear_search=self._clear_history_search,
            switch_view=self._switch_view,
            refresh=self.refresh_history,
            cycle_method_filter=self._cycle_method_filter,
            cycle_status_filter=self._cycle_status_filter,
            clear_filters=self._clear_history_filters,
        )
        self._search_keys = SearchKeyContext(
            state=self.state,
            set_query=self._set_active_query,
            finish=self._finish_search,
        )

        self._rebuild_tree()
        if self.state.in_history and history_store is not None:
            self.load_history()

    # -- message loop -----------------------------------------------------

    def update(self, message: InboundMessage) -> OutboundMessage | None:
        """Apply one inbound message and return the selection it caused."""
        state = self.state
        if isinstance(message, Resize):
            state.width = max(0, message.width)
            state.height = max(0, message.height)
            self._keep_cursors_visible()
            return None
        if isinstance(message, FocusGained):
            state.focused = True
            return None
        if isinstance(message, FocusLost):
            state.focused = False
            return None
        if not state.focused or not isinstance(message, KeyPress):
            return None

        self._outbox = None
        if state.searching:
            handle_search_key(message.key, self._search_keys)
        elif state.in_history:
            handle_history_key(message.key, self._history_keys)
        else:
            handle_collections_key(message.key, self._collections_keys)
        outbound, self._outbox = self._outbox, None
        return outbound

    # -- geometry ---------------------------------------------------------

    @property
    def collections_height(self) -> int:
        """Rows available to the collections list at the current height."""
        return section_heights(self.state.height)[1]

    @property
    def history_height(self) -> int:
        return section_heights(self.state.height)[0]

    def _keep_cursors_visible(self) -> None:
        state = self.state
        state.collections_view.offset = adjust_offset(
            state.collections_view.cursor,
            state.collections_view.offset,
            self.collections_height,
        )
        state.history_view.offset = adjust_offset(
            state.history_view.cursor,
            state.history_view.offset,
            self.history_height,
        )

    # -- read accessors ---------------------------------------------------

    @property
    def view_mode(self) -> ViewMode:
        return self.state.view_mode

    @property
    def focused(self) -> bool:
        return self.state.focused

    @property
    def searching(self) -> bool:
        return self.state.searching

    @property
    def chord_pending(self) -> bool:
        return self.state.chord_pending

    @property
    def cursor(self) -> int:
        return self.state.collections_view.cursor

    @property
    def offset(self) -> int:
        return self.state.collections_view.offset

    @property
    def history_cursor(self) -> int:
        return self.state.history_view.cursor

    @property
    def history_offset(self) -> int:
        return self.state.history_view.offset

    @property
    def search_query(self) -> str:
        return self.state.collections_query

    @property
    def history_search_query(self) -> str:
        return self.state.history_query

    @property
    def history_entries(self) -> list[HistoryEntry]:
        return self.state.history_entries

    @property
    def history_available(self) -> bool:
        return self._history.available

    @property
    def history_error(self) -> Exception | None:
        """Error of the last history query; entries shown are then stale."""
        return self.state.history_error

    @property
    def history_method_filter(self) -> str:
        return self.state.history_method_filter

    @property
    def history_status_filter(self) -> str:
        return self.state.history_status_filter

    @property
    def collections(self) -> list[Collection]:
        return self.state.collections

    def display_items(self) -> list[TreeItem]:
        """Rows currently shown in Collections mode (filtered when searching)."""
        return self.state.filtered_items

    def item_count(self) -> int:
        """Rows in the full flattened tree, ignoring any search filter."""
        return len(self.state.tree_items)

    def visible_item_count(self) -> int:
        return len(self.state.filtered_items)

    def selected_item(self) -> TreeItem | None:
        """Row under the collections cursor, or ``None`` for an empty list."""
        items = self.display_items()
        cursor = self.state.collections_view.cursor
        if 0 <= cursor < len(items):
            return items[cursor]
        return None

    def selected_history_entry(self) -> HistoryEntry | None:
        """Entry under the history cursor."""
        entries = self.state.history_entries
        cursor = self.state.history_view.cursor
        if 0 <= cursor < len(entries):
            return entries[cursor]
        return None

    def selected_collection(self) -> Collection | None:
        """Return the collection owning the selected row.

        Falls back to the first collection when nothing is selected or the
        owner cannot be found; ``None`` only when there are no collections.
        """
        collections = self.state.collections
        item = self.selected_item()
        if item is not None:
            if item.kind is ItemKind.COLLECTION:
                return item.node
            for collection in collections:
                if item.kind is ItemKind.FOLDER and collection.contains_folder(item.id):
                    return collection
                if item.kind is ItemKind.REQUEST and collection.contains_request(item.id):
                    return collection
                if item.kind is ItemKind.SOCKET and collection.contains_socket(item.id):
                    return collection
        return collections[0] if collections else None

    def is_expanded(self, index: int) -> bool:
        items = self.display_items()
        if 0 <= index < len(items):
            return items[index].expanded
        return False

    # -- collection operations --------------------------------------------

    def set_collections(self, collections: Iterable[Collection]) -> None:
        """Replace the collection forest and reset the collections cursor."""
        self.state.collections = list(collections)
        self._rebuild_tree()
        self.state.collections_view.reset()

    def rebuild_items(self) -> None:
        """Re-flatten after callers mutated collection objects directly."""
        self._rebuild_tree()

    def get_or_create_collection(self, name: str) -> Collection:
        """Return the collection called ``name``, appending a new one if missing."""
        for collection in self.state.collections:
            if collection.name == name:
                return collection
        collection = Collection(name)
        self.state.collections.append(collection)
        self._rebuild_tree()
        return collection

    def add_request(
        self,
        request: RequestDefinition | None,
        collection: Collection | None = None,
    ) -> bool:
        """Append ``request`` to ``collection`` and select it.

        Without an explicit target the first collection is used, or a new
        ``Default`` collection when there are none. The target collection is
        expanded so the new row is visible. Returns ``False`` for a missing
        request and leaves everything untouched.
        """
        if request is None:
            logger.debug("add_request rejected: no request given")
            return False

        state = self.state
        if collection is not None:
            target = collection
        elif state.collections:
            target = state.collections[0]
        else:
            target = Collection(DEFAULT_COLLECTION_NAME)
            state.collections.append(target)

        target.add_request(request)
        state.expansion = state.expansion.toggled(target.id, True)
        self._rebuild_tree()

        index = find_item_index(self.display_items(), request.id)
        if index is not None:
            view = state.collections_view
            view.cursor = index
            view.offset = adjust_offset(index, view.offset, self.collections_height)
        return True

    def expand(self, index: int) -> None:
        """Expand the displayed row at ``index``; out-of-range is ignored."""
        self._set_row_expanded(index, True)

    def collapse(self, index: int) -> None:
        """Collapse the displayed row at ``index``; out-of-range is ignored."""
        self._set_row_expanded(index, False)

    def set_cursor(self, index: int) -> None:
        """Select the displayed row at ``index``; out-of-range is ignored."""
        if not 0 <= index < len(self.display_items()):
            return
        view = self.state.collections_view
        view.cursor = index
        view.offset = adjust_offset(index, view.offset, self.collections_height)

    def _rebuild_tree(self) -> None:
        state = self.state
        state.tree_items = flatten_collections(state.collections, state.expansion)
        state.filtered_items = filter_tree_items(state.tree_items, state.collections_query)
        self._clamp_view(state.collections_view, len(state.filtered_items), self.collections_height)

    @staticmethod
    def _clamp_view(view: ViewportState, count: int, height: int) -> None:
        view.cursor = clamp_cursor(view.cursor, count)
        view.offset = adjust_offset(view.cursor, view.offset, height)

    def _apply_collections_filter(self) -> None:
        """Re-filter rows; a non-empty query restarts from the first match."""
        state = self.state
        state.filtered_items = filter_tree_items(state.tree_items, state.collections_query)
        if state.collections_query:
            state.collections_view.reset()
        else:
            self._clamp_view(state.collections_view, len(state.filtered_items), self.collections_height)

    def _set_row_expanded(self, index: int, expanded: bool) -> None:
        items = self.display_items()
        if not 0 <= index < len(items):
            return
        item = items[index]
        if not item.expandable or item.expanded == expanded:
            return
        self.state.expansion = self.state.expansion.toggled(item.id, expanded)
        self._rebuild_tree()

    def _set_selected_expanded(self, expanded: bool) -> None:
        self._set_row_expanded(self.state.collections_view.cursor, expanded)

    def _move_collections_cursor(self, delta: int) -> None:
        view = self.state.collections_view
        view.cursor, view.offset = move_viewport(
            view.cursor,
            view.offset,
            delta,
            len(self.display_items()),
            self.collections_height,
        )

    def _collections_jump_to_top(self) -> None:
        self.state.collections_view.reset()

    def _collections_jump_to_bottom(self) -> None:
        view = self.state.collections_view
        count = len(self.display_items())
        if count:
            view.cursor, view.offset = jump_to_bottom(view.offset, count, self.collections_height)

    def _activate_tree_item(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        if item.kind.is_container:
            if item.expandable:
                self._set_row_expanded(self.state.collections_view.cursor, not item.expanded)
        elif item.kind is ItemKind.REQUEST:
            self._outbox = RequestSelected(item.node)
        elif item.kind is ItemKind.SOCKET:
            self._outbox = SocketSelected(item.node)

    def _clear_collections_search(self) -> None:
        state = self.state
        state.collections_query = ""
        state.filtered_items = state.tree_items
        state.collections_view.reset()

    # -- view mode --------------------------------------------------------

    def set_view_mode(self, mode: ViewMode) -> None:
        """Switch modes; entering History re-queries the store."""
        self._switch_view(mode)

    def _switch_view(self, mode: ViewMode) -> None:
        state = self.state
        state.chord_pending = False
        if state.view_mode is mode:
            return
        logger.debug("view mode %s -> %s", state.view_mode.value, mode.value)
        state.view_mode = mode
        if mode is ViewMode.HISTORY:
            self.load_history(reset_cursor=False)

    # -- history ----------------------------------------------------------

    def set_history_store(self, store: HistoryStore | None) -> None:
        """Bind a new history store and load its entries immediately."""
        self._history.store = store
        self.load_history()

    def set_history_method_filter(self, method: str) -> None:
        """Set the method filter; takes effect on the next history load."""
        self.state.history_method_filter = method.upper()

    def set_history_status_filter(self, status: str) -> None:
        self.state.history_status_filter = status

    def history_query_options(self) -> QueryOptions:
        """Options for the next store call, built from the current filters and query."""
        state = self.state
        return build_query_options(
            limit=self.history_limit,
            method_filter=state.history_method_filter,
            status_filter=state.history_status_filter,
            search=state.history_query,
        )

    def load_history(self, reset_cursor: bool = True) -> None:
        """Query the store with the current filters.

        On failure the previous entries stay in place and ``history_error``
        records why. With ``reset_cursor`` False the history cursor is only
        clamped into the new result range.
        """
        state = self.state
        if not self._history.available:
            state.history_entries = []
            state.history_error = None
        else:
            result = self._history.query(self.history_query_options(), previous=state.history_entries)
            state.history_entries = result.entries
            state.history_error = result.error
        if reset_cursor:
            state.history_view.reset()
        else:
            self._clamp_view(state.history_view, len(state.history_entries), self.history_height)

    def refresh_history(self) -> None:
        """Re-query the store and put the cursor back on the newest entry."""
        self.load_history(reset_cursor=True)

    def _move_history_cursor(self, delta: int) -> None:
        view = self.state.history_view
        view.cursor, view.offset = move_viewport(
            view.cursor,
            view.offset,
            delta,
            len(self.state.history_entries),
            self.history_height,
        )

    def _history_jump_to_bottom(self) -> None:
        view = self.state.history_view
        count = len(self.state.history_entries)
        if count:
            view.cursor, view.offset = jump_to_bottom(view.offset, count, self.history_height)

    def _activate_history_entry(self) -> None:
        entry = self.selected_history_entry()
        if entry is not None:
            self._outbox = HistoryEntrySelected(entry)

    def _clear_history_search(self) -> None:
        self.state.history_query = ""
        self.load_history()

    def _cycle_method_filter(self) -> None:
        state = self.state
        state.history_method_filter = next_method_filter(state.history_method_filter)
        self.load_history()

    def _cycle_status_filter(self) -> None:
        state = self.state
        state.history_status_filter = next_status_filter(state.history_status_filter)
        self.load_history()

    def _clear_history_filters(self) -> None:
        state = self.state
        state.history_method_filter = ""
        state.history_status_filter = ""
        state.history_query = ""
        self.load_history()

    # -- search prompt ----------------------------------------------------

    def _start_search(self) -> None:
        state = self.state
        state.searching = True
        state.chord_pending = False
        if state.in_history:
            had_query = bool(state.history_query)
            state.history_query = ""
            if had_query:
                self.load_history()
        else:
            state.collections_query = ""
            self._apply_collections_filter()

    def _set_active_query(self, query: str) -> None:
        state = self.state
        if state.in_history:
            state.history_query = query
            self.load_history()
        else:
            state.collections_query = query
            self._apply_collections_filter()

    def _finish_search(self, apply: bool = False) -> None:
        state = self.state
        state.searching = False
        if not apply:
            return
        if state.in_history:
            self.load_history()
        else:
            self._apply_collections_filter()
