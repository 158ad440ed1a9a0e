"""History store interface and an in-memory reference implementation.

The navigator only ever calls ``list`` and ``search``. Stores signal failure
by raising ``HistoryStoreError`` (or any other exception; the query adapter
treats all of them the same way).
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Protocol

from .types import SORT_ASC, HistoryEntry, QueryOptions


class HistoryStoreError(Exception):
    """Raised by a history store when a query cannot be answered."""


class HistoryQueryTimeout(HistoryStoreError):
    """Raised when a store call does not finish before its deadline."""


class HistoryStore(Protocol):
    """Queryable request log consumed by the History view."""

    def list(self, options: QueryOptions) -> list[HistoryEntry]:
        ...

    def search(self, text: str, options: QueryOptions) -> list[HistoryEntry]:
        ...


def _matches_options(entry: HistoryEntry, options: QueryOptions) -> bool:
    if options.method and entry.method.upper() != options.method.upper():
        return False
    if options.status_min is not None and entry.status < options.status_min:
        return False
    if options.status_max is not None and entry.status > options.status_max:
        return False
    return True


def _matches_text(entry: HistoryEntry, folded_text: str) -> bool:
    return folded_text in entry.url.casefold() or folded_text in entry.method.casefold()


class MemoryHistoryStore:
    """Thread-safe list-backed store honoring ``QueryOptions`` filters.

    Sorting supports ``timestamp`` and ``status``; unknown sort fields fall
    back to timestamp order.
    """

    def __init__(self, entries: Iterable[HistoryEntry] = ()) -> None:
        self._lock = threading.Lock()
        self._entries: list[HistoryEntry] = list(entries)

    def add(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def list(self, options: QueryOptions) -> list[HistoryEntry]:
        with self._lock:
            candidates = [entry for entry in self._entries if _matches_options(entry, options)]
        return self._sorted_and_limited(candidates, options)

    def search(self, text: str, options: QueryOptions) -> list[HistoryEntry]:
        folded = text.casefold()
        with self._lock:
            candidates = [
                entry
                for entry in self._entries
                if _matches_options(entry, options) and _matches_text(entry, folded)
            ]
        return self._sorted_and_limited(candidates, options)

    @staticmethod
    def _sorted_and_limited(entries: list[HistoryEntry], options: QueryOptions) -> list[HistoryEntry]:
        if options.sort_by == "status":
            entries.sort(key=lambda entry: (entry.status, entry.timestamp))
        else:
            entries.sort(key=lambda entry: entry.timestamp)
        if options.sort_order.upper() != SORT_ASC:
            entries.reverse()
        if options.limit > 0:
            del entries[options.limit :]
        return entries
