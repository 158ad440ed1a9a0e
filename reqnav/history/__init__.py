"""History log view support: records, stores, and the bounded query adapter."""

from __future__ import annotations

from .query import DEFAULT_QUERY_TIMEOUT_SECONDS, HistoryQueryAdapter, HistoryQueryResult, query_history
from .store import HistoryQueryTimeout, HistoryStore, HistoryStoreError, MemoryHistoryStore
from .types import (
    DEFAULT_HISTORY_LIMIT,
    METHOD_FILTERS,
    STATUS_FILTERS,
    HistoryEntry,
    QueryOptions,
    build_query_options,
    next_method_filter,
    next_status_filter,
)

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "DEFAULT_QUERY_TIMEOUT_SECONDS",
    "METHOD_FILTERS",
    "STATUS_FILTERS",
    "HistoryEntry",
    "QueryOptions",
    "HistoryStore",
    "HistoryStoreError",
    "HistoryQueryTimeout",
    "MemoryHistoryStore",
    "HistoryQueryAdapter",
    "HistoryQueryResult",
    "query_history",
    "build_query_options",
    "next_method_filter",
    "next_status_filter",
]
