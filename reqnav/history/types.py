"""History log records, query options, and filter cycles."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

DEFAULT_HISTORY_LIMIT = 100
SORT_BY_TIMESTAMP = "timestamp"
SORT_DESC = "DESC"
SORT_ASC = "ASC"

METHOD_FILTERS: tuple[str, ...] = ("", "GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")
STATUS_FILTERS: tuple[str, ...] = ("", "2xx", "3xx", "4xx", "5xx")
STATUS_FILTER_RANGES: dict[str, tuple[int, int]] = {
    "2xx": (200, 299),
    "3xx": (300, 399),
    "4xx": (400, 499),
    "5xx": (500, 599),
}


@dataclass(frozen=True)
class HistoryEntry:
    """One read-only request/response record produced by a history store."""

    id: str
    method: str
    url: str
    status: int
    timestamp: datetime


@dataclass(frozen=True)
class QueryOptions:
    """Parameters passed to ``HistoryStore.list`` / ``HistoryStore.search``.

    ``status_min``/``status_max`` are inclusive bounds; ``None`` leaves that
    side open. ``search`` mirrors the free-text term for stores that prefer to
    read it from the options rather than the ``search`` argument.
    """

    limit: int = DEFAULT_HISTORY_LIMIT
    sort_by: str = SORT_BY_TIMESTAMP
    sort_order: str = SORT_DESC
    method: str | None = None
    status_min: int | None = None
    status_max: int | None = None
    search: str | None = None

    def with_search(self, text: str | None) -> QueryOptions:
        return replace(self, search=text or None)


def _cycle(values: tuple[str, ...], current: str) -> str:
    """Return the value after ``current``, wrapping; unknown values restart."""
    try:
        idx = values.index(current)
    except ValueError:
        return values[0]
    return values[(idx + 1) % len(values)]


def next_method_filter(current: str) -> str:
    """Advance the method filter through ``METHOD_FILTERS``."""
    return _cycle(METHOD_FILTERS, current)


def next_status_filter(current: str) -> str:
    """Advance the status filter through ``STATUS_FILTERS``."""
    return _cycle(STATUS_FILTERS, current)


def build_query_options(
    *,
    limit: int = DEFAULT_HISTORY_LIMIT,
    method_filter: str = "",
    status_filter: str = "",
    search: str = "",
) -> QueryOptions:
    """Translate sidebar filter labels into store ``QueryOptions``."""
    status_min: int | None = None
    status_max: int | None = None
    status_range = STATUS_FILTER_RANGES.get(status_filter)
    if status_range is not None:
        status_min, status_max = status_range
    return QueryOptions(
        limit=limit,
        sort_by=SORT_BY_TIMESTAMP,
        sort_order=SORT_DESC,
        method=method_filter or None,
        status_min=status_min,
        status_max=status_max,
        search=search or None,
    )
