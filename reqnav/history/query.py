"""Bounded-time bridge from the History view to a ``HistoryStore``.

Each query runs on a short-lived daemon thread and the caller waits at most
``timeout_seconds`` for its result. A thread stuck in a hung store is abandoned
and never delays interpreter exit. A failed or timed-out call yields the previous
entries together with the error, so the UI keeps showing the last good result.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Sequence
from dataclasses import dataclass

from .store import HistoryQueryTimeout, HistoryStore
from .types import HistoryEntry, QueryOptions

DEFAULT_QUERY_TIMEOUT_SECONDS = 5.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryQueryResult:
    """Entries to display plus the error of the call that produced them."""

    entries: list[HistoryEntry]
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _call_store(store: HistoryStore, options: QueryOptions) -> list[HistoryEntry]:
    if options.search:
        return list(store.search(options.search, options))
    return list(store.list(options))


def query_history(
    store: HistoryStore | None,
    options: QueryOptions,
    *,
    previous: Sequence[HistoryEntry] = (),
    timeout_seconds: float = DEFAULT_QUERY_TIMEOUT_SECONDS,
) -> HistoryQueryResult:
    """Run one list/search call against ``store`` with a hard deadline.

    ``options.search`` selects ``store.search``; otherwise ``store.list`` is
    used. A missing store yields an empty, error-free result.
    """
    if store is None:
        return HistoryQueryResult(entries=[])

    results: queue.Queue[tuple[list[HistoryEntry] | None, Exception | None]] = queue.Queue()

    def run_worker() -> None:
        try:
            results.put((_call_store(store, options), None))
        except Exception as exc:
            results.put((None, exc))

    worker = threading.Thread(target=run_worker, name="reqnav-history-query", daemon=True)
    worker.start()
    try:
        entries, error = results.get(timeout=max(0.0, timeout_seconds))
    except queue.Empty:
        logger.warning("history query timed out after %.2fs", timeout_seconds)
        timeout_error = HistoryQueryTimeout(f"history query exceeded {timeout_seconds:g}s")
        return HistoryQueryResult(entries=list(previous), error=timeout_error)
    if error is not None:
        logger.warning("history query failed: %s", error, exc_info=error)
        return HistoryQueryResult(entries=list(previous), error=error)
    return HistoryQueryResult(entries=entries or [])


class HistoryQueryAdapter:
    """Store binding with a configured deadline, used by the navigator."""

    def __init__(
        self,
        store: HistoryStore | None = None,
        timeout_seconds: float = DEFAULT_QUERY_TIMEOUT_SECONDS,
    ) -> None:
        self.store = store
        self.timeout_seconds = timeout_seconds

    @property
    def available(self) -> bool:
        return self.store is not None

    def query(
        self,
        options: QueryOptions,
        previous: Sequence[HistoryEntry] = (),
    ) -> HistoryQueryResult:
        return query_history(
            self.store,
            options,
            previous=previous,
            timeout_seconds=self.timeout_seconds,
        )
