"""Unit tests for query options and the in-memory history store."""

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from reqnav.history import (
    HistoryEntry,
    MemoryHistoryStore,
    QueryOptions,
    build_query_options,
    next_method_filter,
    next_status_filter,
)

BASE = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def entry(entry_id: str, method: str, url: str, status: int, minutes: int) -> HistoryEntry:
    return HistoryEntry(entry_id, method, url, status, BASE + timedelta(minutes=minutes))


def sample_store() -> MemoryHistoryStore:
    return MemoryHistoryStore(
        [
            entry("1", "GET", "https://api.test/users", 200, 0),
            entry("2", "POST", "https://api.test/users", 201, 1),
            entry("3", "GET", "https://api.test/orders", 404, 2),
            entry("4", "DELETE", "https://api.test/users/7", 500, 3),
        ]
    )


def ids(entries) -> list[str]:
    return [item.id for item in entries]


class FilterCycleTests(unittest.TestCase):
    def test_method_filter_cycles_and_wraps(self) -> None:
        seen = [""]
        for _ in range(8):
            seen.append(next_method_filter(seen[-1]))

        self.assertEqual(seen, ["", "GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", ""])

    def test_status_filter_cycles_and_wraps(self) -> None:
        self.assertEqual(next_status_filter(""), "2xx")
        self.assertEqual(next_status_filter("4xx"), "5xx")
        self.assertEqual(next_status_filter("5xx"), "")

    def test_unknown_values_restart_the_cycle(self) -> None:
        self.assertEqual(next_method_filter("TRACE"), "")
        self.assertEqual(next_status_filter("1xx"), "")


class BuildQueryOptionsTests(unittest.TestCase):
    def test_defaults_sort_newest_first_without_filters(self) -> None:
        options = build_query_options()

        self.assertEqual(options.limit, 100)
        self.assertEqual(options.sort_by, "timestamp")
        self.assertEqual(options.sort_order, "DESC")
        self.assertIsNone(options.method)
        self.assertIsNone(options.status_min)
        self.assertIsNone(options.search)

    def test_status_filter_maps_to_inclusive_range(self) -> None:
        options = build_query_options(method_filter="POST", status_filter="4xx", search="users", limit=5)

        self.assertEqual((options.status_min, options.status_max), (400, 499))
        self.assertEqual(options.method, "POST")
        self.assertEqual(options.search, "users")
        self.assertEqual(options.limit, 5)


class MemoryHistoryStoreTests(unittest.TestCase):
    def test_list_sorts_newest_first(self) -> None:
        self.assertEqual(ids(sample_store().list(QueryOptions())), ["4", "3", "2", "1"])

    def test_list_ascending_order(self) -> None:
        self.assertEqual(ids(sample_store().list(QueryOptions(sort_order="ASC"))), ["1", "2", "3", "4"])

    def test_list_applies_method_and_status_filters(self) -> None:
        store = sample_store()

        self.assertEqual(ids(store.list(QueryOptions(method="get"))), ["3", "1"])
        self.assertEqual(ids(store.list(QueryOptions(status_min=200, status_max=299))), ["2", "1"])

    def test_limit_keeps_newest_entries(self) -> None:
        self.assertEqual(ids(sample_store().list(QueryOptions(limit=2))), ["4", "3"])

    def test_search_matches_url_case_insensitively(self) -> None:
        store = sample_store()

        self.assertEqual(ids(store.search("USERS", QueryOptions())), ["4", "2", "1"])
        self.assertEqual(ids(store.search("users", QueryOptions(method="POST"))), ["2"])

    def test_add_makes_entry_visible(self) -> None:
        store = MemoryHistoryStore()
        store.add(entry("9", "PUT", "https://api.test/x", 204, 5))

        self.assertEqual(len(store), 1)
        self.assertEqual(ids(store.list(QueryOptions())), ["9"])


if __name__ == "__main__":
    unittest.main()
