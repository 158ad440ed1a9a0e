"""End-to-end navigation session across both modes and the search prompt."""

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from reqnav.domain import RequestDefinition, parse_fixture
from reqnav.history import MemoryHistoryStore
from reqnav.navigator import HistoryEntrySelected, KeyPress, RequestSelected, Resize, SocketSelected, ViewMode
from reqnav.navigator.controller import CollectionNavigator
from reqnav.render import render_sidebar

NOW = datetime(2024, 4, 2, 12, 0, tzinfo=timezone.utc)


def fixture_data() -> dict:
    history = [
        {
            "id": f"h{n}",
            "method": "GET" if n % 2 else "POST",
            "url": f"https://api.shop.test/orders/{n}",
            "status": 200 if n % 3 else 500,
            "timestamp": (NOW - timedelta(minutes=n)).isoformat(),
        }
        for n in range(1, 9)
    ]
    return {
        "collections": [
            {
                "id": "shop",
                "name": "Shop",
                "folders": [
                    {
                        "id": "orders",
                        "name": "Orders",
                        "requests": [
                            {"name": "List orders", "url": "https://api.shop.test/orders"},
                            {"name": "Create order", "method": "POST", "url": "https://api.shop.test/orders"},
                        ],
                    }
                ],
                "requests": [{"name": "Health", "method": "HEAD", "url": "https://api.shop.test/health"}],
                "sockets": [{"name": "Live updates", "endpoint": "wss://api.shop.test/live"}],
            },
            {"id": "admin", "name": "Admin", "requests": [{"name": "Ban user", "method": "DELETE"}]},
        ],
        "history": history,
    }


class NavigationSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        collections, entries = parse_fixture(fixture_data())
        self.nav = CollectionNavigator(collections, MemoryHistoryStore(entries))
        self.nav.update(Resize(48, 16))

    def send(self, *keys: str) -> list:
        return [self.nav.update(KeyPress(key)) for key in keys]

    def test_browse_select_search_and_history(self) -> None:
        nav = self.nav

        outbound = self.send("l", "j", "l", "j", "j", "ENTER")
        self.assertIsInstance(outbound[-1], RequestSelected)
        self.assertEqual(outbound[-1].request.name, "Create order")
        self.assertEqual(nav.item_count(), 7)

        outbound = self.send("G", "k", "ENTER")
        self.assertEqual(outbound[-1], SocketSelected(nav.collections[0].sockets[0]))

        self.send("/", "o", "r", "d", "ENTER")
        self.assertEqual(
            [item.name for item in nav.display_items()],
            ["Orders", "List orders", "Create order"],
        )
        collections_cursor = nav.cursor

        self.send("H")
        self.assertIs(nav.view_mode, ViewMode.HISTORY)
        self.assertEqual(len(nav.history_entries), 8)
        self.send("s", "s", "s", "s")
        self.assertEqual(nav.history_status_filter, "5xx")
        self.assertEqual([entry.id for entry in nav.history_entries], ["h3", "h6"])
        outbound = self.send("j", "ENTER")
        self.assertEqual(outbound[-1], HistoryEntrySelected(nav.history_entries[1]))

        frame = render_sidebar(nav, NOW)
        self.assertEqual(len(frame), 16)
        self.assertIn("History [5xx]", frame[2])

        self.send("x", "C")
        self.assertIs(nav.view_mode, ViewMode.COLLECTIONS)
        self.assertEqual(nav.cursor, collections_cursor)
        self.assertEqual(nav.search_query, "ord")

        self.send("ESC")
        self.assertEqual(nav.visible_item_count(), 7)

    def test_add_request_after_browsing(self) -> None:
        self.send("j")
        target = self.nav.selected_collection()
        self.assertEqual(target.name, "Admin")

        request = RequestDefinition("Unban user", method="POST")
        self.assertTrue(self.nav.add_request(request, target))

        self.assertEqual(self.nav.selected_item().node, request)
        self.assertEqual([item.name for item in self.nav.display_items()][-2:], ["Ban user", "Unban user"])


if __name__ == "__main__":
    unittest.main()
