"""Unit tests for collection/folder containment helpers."""

from __future__ import annotations

import unittest

from reqnav.domain import Collection, Folder, RequestDefinition, WebSocketDefinition


class DomainModelTests(unittest.TestCase):
    def test_new_nodes_get_distinct_ids(self) -> None:
        first = RequestDefinition("a")
        second = RequestDefinition("a")

        self.assertNotEqual(first.id, second.id)
        self.assertNotEqual(first, second)

    def test_has_children_counts_folders_requests_and_sockets(self) -> None:
        self.assertFalse(Collection("empty").has_children())
        self.assertTrue(Collection("f", folders=[Folder("x")]).has_children())
        self.assertTrue(Collection("r", requests=[RequestDefinition("x")]).has_children())
        self.assertTrue(Collection("s", sockets=[WebSocketDefinition("x")]).has_children())

    def test_contains_helpers_search_nested_folders(self) -> None:
        request = RequestDefinition("deep")
        socket = WebSocketDefinition("feed")
        inner = Folder("inner", requests=[request], sockets=[socket])
        outer = Folder("outer", folders=[inner])
        collection = Collection("API", folders=[outer])

        self.assertTrue(collection.contains_request(request.id))
        self.assertTrue(collection.contains_socket(socket.id))
        self.assertTrue(collection.contains_folder(inner.id))
        self.assertTrue(outer.contains_folder(inner.id))
        self.assertFalse(inner.contains_folder(outer.id))
        self.assertFalse(collection.contains_request("missing"))

    def test_add_request_appends_to_root_level(self) -> None:
        collection = Collection("API", requests=[RequestDefinition("first")])
        added = RequestDefinition("second")

        collection.add_request(added)

        self.assertEqual([request.name for request in collection.requests], ["first", "second"])

    def test_add_folder_returns_new_child(self) -> None:
        collection = Collection("API")
        folder = collection.add_folder("Users")
        nested = folder.add_folder("Admin")

        self.assertIs(collection.folders[0], folder)
        self.assertIs(folder.folders[0], nested)


if __name__ == "__main__":
    unittest.main()
