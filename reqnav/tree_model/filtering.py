"""Text filtering over flattened collection rows."""

from __future__ import annotations

from .types import ItemKind, TreeItem


def item_matches_query(item: TreeItem, folded_query: str) -> bool:
    """Match an already case-folded query against an item's name or method."""
    if folded_query in item.name.casefold():
        return True
    if item.kind is ItemKind.REQUEST and folded_query in item.method.casefold():
        return True
    return False


def filter_tree_items(items: list[TreeItem], query: str) -> list[TreeItem]:
    """Return rows matching ``query`` in their original order.

    Matching is a case-insensitive substring test against the display name,
    plus the HTTP method for request rows. Only matching rows are kept: the
    ancestors of a matched nested row are not pulled in, so a request can
    appear without its folder or collection above it.

    An empty query returns ``items`` itself.
    """
    if not query:
        return items
    folded_query = query.casefold()
    return [item for item in items if item_matches_query(item, folded_query)]
