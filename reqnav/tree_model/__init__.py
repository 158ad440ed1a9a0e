"""Collection tree model: row types, expansion state, flattening, filtering.

Also formats rows as plain text for the sidebar renderer.
"""

from __future__ import annotations

from .build import find_item_index, flatten_collections
from .expansion import ExpansionState
from .filtering import filter_tree_items, item_matches_query
from .rendering import format_tree_item, method_badge, pad_or_clip, truncate_text
from .types import ItemKind, TreeItem, TreeNode

__all__ = [
    "ItemKind",
    "TreeItem",
    "TreeNode",
    "ExpansionState",
    "flatten_collections",
    "find_item_index",
    "filter_tree_items",
    "item_matches_query",
    "format_tree_item",
    "method_badge",
    "pad_or_clip",
    "truncate_text",
]
