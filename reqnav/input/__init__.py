"""Keyboard dispatch for the navigator's browsing and search modes."""

from __future__ import annotations

from .key_collections import CollectionsKeyContext, handle_collections_key
from .key_history import HistoryKeyContext, handle_history_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .key_search import SearchKeyContext, handle_search_key
from .reader import read_key

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "CollectionsKeyContext",
    "HistoryKeyContext",
    "SearchKeyContext",
    "handle_collections_key",
    "handle_history_key",
    "handle_search_key",
    "read_key",
]
