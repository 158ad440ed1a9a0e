"""Formatting helpers for collection-tree rows."""

from __future__ import annotations

import unicodedata

from .types import ItemKind, TreeItem

METHOD_BADGES: dict[str, str] = {
    "GET": "GET ",
    "POST": "POST",
    "PUT": "PUT ",
    "PATCH": "PTCH",
    "DELETE": "DEL ",
    "HEAD": "HEAD",
    "OPTIONS": "OPT ",
    "WS": "WS  ",
}
KIND_ICONS: dict[ItemKind, str] = {
    ItemKind.COLLECTION: "[C] ",
    ItemKind.FOLDER: "[F] ",
}
EXPANDED_MARKER = "▼ "
COLLAPSED_MARKER = "▶ "
LEAF_MARKER = "  "
CURSOR_MARKER = "→"


def char_width(ch: str) -> int:
    """Terminal cells taken by ``ch``: 0 for combining marks, 2 for wide glyphs."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip_to_width(text: str, width: int) -> str:
    """Cut ``text`` so its terminal cell width does not exceed ``width``."""
    if width <= 0:
        return ""
    out: list[str] = []
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def pad_or_clip(text: str, width: int) -> str:
    """Return ``text`` clipped or space-padded to exactly ``width`` cells."""
    clipped = clip_to_width(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def truncate_text(text: str, available: int) -> str:
    """Shorten ``text`` to ``available`` cells, using ``...`` when room allows."""
    if available <= 0:
        return ""
    if display_width(text) <= available:
        return text
    if available < 4:
        return clip_to_width(text, available)
    return clip_to_width(text, available - 3) + "..."


def method_badge(method: str) -> str:
    """Return a fixed four-cell badge for an HTTP method."""
    upper = method.upper()
    badge = METHOD_BADGES.get(upper)
    if badge is not None:
        return badge
    return f"{upper[:4]:<4}"


def format_tree_item(item: TreeItem, selected: bool, width: int) -> str:
    """Render one tree row as plain text padded to ``width`` cells."""
    prefix = CURSOR_MARKER if selected else " "
    indent = "  " * item.level
    if item.expandable:
        marker = EXPANDED_MARKER if item.expanded else COLLAPSED_MARKER
    else:
        marker = LEAF_MARKER
    if item.kind.is_container:
        icon = KIND_ICONS[item.kind]
    else:
        icon = method_badge(item.method) + " "
    head = prefix + indent + marker + icon
    name = truncate_text(item.name, width - display_width(head))
    return pad_or_clip(head + name, width)
