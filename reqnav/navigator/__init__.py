"""Navigator state machine: messages, per-mode viewports, and layout math.

``CollectionNavigator`` is imported from ``reqnav.navigator.controller``.
"""

from __future__ import annotations

from .layout import section_heights
from .messages import (
    FocusGained,
    FocusLost,
    HistoryEntrySelected,
    InboundMessage,
    KeyPress,
    OutboundMessage,
    RequestSelected,
    Resize,
    SocketSelected,
)
from .state import NavigatorState, ViewMode, ViewportState
from .viewport import adjust_offset, clamp_cursor, jump_to_bottom, jump_to_top, move_cursor, move_viewport

__all__ = [
    "FocusGained",
    "FocusLost",
    "HistoryEntrySelected",
    "InboundMessage",
    "KeyPress",
    "OutboundMessage",
    "RequestSelected",
    "Resize",
    "SocketSelected",
    "NavigatorState",
    "ViewMode",
    "ViewportState",
    "section_heights",
    "adjust_offset",
    "clamp_cursor",
    "jump_to_bottom",
    "jump_to_top",
    "move_cursor",
    "move_viewport",
]
