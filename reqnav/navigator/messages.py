"""Inbound events consumed by the navigator and outbound selection messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..domain.models import RequestDefinition, WebSocketDefinition
from ..history.types import HistoryEntry


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class FocusGained:
    pass


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class KeyPress:
    """One key token: a single printable character or a named key.

    Named keys use the tokens produced by ``reqnav.input.reader``: ``UP``,
    ``DOWN``, ``LEFT``, ``RIGHT``, ``ENTER``, ``ESC``, ``BACKSPACE``,
    ``DELETE``, ``HOME``, ``END``, ``TAB``, ``CTRL_U``. ``SPACE`` is
    normalized to a literal space.
    """

    key: str

    def __post_init__(self) -> None:
        if self.key == "SPACE":
            object.__setattr__(self, "key", " ")


@dataclass(frozen=True)
class RequestSelected:
    request: RequestDefinition


@dataclass(frozen=True)
class SocketSelected:
    socket: WebSocketDefinition


@dataclass(frozen=True)
class HistoryEntrySelected:
    entry: HistoryEntry


InboundMessage = Union[Resize, FocusGained, FocusLost, KeyPress]
OutboundMessage = Union[RequestSelected, SocketSelected, HistoryEntrySelected]
