"""Tree row datatypes used across navigator modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..domain.models import Collection, Folder, RequestDefinition, WebSocketDefinition

TreeNode = Union[Collection, Folder, RequestDefinition, WebSocketDefinition]


class ItemKind(Enum):
    COLLECTION = "collection"
    FOLDER = "folder"
    REQUEST = "request"
    SOCKET = "socket"

    @property
    def is_container(self) -> bool:
        return self in (ItemKind.COLLECTION, ItemKind.FOLDER)


SOCKET_METHOD_LABEL = "WS"


@dataclass(frozen=True)
class TreeItem:
    """One flattened row in the collections view.

    ``node`` is the domain object this row projects; its type always matches
    ``kind``. Rows are rebuilt, never mutated, when data or expansion changes.
    """

    id: str
    name: str
    kind: ItemKind
    level: int
    expandable: bool
    expanded: bool
    node: TreeNode

    @property
    def collection(self) -> Collection | None:
        return self.node if self.kind is ItemKind.COLLECTION else None

    @property
    def folder(self) -> Folder | None:
        return self.node if self.kind is ItemKind.FOLDER else None

    @property
    def request(self) -> RequestDefinition | None:
        return self.node if self.kind is ItemKind.REQUEST else None

    @property
    def socket(self) -> WebSocketDefinition | None:
        return self.node if self.kind is ItemKind.SOCKET else None

    @property
    def method(self) -> str:
        """HTTP method for request rows, ``WS`` for sockets, else empty."""
        if self.kind is ItemKind.REQUEST:
            return self.node.method
        if self.kind is ItemKind.SOCKET:
            return SOCKET_METHOD_LABEL
        return ""
