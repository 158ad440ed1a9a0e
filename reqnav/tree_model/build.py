"""Tree-row construction for collection forests honoring expansion state."""

from __future__ import annotations

from collections.abc import Iterable

from ..domain.models import Collection, Folder
from .expansion import ExpansionState
from .types import ItemKind, TreeItem


def _container_item(container: Collection | Folder, kind: ItemKind, level: int, expansion: ExpansionState) -> TreeItem:
    return TreeItem(
        id=container.id,
        name=container.name,
        kind=kind,
        level=level,
        expandable=container.has_children(),
        expanded=expansion.is_expanded(container.id),
        node=container,
    )


def flatten_collections(
    collections: Iterable[Collection],
    expansion: ExpansionState,
) -> list[TreeItem]:
    """Build the ordered display rows for ``collections``.

    Depth-first pre-order: each container row is followed by its folders,
    then its requests, then its sockets, but only when the container's ID is
    expanded. Collapsed subtrees are never visited.
    """
    items: list[TreeItem] = []

    def walk_children(container: Collection | Folder, level: int) -> None:
        """Append visible children of an expanded container at ``level``."""
        for folder in container.folders:
            folder_item = _container_item(folder, ItemKind.FOLDER, level, expansion)
            items.append(folder_item)
            if folder_item.expanded:
                walk_children(folder, level + 1)
        for request in container.requests:
            items.append(
                TreeItem(
                    id=request.id,
                    name=request.name,
                    kind=ItemKind.REQUEST,
                    level=level,
                    expandable=False,
                    expanded=False,
                    node=request,
                )
            )
        for socket in container.sockets:
            items.append(
                TreeItem(
                    id=socket.id,
                    name=socket.name,
                    kind=ItemKind.SOCKET,
                    level=level,
                    expandable=False,
                    expanded=False,
                    node=socket,
                )
            )

    for collection in collections:
        collection_item = _container_item(collection, ItemKind.COLLECTION, 0, expansion)
        items.append(collection_item)
        if collection_item.expanded:
            walk_children(collection, 1)
    return items


def find_item_index(items: list[TreeItem], node_id: str) -> int | None:
    """Return the first row index whose ``id`` equals ``node_id``."""
    for idx, item in enumerate(items):
        if item.id == node_id:
            return idx
    return None
