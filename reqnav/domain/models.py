"""Collection-side domain objects browsed by the navigator.

Collections own folders, requests, and socket definitions; folders nest
arbitrarily. The navigator only reads these objects, except for
``Collection.add_request`` which backs the explicit add-request operation.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_node_id() -> str:
    """Return a fresh stable identifier for a domain node."""
    return uuid.uuid4().hex


@dataclass(eq=False)
class RequestDefinition:
    """Saved HTTP request template."""

    name: str
    method: str = "GET"
    url: str = ""
    id: str = field(default_factory=new_node_id)


@dataclass(eq=False)
class WebSocketDefinition:
    """Saved WebSocket session template."""

    name: str
    endpoint: str = ""
    id: str = field(default_factory=new_node_id)


@dataclass(eq=False)
class Folder:
    """Named container nested inside a collection or another folder."""

    name: str
    folders: list[Folder] = field(default_factory=list)
    requests: list[RequestDefinition] = field(default_factory=list)
    sockets: list[WebSocketDefinition] = field(default_factory=list)
    id: str = field(default_factory=new_node_id)

    def has_children(self) -> bool:
        return bool(self.folders or self.requests or self.sockets)

    def add_folder(self, name: str) -> Folder:
        folder = Folder(name)
        self.folders.append(folder)
        return folder

    def add_request(self, request: RequestDefinition) -> None:
        self.requests.append(request)

    def contains_request(self, request_id: str) -> bool:
        """Return whether ``request_id`` lives in this folder or any sub-folder."""
        if any(request.id == request_id for request in self.requests):
            return True
        return any(child.contains_request(request_id) for child in self.folders)

    def contains_folder(self, folder_id: str) -> bool:
        """Return whether ``folder_id`` is a (transitive) sub-folder."""
        for child in self.folders:
            if child.id == folder_id or child.contains_folder(folder_id):
                return True
        return False

    def contains_socket(self, socket_id: str) -> bool:
        if any(socket.id == socket_id for socket in self.sockets):
            return True
        return any(child.contains_socket(socket_id) for child in self.folders)


@dataclass(eq=False)
class Collection:
    """Top-level container of folders, requests, and socket definitions."""

    name: str
    folders: list[Folder] = field(default_factory=list)
    requests: list[RequestDefinition] = field(default_factory=list)
    sockets: list[WebSocketDefinition] = field(default_factory=list)
    id: str = field(default_factory=new_node_id)

    def has_children(self) -> bool:
        return bool(self.folders or self.requests or self.sockets)

    def add_folder(self, name: str) -> Folder:
        folder = Folder(name)
        self.folders.append(folder)
        return folder

    def add_request(self, request: RequestDefinition) -> None:
        """Append ``request`` to the collection's root-level request list."""
        self.requests.append(request)

    def contains_request(self, request_id: str) -> bool:
        if any(request.id == request_id for request in self.requests):
            return True
        return any(folder.contains_request(request_id) for folder in self.folders)

    def contains_folder(self, folder_id: str) -> bool:
        for folder in self.folders:
            if folder.id == folder_id or folder.contains_folder(folder_id):
                return True
        return False

    def contains_socket(self, socket_id: str) -> bool:
        if any(socket.id == socket_id for socket in self.sockets):
            return True
        return any(folder.contains_socket(socket_id) for folder in self.folders)
