"""Demo fixture loading for the interactive CLI.

A fixture is a JSON object::

    {
      "collections": [
        {"name": "API", "folders": [...], "requests": [...], "sockets": [...]}
      ],
      "history": [
        {"id": "1", "method": "GET", "url": "https://...", "status": 200,
         "timestamp": "2024-01-01T12:00:00+00:00"}
      ]
    }

Folders use the same shape as collections. Requests accept ``name``,
``method`` and ``url``; sockets accept ``name`` and
``endpoint``. Any node may carry an explicit ``id``.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from ..history.types import HistoryEntry
from .models import Collection, Folder, RequestDefinition, WebSocketDefinition, new_node_id


class FixtureError(ValueError):
    """Raised when a fixture file cannot be read or has the wrong shape."""


def _require_mapping(value: object, where: str) -> dict:
    if not isinstance(value, dict):
        raise FixtureError(f"{where}: expected an object")
    return value


def _require_list(value: object, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise FixtureError(f"{where}: expected a list")
    return value


def _name(raw: dict, where: str) -> str:
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise FixtureError(f"{where}: missing name")
    return name


def _node_id(raw: dict) -> str:
    value = raw.get("id")
    return str(value) if value not in (None, "") else new_node_id()


def _parse_request(raw: object, where: str) -> RequestDefinition:
    data = _require_mapping(raw, where)
    return RequestDefinition(
        name=_name(data, where),
        method=str(data.get("method", "GET")).upper(),
        url=str(data.get("url", "")),
        id=_node_id(data),
    )


def _parse_socket(raw: object, where: str) -> WebSocketDefinition:
    data = _require_mapping(raw, where)
    return WebSocketDefinition(
        name=_name(data, where),
        endpoint=str(data.get("endpoint", "")),
        id=_node_id(data),
    )


def _fill_container(container: Collection | Folder, data: dict, where: str) -> None:
    for idx, raw_folder in enumerate(_require_list(data.get("folders"), f"{where}.folders")):
        folder_where = f"{where}.folders[{idx}]"
        folder_data = _require_mapping(raw_folder, folder_where)
        folder = Folder(_name(folder_data, folder_where), id=_node_id(folder_data))
        _fill_container(folder, folder_data, folder_where)
        container.folders.append(folder)
    for idx, raw_request in enumerate(_require_list(data.get("requests"), f"{where}.requests")):
        container.requests.append(_parse_request(raw_request, f"{where}.requests[{idx}]"))
    for idx, raw_socket in enumerate(_require_list(data.get("sockets"), f"{where}.sockets")):
        container.sockets.append(_parse_socket(raw_socket, f"{where}.sockets[{idx}]"))


def _parse_history_entry(raw: object, where: str) -> HistoryEntry:
    data = _require_mapping(raw, where)
    try:
        timestamp = datetime.fromisoformat(str(data["timestamp"]))
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        status = int(data.get("status", 0))
    except (KeyError, ValueError, TypeError) as exc:
        raise FixtureError(f"{where}: {exc}") from exc
    return HistoryEntry(
        id=str(data.get("id") or new_node_id()),
        method=str(data.get("method", "GET")).upper(),
        url=str(data.get("url", "")),
        status=status,
        timestamp=timestamp,
    )


def parse_fixture(data: object) -> tuple[list[Collection], list[HistoryEntry]]:
    """Convert decoded fixture JSON into collections and history entries."""
    root = _require_mapping(data, "fixture")
    collections: list[Collection] = []
    for idx, raw_collection in enumerate(_require_list(root.get("collections"), "collections")):
        where = f"collections[{idx}]"
        collection_data = _require_mapping(raw_collection, where)
        collection = Collection(_name(collection_data, where), id=_node_id(collection_data))
        _fill_container(collection, collection_data, where)
        collections.append(collection)
    entries = [
        _parse_history_entry(raw_entry, f"history[{idx}]")
        for idx, raw_entry in enumerate(_require_list(root.get("history"), "history"))
    ]
    return collections, entries


def load_fixture(path: Path) -> tuple[list[Collection], list[HistoryEntry]]:
    """Read and parse a fixture file, raising ``FixtureError`` on any problem."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise FixtureError(f"{path}: {exc}") from exc
    return parse_fixture(data)
