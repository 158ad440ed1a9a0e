"""Domain objects the navigator browses, plus demo fixture loading."""

from .fixtures import FixtureError, load_fixture, parse_fixture
from .models import Collection, Folder, RequestDefinition, WebSocketDefinition, new_node_id

__all__ = [
    "Collection",
    "Folder",
    "RequestDefinition",
    "WebSocketDefinition",
    "new_node_id",
    "FixtureError",
    "load_fixture",
    "parse_fixture",
]
