"""Persistent JSON config helpers.

Stores the history query limit, the store query timeout, and the last view
mode. All access is defensive: malformed or missing config falls back to
defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..history.query import DEFAULT_QUERY_TIMEOUT_SECONDS
from ..history.types import DEFAULT_HISTORY_LIMIT
from ..navigator.state import ViewMode

APP_NAME = "reqnav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigatorSettings:
    """Validated navigator preferences."""

    history_limit: int = DEFAULT_HISTORY_LIMIT
    query_timeout_seconds: float = DEFAULT_QUERY_TIMEOUT_SECONDS
    view_mode: ViewMode = ViewMode.COLLECTIONS


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", config_path, exc)


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def load_navigator_settings(path: Path | None = None) -> NavigatorSettings:
    """Build ``NavigatorSettings`` from config, replacing invalid values."""
    data = load_config(path)
    settings = NavigatorSettings(
        history_limit=_positive_int(data.get("history_limit"), DEFAULT_HISTORY_LIMIT),
        query_timeout_seconds=_positive_float(data.get("query_timeout_seconds"), DEFAULT_QUERY_TIMEOUT_SECONDS),
        view_mode=ViewMode.parse(data.get("view_mode")),
    )
    logger.debug("loaded settings %s", settings)
    return settings


def save_view_mode(mode: ViewMode, path: Path | None = None) -> None:
    """Persist the view mode the next session should start in."""
    config = load_config(path)
    config["view_mode"] = mode.value
    save_config(config, path)
