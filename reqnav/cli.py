"""Command-line front door for reqnav.

Loads an optional JSON fixture of collections and history entries, resolves
settings from config and flags, then either prints the sidebar once
(``--render``) or runs it interactively.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .domain.fixtures import FixtureError, load_fixture
from .history.store import MemoryHistoryStore
from .navigator.controller import CollectionNavigator
from .navigator.messages import KeyPress, Resize
from .navigator.state import ViewMode
from .render import render_sidebar
from .runtime.config import NavigatorSettings, load_navigator_settings, save_view_mode
from .runtime.loop import describe_selection, run_interactive

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _positive_float(value: str) -> float:
    """argparse type for positive second counts."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def _configure_logging(log_file: str | None) -> None:
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("reqnav")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqnav",
        description="Browse request collections and request history in a terminal sidebar.",
    )
    parser.add_argument("fixture", nargs="?", default=None, help="JSON file with collections and history entries.")
    parser.add_argument("--render", action="store_true", help="Print the sidebar once and exit.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Sidebar width for --render (default: terminal width).")
    parser.add_argument("--height", type=_positive_int, default=24, help="Sidebar height for --render.")
    parser.add_argument(
        "--keys",
        default="",
        help="Space-separated key tokens replayed before --render (e.g. 'l j ENTER').",
    )
    parser.add_argument("--mode", choices=[mode.value for mode in ViewMode], default=None, help="Initial view mode.")
    parser.add_argument("--history-limit", type=_positive_int, default=None, help="Maximum history entries per query.")
    parser.add_argument("--timeout", type=_positive_float, default=None, help="History query timeout in seconds.")
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    return parser


def resolve_settings(args: argparse.Namespace, base: NavigatorSettings) -> NavigatorSettings:
    """Overlay command-line flags on persisted settings."""
    return NavigatorSettings(
        history_limit=args.history_limit if args.history_limit is not None else base.history_limit,
        query_timeout_seconds=args.timeout if args.timeout is not None else base.query_timeout_seconds,
        view_mode=ViewMode.parse(args.mode, base.view_mode),
    )


def build_navigator(fixture: Path | None, settings: NavigatorSettings) -> CollectionNavigator:
    """Create a navigator over ``fixture`` data, or over nothing at all."""
    collections = []
    store = None
    if fixture is not None:
        collections, entries = load_fixture(fixture)
        store = MemoryHistoryStore(entries)
    return CollectionNavigator(
        collections,
        store,
        history_limit=settings.history_limit,
        query_timeout_seconds=settings.query_timeout_seconds,
        view_mode=settings.view_mode,
    )


def render_once(navigator: CollectionNavigator, width: int, height: int, keys: str = "") -> str:
    """Size the navigator, replay ``keys``, and return the sidebar text."""
    navigator.update(Resize(width, height))
    for key in keys.split():
        navigator.update(KeyPress(key))
    return "".join(line + "\n" for line in render_sidebar(navigator))


def main() -> None:
    """Parse CLI arguments and run or render the navigator."""
    args = build_parser().parse_args()
    _configure_logging(args.log_file)
    settings = resolve_settings(args, load_navigator_settings())

    fixture = Path(args.fixture) if args.fixture is not None else None
    try:
        navigator = build_navigator(fixture, settings)
    except FixtureError as exc:
        raise SystemExit(f"Invalid fixture: {exc}") from exc

    if args.render:
        width = args.width if args.width is not None else max(1, shutil.get_terminal_size((80, 24)).columns)
        sys.stdout.write(render_once(navigator, width, args.height, args.keys))
        return

    if not sys.stdin.isatty():
        raise SystemExit("Interactive mode needs a terminal; use --render for plain output.")
    selection = run_interactive(navigator)
    save_view_mode(navigator.view_mode)
    if selection is not None:
        sys.stdout.write(describe_selection(selection) + "\n")


if __name__ == "__main__":
    main()
