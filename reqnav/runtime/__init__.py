"""Runtime wiring: persisted settings, terminal control, and the event loop.

Loop entry points are imported lazily so that importing config helpers does
not pull in the terminal stack.
"""

from __future__ import annotations

from .config import NavigatorSettings, load_navigator_settings, save_view_mode


def run_main_loop(*args, **kwargs):
    """Lazily import the loop runner."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def run_interactive(*args, **kwargs):
    """Lazily import the full-screen runtime entry point."""
    from .loop import run_interactive as _run_interactive

    return _run_interactive(*args, **kwargs)


__all__ = [
    "NavigatorSettings",
    "load_navigator_settings",
    "save_view_mode",
    "run_main_loop",
    "run_interactive",
]
