"""Public package surface for reqnav.

Exports ``main`` for programmatic CLI invocation.
The navigator itself lives in ``reqnav.navigator.controller``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
