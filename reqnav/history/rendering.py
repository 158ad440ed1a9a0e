"""Plain-text formatting for History rows."""

from __future__ import annotations

from datetime import datetime, timezone

from ..tree_model.rendering import method_badge, pad_or_clip, truncate_text
from .types import HistoryEntry

HISTORY_ROW_RESERVED_COLUMNS = 27
HISTORY_URL_MIN_WIDTH = 10


def strip_scheme(url: str) -> str:
    """Drop a leading ``http://`` or ``https://``."""
    for prefix in ("https://", "http://"):
        if url.startswith(prefix):
            return url[len(prefix) :]
    return url


def format_time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    """Return a compact relative age label such as ``5m ago``.

    Naive timestamps are treated as UTC. Ages of a week or more fall back to
    an absolute ``Mon D`` date.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = (now - timestamp).total_seconds()
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{int(seconds // 60)}m ago"
    if seconds < 86400:
        return f"{int(seconds // 3600)}h ago"
    if seconds < 7 * 86400:
        return f"{int(seconds // 86400)}d ago"
    return f"{timestamp.strftime('%b')} {timestamp.day}"


def format_history_entry(
    entry: HistoryEntry,
    selected: bool,
    width: int,
    now: datetime | None = None,
) -> str:
    """Render ``[marker][METHOD] url status age`` padded to ``width``."""
    prefix = "▶ " if selected else "  "
    url_width = max(HISTORY_URL_MIN_WIDTH, width - HISTORY_ROW_RESERVED_COLUMNS)
    url = truncate_text(strip_scheme(entry.url), url_width)
    line = f"{prefix}{method_badge(entry.method)} {url} {entry.status} {format_time_ago(entry.timestamp, now)}"
    return pad_or_clip(line, width)
