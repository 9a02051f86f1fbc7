"""
Activity classification, relative ages and display ordering for sessions.

Every function takes ``now_ms`` explicitly; the caller reads the clock once
per command so all entries are judged against the same instant.
"""

import time
from typing import Callable, List, Mapping, Tuple

from clawscope.session.registry import SessionEntry

Clock = Callable[[], int]

# A session updated within this window counts as active
ACTIVE_WINDOW_MS = 5 * 60 * 1000


def current_time_ms() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def is_active(updated_at_ms: int, now_ms: int) -> bool:
    """True if the session was updated less than five minutes before now.

    Future timestamps count as active.
    """
    return (now_ms - updated_at_ms) < ACTIVE_WINDOW_MS


def _plural(count: int, unit: str) -> str:
    if count == 1:
        return f"1 {unit} ago"
    return f"{count} {unit}s ago"


def format_relative_time(updated_at_ms: int, now_ms: int) -> str:
    """
    Render the age of a timestamp, e.g. "just now", "6 seconds ago",
    "1 hour ago", "3 days ago".

    Each unit is truncated, never rounded. Future timestamps read as "just now".
    """
    diff_ms = now_ms - updated_at_ms
    if diff_ms < 0:
        return "just now"

    diff_secs = diff_ms // 1000
    diff_mins = diff_secs // 60
    diff_hours = diff_mins // 60
    diff_days = diff_hours // 24

    if diff_secs < 60:
        if diff_secs <= 5:
            return "just now"
        return f"{diff_secs} seconds ago"
    if diff_mins < 60:
        return _plural(diff_mins, "minute")
    if diff_hours < 24:
        return _plural(diff_hours, "hour")
    return _plural(diff_days, "day")


def sort_sessions(
    sessions: Mapping[str, SessionEntry], now_ms: int
) -> List[Tuple[str, SessionEntry]]:
    """
    Order sessions for display: active before stopped, then most recently
    updated first. Equal timestamps fall back to the session id.
    """

    def sort_key(item: Tuple[str, SessionEntry]):
        session_id, entry = item
        return (not is_active(entry.updated_at, now_ms), -entry.updated_at, session_id)

    return sorted(sessions.items(), key=sort_key)
