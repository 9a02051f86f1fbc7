"""
Session registry inspection.

- registry: load sessions.json into validated entries
- activity: clock, active/stopped classification, relative ages, ordering
"""

from clawscope.session.activity import (
    ACTIVE_WINDOW_MS,
    Clock,
    current_time_ms,
    format_relative_time,
    is_active,
    sort_sessions,
)
from clawscope.session.registry import Registry, SessionEntry, load_registry, parse_registry

__all__ = [
    "ACTIVE_WINDOW_MS",
    "Clock",
    "Registry",
    "SessionEntry",
    "current_time_ms",
    "format_relative_time",
    "is_active",
    "load_registry",
    "parse_registry",
    "sort_sessions",
]
