"""
Fixed-width table rendering for the sessions listing.

    SESSION          STATUS    LAST ACTIVE
    -----------------------------------------------
    agent:main:main  active    just now
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping

from clawscope.session.activity import format_relative_time, is_active, sort_sessions
from clawscope.session.registry import SessionEntry

SESSION_HEADER = "SESSION"
STATUS_WIDTH = 8
# Width reserved for LAST ACTIVE in the separator line; the column itself is unpadded
LAST_ACTIVE_WIDTH = 20
COLUMN_GAP = "  "


@dataclass(frozen=True)
class SessionRow:
    """A session as it appears in the table."""

    session_id: str
    active: bool
    last_active: str

    @property
    def status(self) -> str:
        return "active" if self.active else "stopped"


def build_rows(sessions: Mapping[str, SessionEntry], now_ms: int) -> List[SessionRow]:
    """Classify and order ``sessions`` against a single ``now_ms``."""
    return [
        SessionRow(
            session_id=session_id,
            active=is_active(entry.updated_at, now_ms),
            last_active=format_relative_time(entry.updated_at, now_ms),
        )
        for session_id, entry in sort_sessions(sessions, now_ms)
    ]


def session_column_width(session_ids: Iterable[str]) -> int:
    return max([len(SESSION_HEADER), *(len(s) for s in session_ids)])


def _format_line(session: str, status: str, last_active: str, width: int) -> str:
    return f"{session:<{width}}{COLUMN_GAP}{status:<{STATUS_WIDTH}}{COLUMN_GAP}{last_active}"


def render_table(rows: List[SessionRow]) -> List[str]:
    """Return the table as lines: header, separator, then one line per row.

    The header and separator are present even when there are no rows.
    """
    width = session_column_width(row.session_id for row in rows)
    lines = [
        _format_line(SESSION_HEADER, "STATUS", "LAST ACTIVE", width),
        "-" * (width + len(COLUMN_GAP) + STATUS_WIDTH + len(COLUMN_GAP) + LAST_ACTIVE_WIDTH),
    ]
    for row in rows:
        lines.append(_format_line(row.session_id, row.status, row.last_active, width))
    return lines
