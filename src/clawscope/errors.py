"""
Errors raised while loading the session registry.

Both kinds are fatal to the command: the CLI reports the message and exits
non-zero.
"""

from pathlib import Path


class ClawscopeError(Exception):
    """Base class for clawscope failures."""

    pass


class FileReadError(ClawscopeError):
    """Raised when the sessions file is missing or unreadable."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Failed to read sessions file: {path}")


class ParseError(ClawscopeError):
    """Raised when the sessions file is not a valid session registry."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse sessions.json: {detail}")
