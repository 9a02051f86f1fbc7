"""
Runtime configuration for clawscope.

The registry location is derived from ``HOME`` once at startup and handed to
the loader, so nothing below the CLI reads the environment itself.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

DEFAULT_HOME = "/root"


class Config(BaseModel):
    """Resolved paths for one clawscope invocation."""

    home: Path
    agent_id: str = "main"

    @property
    def openclaw_dir(self) -> Path:
        return self.home / ".openclaw"

    @property
    def sessions_path(self) -> Path:
        """Location of the agent's sessions.json registry."""
        return (
            self.openclaw_dir
            / "agents"
            / self.agent_id
            / "sessions"
            / "sessions.json"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        # An empty HOME counts as unset
        home = env.get("HOME") or DEFAULT_HOME
        return cls(home=Path(home))
