"""
The `sessions` command.

Usage:
    clawscope sessions
"""

import typer

from clawscope.config import Config
from clawscope.errors import ClawscopeError
from clawscope.logger import get_logger
from clawscope.render import build_rows, render_table
from clawscope.session.activity import current_time_ms
from clawscope.session.registry import load_registry

logger = get_logger(__name__)


def list_sessions(config: Config, now_ms: int) -> list[str]:
    """Load the registry for ``config`` and return the rendered table lines."""
    registry = load_registry(config.sessions_path)
    return render_table(build_rows(registry, now_ms))


def register_commands(app: typer.Typer):
    @app.command("sessions")
    def sessions():
        """List all OpenClaw sessions with status and last active time."""
        config = Config.from_env()
        now_ms = current_time_ms()

        try:
            lines = list_sessions(config, now_ms)
        except ClawscopeError as e:
            logger.debug(f"sessions failed: {e!r}")
            typer.echo(f"❌ {e}", err=True)
            raise typer.Exit(code=1)

        for line in lines:
            typer.echo(line)
