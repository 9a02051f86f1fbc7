"""
clawscope CLI: inspect OpenClaw agent sessions.

Commands:
- sessions: list all sessions with status and last active time
"""

import typer

from clawscope.cli.main import configure_logging, version_callback
from clawscope.cli.sessions import register_commands

app = typer.Typer(
    name="clawscope",
    help="Inspect OpenClaw agent sessions",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    Inspect OpenClaw agent sessions.
    """
    configure_logging(verbose)


register_commands(app)

if __name__ == "__main__":
    app()
