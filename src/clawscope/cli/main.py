"""
Root CLI plumbing: logging and the --version flag.
"""

import typer

from clawscope import __version__


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from clawscope.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING")


def version_callback(value: bool):
    if value:
        typer.echo(f"clawscope {__version__}")
        raise typer.Exit()
