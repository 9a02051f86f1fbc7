"""
Logging setup built on loguru.

stdout is reserved for command output, so every log line goes to stderr.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

logger.configure(extra={"name": "clawscope"})


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default handler with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def get_logger(name: str):
    """Return a logger bound to the given module name."""
    return logger.bind(name=name)
