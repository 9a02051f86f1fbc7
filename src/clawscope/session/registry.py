"""
Loader for the OpenClaw session registry.

The registry is a JSON object keyed by session id:

    {"agent:main:main": {"updatedAt": 1760000000000, "sessionId": "..."}}

Only ``updatedAt`` is consumed; any other fields are ignored.
"""

from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, ValidationError

from clawscope.errors import FileReadError, ParseError
from clawscope.logger import get_logger

logger = get_logger(__name__)


class SessionEntry(BaseModel):
    """One recorded session."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    updated_at: StrictInt = Field(alias="updatedAt")


Registry = Dict[str, SessionEntry]

_registry_adapter = TypeAdapter(Registry)


def parse_registry(content: str) -> Registry:
    """Parse registry JSON text, raising ParseError on bad JSON or shape."""
    try:
        return _registry_adapter.validate_json(content)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        detail = f"{location}: {error['msg']}" if location else error["msg"]
        raise ParseError(detail) from e


def load_registry(path: Path) -> Registry:
    """Read and parse the registry at ``path``."""
    logger.debug(f"Reading sessions from {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Read failed for {path}: {e}")
        raise FileReadError(path) from e

    registry = parse_registry(content)
    logger.debug(f"Loaded {len(registry)} session(s)")
    return registry
