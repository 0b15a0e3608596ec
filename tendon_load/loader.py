"""Session file loader: reads a YAML or JSON session description."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tendon_load.features.session.schemas import SessionRequest

logger = logging.getLogger(__name__)


class SessionFileError(ValueError):
    """Session file is missing, unreadable or invalid."""


def parse_session(data: object, source: str = "<data>") -> SessionRequest:
    """
    Validate raw session data.

    Raises:
        SessionFileError: data is not a mapping or fails validation
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SessionFileError(f"{source}: expected a mapping at top level")

    try:
        return SessionRequest.model_validate(data)
    except ValidationError as e:
        raise SessionFileError(f"{source}: invalid session\n{e}") from e


def load_session_file(path: Path) -> SessionRequest:
    """
    Load a session from .yaml/.yml or .json.

    Args:
        path: Session file

    Returns:
        Validated SessionRequest
    """
    path = Path(path)
    if not path.exists():
        raise SessionFileError(f"Session file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SessionFileError(f"{path}: cannot parse file: {e}") from e
    except OSError as e:
        raise SessionFileError(f"{path}: cannot read file: {e}") from e

    logger.debug(f"Loaded session file {path}")
    return parse_session(data, source=str(path))


def dump_session_yaml(request: SessionRequest) -> str:
    """Serialize a session request as YAML (used for templates)."""
    data = request.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
