"""Decode the JSON session descriptor the host writes to stdin."""

import logging
import math
import os
from pathlib import PurePath
from typing import IO, Any, Optional

import orjson

from claude_statusline.types.session import ModelFamily, SessionDescriptor

logger = logging.getLogger(__name__)

# Checked in order; the first substring found wins
_MODEL_PRIORITY = (ModelFamily.OPUS, ModelFamily.SONNET, ModelFamily.HAIKU)
DEFAULT_MODEL = ModelFamily.OPUS


def read_session_descriptor(stream: IO) -> Optional[SessionDescriptor]:
    """Read a stream to EOF and parse it as a session descriptor."""
    try:
        data = stream.read()
    except (OSError, UnicodeDecodeError):
        logger.debug("Failed to read session descriptor", exc_info=True)
        return None
    return parse_session_descriptor(data)


def parse_session_descriptor(data: str | bytes) -> Optional[SessionDescriptor]:
    """Parse the descriptor JSON. Empty input, bad JSON or a non-object gives None."""
    data = data.strip()
    if not data:
        return None

    try:
        raw = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        logger.debug("Malformed session descriptor: %s", e)
        return None

    if not isinstance(raw, dict):
        return None

    return SessionDescriptor(
        session_id=_opt_str(raw.get("session_id")),
        transcript_path=_opt_str(raw.get("transcript_path")),
        model_id=_opt_str(_nested(raw, "model", "id")),
        project_dir=_opt_str(_nested(raw, "workspace", "project_dir")),
        cwd=_opt_str(raw.get("cwd")),
        total_cost_usd=_opt_float(_nested(raw, "cost", "total_cost_usd")),
        context_window_size=_opt_positive_int(_nested(raw, "context_window", "context_window_size")),
    )


def classify_model(model_id: Optional[str]) -> ModelFamily:
    """Map a model identifier to its family by case-sensitive substring."""
    if model_id is None:
        return DEFAULT_MODEL
    for family in _MODEL_PRIORITY:
        if family.value in model_id:
            return family
    return DEFAULT_MODEL


def derive_project_name(descriptor: Optional[SessionDescriptor]) -> str:
    """Get the last path segment of the project directory as its display name.

    Prefers workspace.project_dir, then the descriptor cwd, then the process cwd.
    """
    directory = None
    if descriptor is not None:
        directory = descriptor.project_dir or descriptor.cwd
    if directory is None:
        directory = os.getcwd()
    return PurePath(directory).name


def resolve_window_size(descriptor: Optional[SessionDescriptor], default: int) -> int:
    if descriptor is None or descriptor.context_window_size is None:
        return default
    return descriptor.context_window_size


def _nested(raw: dict, *keys: str) -> Any:
    """Walk nested objects, returning None as soon as a level is missing or not an object."""
    node: Any = raw
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _opt_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _opt_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def _opt_positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    value = int(value)
    return value if value > 0 else None
