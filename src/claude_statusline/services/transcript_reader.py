"""Locate the most recent token usage record in a JSONL session transcript."""

import logging
import math
from pathlib import Path
from typing import Any, Optional

import orjson

from claude_statusline.types.usage import UsageRecord

logger = logging.getLogger(__name__)


def read_last_usage(transcript_path: Optional[str | Path]) -> Optional[UsageRecord]:
    """Return the usage record of the last transcript line that has one.

    "Last" is by position in the file; the transcript is append-only, so
    earlier turns are stale. Returns None when the path is missing, the file
    cannot be read, or no line carries ``message.usage``. Never raises.
    """
    if not transcript_path:
        return None

    path = Path(transcript_path)
    if not path.is_file():
        logger.debug("Transcript not found: %s", path)
        return None

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        logger.debug("Failed to read transcript %s", path, exc_info=True)
        return None

    lines = content.strip().split("\n")
    for line_num in range(len(lines) - 1, -1, -1):
        line = lines[line_num]
        try:
            raw = orjson.loads(line)
        except orjson.JSONDecodeError as e:
            # Partial trailing writes are expected while the host is appending.
            # orjson also rejects integers wider than 64 bits.
            if "\"usage\"" in line:
                logger.debug("Skipping unparsable usage line %d in %s: %s", line_num + 1, path.name, e)
            continue

        if not isinstance(raw, dict):
            continue

        message = raw.get("message")
        if not isinstance(message, dict):
            continue

        usage = message.get("usage")
        if isinstance(usage, dict):
            return parse_usage(usage)

    logger.debug("No usage record in %s", path)
    return None


def parse_usage(raw_usage: dict) -> UsageRecord:
    """Convert a raw ``message.usage`` object into a UsageRecord."""
    return UsageRecord(
        input_tokens=_token_count(raw_usage.get("input_tokens")),
        cache_creation_input_tokens=_token_count(raw_usage.get("cache_creation_input_tokens")),
        cache_read_input_tokens=_token_count(raw_usage.get("cache_read_input_tokens")),
        output_tokens=_token_count(raw_usage.get("output_tokens")),
    )


def _token_count(value: Any) -> int:
    """Coerce a raw usage field to a non-negative int; absent or invalid is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float) and math.isfinite(value):
        return max(int(value), 0)
    return 0
