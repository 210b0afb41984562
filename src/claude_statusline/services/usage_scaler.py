"""Context-window usage estimation.

The host application computes its /context percentage differently from the
usage figures recorded in the transcript. This module reconciles the two:

    scaled  = floor((cache_read + input) * scale_factor)
    buffer  = floor(window * buffer_ratio)        # autocompact mode only
    percent = round((scaled + buffer) / window * 100)

The percentage is not clamped; values above 100 mean compaction is imminent.
"""

import logging
import math
from typing import Optional

from claude_statusline.types.usage import ContextEstimate, ScalerConfig, UsageRecord
from claude_statusline.utils.token_format import format_tokens, round_half_up

logger = logging.getLogger(__name__)


class UsageScaler:
    """Turns a raw usage record into a ContextEstimate for a given window size."""

    def __init__(self, config: Optional[ScalerConfig] = None):
        self._config = config if config is not None else ScalerConfig()

    @property
    def config(self) -> ScalerConfig:
        return self._config

    def scaled_tokens(self, usage: UsageRecord) -> int:
        return math.floor(usage.context_tokens * self._config.scale_factor)

    def buffer_tokens(self, window_size: int) -> int:
        return math.floor(window_size * self._config.buffer_ratio)

    def estimate(self, usage: Optional[UsageRecord], window_size: int) -> Optional[ContextEstimate]:
        """Estimate context occupancy, or None when there is no usage record."""
        if usage is None:
            return None
        if window_size <= 0:
            raise ValueError(f"window_size must be positive, got {window_size}")

        total = self.scaled_tokens(usage) + self.buffer_tokens(window_size)
        used_percent = round_half_up(total / window_size * 100)
        logger.debug("Context estimate: %d tokens of %d (%d%%)", total, window_size, used_percent)
        return ContextEstimate(
            used_percent=used_percent,
            total_tokens=total,
            display_tokens=format_tokens(total),
        )
