"""Token usage and context estimate types."""

from dataclasses import dataclass


@dataclass
class UsageRecord:
    """Token accounting for one assistant turn, as recorded in the transcript."""
    input_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0
    output_tokens: int = 0

    @property
    def context_tokens(self) -> int:
        # Cache creation and output tokens are not part of steady-state occupancy
        return self.cache_read_input_tokens + self.input_tokens


@dataclass
class ContextEstimate:
    used_percent: int
    total_tokens: int
    display_tokens: str


@dataclass(frozen=True)
class ScalerConfig:
    autocompact_enabled: bool = True
    autocompact_scale_factor: float = 0.83
    autocompact_buffer_ratio: float = 0.225

    @property
    def scale_factor(self) -> float:
        return self.autocompact_scale_factor if self.autocompact_enabled else 1.0

    @property
    def buffer_ratio(self) -> float:
        return self.autocompact_buffer_ratio if self.autocompact_enabled else 0.0
