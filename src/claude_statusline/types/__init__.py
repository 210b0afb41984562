"""Type definitions for claude-statusline."""

from claude_statusline.types.session import ModelFamily, SessionDescriptor
from claude_statusline.types.usage import ContextEstimate, ScalerConfig, UsageRecord
from claude_statusline.types.git import GitStatusCounts

__all__ = [
    "ModelFamily",
    "SessionDescriptor",
    "ContextEstimate",
    "ScalerConfig",
    "UsageRecord",
    "GitStatusCounts",
]
