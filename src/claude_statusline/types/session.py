"""Session descriptor types decoded from the statusline stdin payload."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ModelFamily(str, Enum):
    OPUS = "opus"
    SONNET = "sonnet"
    HAIKU = "haiku"


@dataclass(frozen=True)
class SessionDescriptor:
    session_id: Optional[str] = None
    transcript_path: Optional[str] = None
    model_id: Optional[str] = None
    project_dir: Optional[str] = None
    cwd: Optional[str] = None
    total_cost_usd: Optional[float] = None
    context_window_size: Optional[int] = None
