"""Assemble the final status line from resolved facts."""

from typing import Optional

from claude_statusline.types.session import ModelFamily
from claude_statusline.types.usage import ContextEstimate
from claude_statusline.utils.token_format import format_cost

SEPARATOR = " │ "

MODEL_EMOJI: dict[ModelFamily, str] = {
    ModelFamily.OPUS: "🟣",
    ModelFamily.SONNET: "🟠",
    ModelFamily.HAIKU: "🟢",
}
DEFAULT_EMOJI = "⚪"


def build_segments(
    model: ModelFamily,
    branch: str,
    git_status: str,
    project: str,
    context: Optional[ContextEstimate],
    cost: Optional[float],
) -> list[str]:
    """Build the display segments in their fixed order."""
    segments = [f"{MODEL_EMOJI.get(model, DEFAULT_EMOJI)} {model.value}"]

    if branch:
        segments.append(f"⎇ {branch} {git_status}" if git_status else f"⎇ {branch}")

    segments.append(f"📁 {project}")

    # Both usage segments go together; unknown usage is not the same as 0%
    if context is not None:
        segments.append(f"📐 {context.used_percent}%")
        segments.append(f"📊 {context.display_tokens}")

    segments.append(f"💰 {format_cost(cost)}")
    return segments


def format_statusline(
    model: ModelFamily,
    branch: str,
    git_status: str,
    project: str,
    context: Optional[ContextEstimate],
    cost: Optional[float],
) -> str:
    return SEPARATOR.join(build_segments(model, branch, git_status, project, context, cost))
