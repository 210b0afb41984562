"""Statusline entry point: stdin descriptor in, one status line out."""

import logging
import sys
from typing import IO, Optional

from claude_statusline.services.config_manager import ConfigManager
from claude_statusline.services.git_resolver import GitCollaborator, SubprocessGit, resolve_git_segment
from claude_statusline.services.session_parser import (
    classify_model,
    derive_project_name,
    read_session_descriptor,
    resolve_window_size,
)
from claude_statusline.services.statusline_formatter import format_statusline
from claude_statusline.services.transcript_reader import read_last_usage
from claude_statusline.services.usage_scaler import UsageScaler

logger = logging.getLogger(__name__)


def render(
    stdin: IO,
    git: Optional[GitCollaborator] = None,
    config: Optional[ConfigManager] = None,
) -> str:
    """Build the status line for the descriptor read from stdin."""
    config = config if config is not None else ConfigManager()
    if git is None:
        git = SubprocessGit(timeout=config.get_float("git/timeout"))

    descriptor = read_session_descriptor(stdin)
    if descriptor is None:
        logger.debug("No session descriptor on stdin, using defaults")

    model = classify_model(descriptor.model_id if descriptor is not None else None)
    branch, git_status = resolve_git_segment(git)
    project = derive_project_name(descriptor)

    usage = read_last_usage(descriptor.transcript_path if descriptor is not None else None)
    window_size = resolve_window_size(descriptor, config.get_int("context/defaultWindowSize"))
    context = UsageScaler(config.scaler_config()).estimate(usage, window_size)

    cost = descriptor.total_cost_usd if descriptor is not None else None
    return format_statusline(model, branch, git_status, project, context, cost)


def run(
    stdin: Optional[IO] = None,
    stdout: Optional[IO] = None,
    git: Optional[GitCollaborator] = None,
    config: Optional[ConfigManager] = None,
) -> int:
    """Render the status line and write it to stdout."""
    config = config if config is not None else ConfigManager()
    if config.get_bool("advanced/debugLogging"):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, force=True)

    line = render(stdin if stdin is not None else sys.stdin.buffer, git=git, config=config)
    print(line, file=stdout)
    return 0
