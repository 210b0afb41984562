"""Services for claude-statusline."""

from claude_statusline.services.config_manager import ConfigManager
from claude_statusline.services.git_resolver import SubprocessGit, parse_porcelain, render_git_status
from claude_statusline.services.session_parser import parse_session_descriptor, read_session_descriptor
from claude_statusline.services.statusline_formatter import format_statusline
from claude_statusline.services.transcript_reader import read_last_usage
from claude_statusline.services.usage_scaler import UsageScaler

__all__ = [
    "ConfigManager",
    "SubprocessGit",
    "parse_porcelain",
    "render_git_status",
    "parse_session_descriptor",
    "read_session_descriptor",
    "format_statusline",
    "read_last_usage",
    "UsageScaler",
]
