"""Git metadata resolver: current branch and working-tree status summary."""

import logging
import subprocess
from typing import Optional, Protocol

from claude_statusline.types.git import GitStatusCounts

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0

# Porcelain status letters that mean a change is staged (first column)
_STAGED_CODES = frozenset("MADRC")


class GitCollaborator(Protocol):
    """Read-only git queries. Implementations return "" on any failure."""

    def current_branch(self) -> str: ...

    def porcelain_status(self) -> str: ...


class SubprocessGit:
    """GitCollaborator backed by the git binary, with a bounded timeout."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, cwd: Optional[str] = None):
        self._timeout = timeout
        self._cwd = cwd

    def current_branch(self) -> str:
        # Empty for detached HEAD or outside a repository
        return self._run("branch", "--show-current").strip()

    def porcelain_status(self) -> str:
        # Leading spaces are significant: " M" is unstaged, "M " is staged
        return self._run("status", "--porcelain").rstrip()

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("git %s timed out after %.1fs", " ".join(args), self._timeout)
            return ""
        except (OSError, subprocess.SubprocessError):
            logger.debug("Failed to run git %s", " ".join(args), exc_info=True)
            return ""

        if result.returncode != 0:
            logger.debug("git %s exited %d: %s", " ".join(args), result.returncode, result.stderr.strip())
            return ""
        return result.stdout


def parse_porcelain(status: str) -> GitStatusCounts:
    """Count staged, modified and untracked entries in ``git status --porcelain`` output.

    Classification looks at the two status columns of each line:

    - staged: column 1 is one of M, A, D, R, C
    - modified: column 1 or column 2 is M
    - untracked: the line starts with ``??``

    A line like ``MM file`` or ``M  file`` counts as both staged and modified.
    """
    counts = GitStatusCounts()
    for line in status.splitlines():
        if not line:
            continue
        index_code = line[0]
        worktree_code = line[1] if len(line) > 1 else ""

        if line.startswith("??"):
            counts.untracked += 1
        if index_code in _STAGED_CODES:
            counts.staged += 1
        if index_code == "M" or worktree_code == "M":
            counts.modified += 1
    return counts


def render_git_status(counts: GitStatusCounts) -> str:
    """Render counts as ``[●staged ~modified +untracked]``, or "" when clean."""
    if counts.is_clean:
        return ""
    parts = []
    if counts.staged:
        parts.append(f"●{counts.staged}")
    if counts.modified:
        parts.append(f"~{counts.modified}")
    if counts.untracked:
        parts.append(f"+{counts.untracked}")
    return f"[{' '.join(parts)}]"


def resolve_git_segment(git: GitCollaborator) -> tuple[str, str]:
    """Return (branch, rendered status). Status is only queried when there is a branch."""
    branch = git.current_branch()
    if not branch:
        return "", ""
    return branch, render_git_status(parse_porcelain(git.porcelain_status()))
