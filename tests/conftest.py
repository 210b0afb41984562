"""Shared test fixtures for claude-statusline."""

import json
from pathlib import Path

import pytest

from helpers import FakeGit


@pytest.fixture
def write_transcript(tmp_path):
    """Write a JSONL transcript. Entries may be dicts or raw line strings."""
    def _write(entries, name: str = "session.jsonl") -> Path:
        path = tmp_path / name
        lines = [e if isinstance(e, str) else json.dumps(e) for e in entries]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def no_git() -> FakeGit:
    """A collaborator outside any repository."""
    return FakeGit()
