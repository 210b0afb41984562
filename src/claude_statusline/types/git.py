"""Working-tree status counts."""

from dataclasses import dataclass


@dataclass
class GitStatusCounts:
    staged: int = 0
    modified: int = 0
    untracked: int = 0

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.modified or self.untracked)
