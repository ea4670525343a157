"""Worktree data models and strategy enums"""
from enum import Enum
from dataclasses import dataclass

from gwa.constants import DETACHED_BRANCH


class SyncStrategy(Enum):
    """How a worktree is brought up to date with its base branch."""
    REBASE = "rebase"
    MERGE = "merge"


class ApplyStrategy(Enum):
    """How a worktree's branch is integrated into the target branch."""
    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"


@dataclass(frozen=True)
class Worktree:
    """A registered git worktree."""

    path: str
    branch: str  # Branch name or DETACHED_BRANCH
    is_main: bool = False  # Hosts the repository's canonical checkout

    @property
    def is_detached(self) -> bool:
        return self.branch == DETACHED_BRANCH

    def __str__(self) -> str:
        main_marker = " (main)" if self.is_main else ""
        return f"{self.branch} @ {self.path}{main_marker}"


@dataclass(frozen=True)
class WorktreeStatus:
    """Dirty state and last commit summary of one worktree."""

    is_dirty: bool
    last_commit: str


@dataclass(frozen=True)
class GcCandidate:
    """A worktree that looks abandoned."""

    branch: str
    path: str
    reason: str
