"""Data models for gwa."""

from .worktree import (
    Worktree,
    WorktreeStatus,
    GcCandidate,
    SyncStrategy,
    ApplyStrategy,
)
from .metadata import WorktreeMetadata

__all__ = [
    "Worktree",
    "WorktreeStatus",
    "GcCandidate",
    "SyncStrategy",
    "ApplyStrategy",
    "WorktreeMetadata",
]
