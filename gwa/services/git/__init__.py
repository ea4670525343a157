"""Git-related services for gwa."""

from .runner import ProcessRunner, CommandResult
from .porcelain import parse_worktree_list
from .worktrees import WorktreeRegistry, LifecycleOps
from .sync import SyncEngine
from .apply import ApplyEngine

__all__ = [
    "ProcessRunner",
    "CommandResult",
    "parse_worktree_list",
    "WorktreeRegistry",
    "LifecycleOps",
    "SyncEngine",
    "ApplyEngine",
]
