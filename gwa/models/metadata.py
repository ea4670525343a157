"""Worktree metadata model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WorktreeMetadata:
    """Note and lock flag kept for a branch under the project metadata directory."""

    note: Optional[str] = None
    locked: bool = False
