"""Stale worktree detection for gwa."""

import os
from typing import Iterable

from gwa.constants import GC_REASON_DETACHED, GC_REASON_MISSING
from gwa.logging_config import get_logger
from gwa.models.worktree import GcCandidate, Worktree

logger = get_logger(__name__)


class GcScanner:
    """Flags worktrees that look abandoned."""

    @staticmethod
    def scan(worktrees: Iterable[Worktree]) -> list[GcCandidate]:
        """
        Find cleanup candidates among `worktrees`.

        A worktree whose directory is gone is reported as missing; otherwise
        one on a detached HEAD is reported as detached. Whether the branch has
        been merged is not considered.

        Args:
            worktrees: Worktrees to inspect, typically the full registry listing

        Returns:
            Candidates in input order
        """
        candidates = []
        for wt in worktrees:
            if not os.path.exists(wt.path):
                candidates.append(GcCandidate(wt.branch, wt.path, GC_REASON_MISSING))
            elif wt.is_detached:
                candidates.append(GcCandidate(wt.branch, wt.path, GC_REASON_DETACHED))

        logger.debug(f"{len(candidates)} cleanup candidates")
        return candidates
