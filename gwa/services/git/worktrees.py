"""Worktree registry and lifecycle operations for gwa."""

import os
from typing import Optional

from gwa.constants import ELLIPSIS, MAX_COMMIT_SUMMARY, NO_COMMITS
from gwa.exceptions import CommandFailed, NotAGitRepository, WorktreeNotFound
from gwa.logging_config import get_logger
from gwa.models.worktree import Worktree, WorktreeStatus
from gwa.services.git.porcelain import parse_worktree_list
from gwa.services.git.runner import ProcessRunner

logger = get_logger(__name__)


def truncate_summary(summary: str, limit: int = MAX_COMMIT_SUMMARY) -> str:
    """Cut a commit summary to `limit` characters, ending in an ellipsis."""
    if len(summary) > limit:
        return summary[:limit - len(ELLIPSIS)] + ELLIPSIS
    return summary


class WorktreeRegistry:
    """Read-only view of the repository's worktrees.

    Nothing is cached: every call re-queries git, so results reflect the
    repository at the moment of the call.
    """

    def __init__(self, runner: ProcessRunner):
        self.runner = runner

    def list(self) -> list[Worktree]:
        """List all worktrees in porcelain order.

        Raises:
            NotAGitRepository: If git cannot list worktrees from here
        """
        try:
            result = self.runner.git(["worktree", "list", "--porcelain"])
        except CommandFailed as e:
            raise NotAGitRepository(e.stderr.strip() or None) from e

        worktrees = parse_worktree_list(result.stdout)
        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def status(self, path: str) -> WorktreeStatus:
        """Get dirty state and last commit summary of the worktree at `path`."""
        status_result = self.runner.git(["status", "--porcelain"], cwd=path)
        is_dirty = len(status_result.stdout) > 0

        try:
            log_result = self.runner.git(["log", "-1", "--format=%s", "--no-walk"], cwd=path)
        except CommandFailed as e:
            logger.debug(f"No commit summary for {path}: {e}")
            return WorktreeStatus(is_dirty=is_dirty, last_commit=NO_COMMITS)

        return WorktreeStatus(
            is_dirty=is_dirty,
            last_commit=truncate_summary(log_result.stdout.strip()),
        )

    def find(self, branch: str) -> Worktree:
        """Find the worktree that has `branch` checked out.

        Raises:
            WorktreeNotFound: If no worktree matches exactly
        """
        for wt in self.list():
            if wt.branch == branch:
                return wt
        raise WorktreeNotFound(branch)

    def primary(self) -> Worktree:
        """Get the main worktree (the repository's canonical checkout).

        When the main repository is bare it has no checkout of its own; the
        first linked worktree in the listing stands in for it.

        Raises:
            WorktreeNotFound: If the listing has no worktrees at all
        """
        worktrees = self.list()
        for wt in worktrees:
            if wt.is_main:
                return wt
        if worktrees:
            logger.debug(f"Bare main repository, using {worktrees[0].path} as primary")
            return worktrees[0]
        raise WorktreeNotFound()

    def common_dir(self) -> str:
        """Get the absolute git directory shared by all worktrees."""
        result = self.runner.git(["rev-parse", "--path-format=absolute", "--git-common-dir"])
        return result.stdout.strip()

    def toplevel(self) -> str:
        """Get the top-level directory of the current worktree."""
        return self.runner.git(["rev-parse", "--show-toplevel"]).stdout.strip()


class LifecycleOps:
    """Create and remove worktrees."""

    def __init__(self, runner: ProcessRunner, registry: WorktreeRegistry,
                 worktrees_dir: Optional[str] = None):
        """Initialize lifecycle operations.

        Args:
            runner: Process runner used for git calls
            registry: Registry used to resolve branches to paths
            worktrees_dir: Directory for new worktrees (default: next to the repository)
        """
        self.runner = runner
        self.registry = registry
        self.worktrees_dir = worktrees_dir

    def worktree_path(self, branch: str) -> str:
        """Compute where a new worktree for `branch` is placed."""
        if self.worktrees_dir:
            parent = os.path.expanduser(self.worktrees_dir)
        else:
            parent = os.path.dirname(self.registry.toplevel()) or "."
        return os.path.join(parent, branch)

    def create(self, branch: str, base: Optional[str] = None) -> str:
        """Create a worktree on a new branch.

        Existing directories or branches are not checked here; git reports
        them and the failure surfaces as CommandFailed.

        Args:
            branch: Name of the branch to create
            base: Branch or ref to start from (default: current HEAD)

        Returns:
            Path of the new worktree
        """
        path = self.worktree_path(branch)
        args = ["worktree", "add", "-b", branch, path]
        if base:
            args.append(base)

        self.runner.git(args)
        logger.info(f"Created worktree for {branch} at {path}")
        return path

    def remove(self, branch: str, force: bool = False) -> str:
        """Remove the worktree that has `branch` checked out.

        Args:
            branch: Branch of the worktree to remove
            force: Remove even if the worktree is dirty

        Returns:
            Path of the removed worktree

        Raises:
            WorktreeNotFound: If no worktree has that branch
        """
        wt = self.registry.find(branch)
        args = ["worktree", "remove", wt.path]
        if force:
            args.append("--force")

        self.runner.git(args)
        logger.info(f"Removed worktree at {wt.path}")
        return wt.path
