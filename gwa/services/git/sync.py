"""Sync a worktree with its base branch."""

from gwa.constants import DEFAULT_REMOTE, NO_REMOTE_SYNC_MESSAGE
from gwa.exceptions import CommandFailed, HasUncommittedChanges
from gwa.logging_config import get_logger
from gwa.models.worktree import SyncStrategy
from gwa.services.git.runner import ProcessRunner
from gwa.services.git.worktrees import WorktreeRegistry

logger = get_logger(__name__)


class SyncEngine:
    """Brings one worktree up to date with a base branch."""

    def __init__(self, runner: ProcessRunner, registry: WorktreeRegistry,
                 remote: str = DEFAULT_REMOTE):
        self.runner = runner
        self.registry = registry
        self.remote = remote

    def sync(self, branch: str, base: str,
             strategy: SyncStrategy = SyncStrategy.REBASE) -> str:
        """Sync the worktree of `branch` with `base`.

        Steps run in order and each one stops the sync on failure:
        locate the worktree, refuse if dirty, fetch, then rebase or merge.
        A failed fetch is not an error: the sync reports that nothing was
        fetched and leaves the branch as is. A conflicting rebase or merge is
        left in progress for the user to resolve.

        Args:
            branch: Branch whose worktree is synced
            base: Branch to rebase onto or merge from
            strategy: Rebase or merge

        Returns:
            Trimmed output of the rebase/merge, or the no-remote message

        Raises:
            WorktreeNotFound: If no worktree has `branch`
            HasUncommittedChanges: If the worktree is dirty
            CommandFailed: If the rebase or merge fails
        """
        wt = self.registry.find(branch)

        if self.registry.status(wt.path).is_dirty:
            raise HasUncommittedChanges(wt.path)

        try:
            self.runner.git(["fetch", self.remote], cwd=wt.path)
        except CommandFailed as e:
            logger.warning(f"Fetch from {self.remote} failed, skipping sync: {e.stderr.strip()}")
            return NO_REMOTE_SYNC_MESSAGE

        if strategy == SyncStrategy.REBASE:
            result = self.runner.git(["rebase", base], cwd=wt.path)
        else:
            result = self.runner.git(["merge", base], cwd=wt.path)

        logger.info(f"Synced {branch} with {base} using {strategy.value}")
        return result.stdout.strip()
