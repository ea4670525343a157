"""Apply a worktree's branch onto a target branch in the main worktree."""

from gwa.constants import SQUASH_COMMIT_MESSAGE
from gwa.exceptions import HasUncommittedChanges
from gwa.logging_config import get_logger
from gwa.models.worktree import ApplyStrategy
from gwa.services.git.runner import ProcessRunner
from gwa.services.git.worktrees import WorktreeRegistry

logger = get_logger(__name__)


class ApplyEngine:
    """Integrates a branch into a target branch checked out in the main worktree."""

    def __init__(self, runner: ProcessRunner, registry: WorktreeRegistry):
        self.runner = runner
        self.registry = registry

    def apply(self, branch: str, target: str,
              strategy: ApplyStrategy = ApplyStrategy.MERGE) -> str:
        """Apply `branch` onto `target`.

        The target is checked out in the main worktree first. Nothing is
        rolled back if a later step fails: the main worktree stays on the
        target branch with whatever state git left behind.

        Args:
            branch: Source branch to integrate
            target: Branch that receives the changes
            strategy: Merge, squash (single new commit) or rebase

        Returns:
            Trimmed output of the final git command

        Raises:
            WorktreeNotFound: If there is no main worktree
            HasUncommittedChanges: If the main worktree is dirty
            CommandFailed: If checkout or the strategy commands fail
        """
        main = self.registry.primary()

        if self.registry.status(main.path).is_dirty:
            raise HasUncommittedChanges(main.path, is_target=True)

        self.runner.git(["checkout", target], cwd=main.path)

        if strategy == ApplyStrategy.MERGE:
            result = self.runner.git(["merge", branch], cwd=main.path)
        elif strategy == ApplyStrategy.SQUASH:
            # --squash stages the changes without committing
            self.runner.git(["merge", "--squash", branch], cwd=main.path)
            result = self.runner.git(["commit", "-m", SQUASH_COMMIT_MESSAGE], cwd=main.path)
        else:
            result = self.runner.git(["rebase", branch], cwd=main.path)

        logger.info(f"Applied {branch} to {target} using {strategy.value}")
        return result.stdout.strip()
