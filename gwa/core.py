"""Core functionality for gwa"""

from dataclasses import dataclass
from typing import Optional

from gwa.config import Config, load_config
from gwa.exceptions import CommandFailed, NotAGitRepository, WorktreeLocked
from gwa.logging_config import get_logger
from gwa.models.metadata import WorktreeMetadata
from gwa.models.worktree import ApplyStrategy, GcCandidate, SyncStrategy, Worktree, WorktreeStatus
from gwa.services.copy_service import copy_dirs, copy_files
from gwa.services.gc_service import GcScanner
from gwa.services.git import (
    ApplyEngine,
    LifecycleOps,
    ProcessRunner,
    SyncEngine,
    WorktreeRegistry,
)
from gwa.services.hook_service import HookResult, HookService
from gwa.services.launcher_service import run_command
from gwa.services.metadata_service import MetadataService

logger = get_logger(__name__)


@dataclass
class CreateResult:
    """What happened while creating a worktree."""
    path: str
    files_copied: int = 0
    dirs_copied: int = 0
    hook: Optional[HookResult] = None


@dataclass
class RemoveResult:
    """What happened while removing a worktree."""
    path: str
    hook: Optional[HookResult] = None


@dataclass
class StatusRow:
    """Status of one worktree, or the reason it could not be computed."""
    worktree: Worktree
    status: Optional[WorktreeStatus] = None
    error: Optional[str] = None


@dataclass
class ExecResult:
    """Output of a command run in one worktree."""
    worktree: Worktree
    output: str = ""
    error: Optional[str] = None


class WorktreeManager:
    """Entry point for all worktree operations.

    Wires the registry and the engines to a single process runner and
    resolves configuration and metadata relative to the main worktree.
    """

    def __init__(self, runner: Optional[ProcessRunner] = None, config: Optional[Config] = None):
        self.runner = runner or ProcessRunner()
        self.registry = WorktreeRegistry(self.runner)
        self.sync_engine = SyncEngine(self.runner, self.registry)
        self.apply_engine = ApplyEngine(self.runner, self.registry)
        self.hook_service = HookService(self.runner)
        self._config = config

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = load_config(self.repo_root(required=False))
        return self._config

    @property
    def lifecycle(self) -> LifecycleOps:
        return LifecycleOps(self.runner, self.registry, self.config.worktrees_dir)

    def repo_root(self, required: bool = True) -> Optional[str]:
        """Directory where project config and metadata live.

        This is the main worktree, or the shared git directory when the main
        repository is bare, so every worktree resolves the same root.

        Args:
            required: If False, return None outside a repository instead of raising
        """
        try:
            worktrees = self.registry.list()
        except NotAGitRepository:
            if required:
                raise
            logger.debug("Not in a repository, using global config only")
            return None

        for wt in worktrees:
            if wt.is_main:
                return wt.path
        try:
            return self.registry.common_dir()
        except CommandFailed:
            if required:
                raise
            logger.warning("Could not resolve the shared git directory, using global config only")
            return None

    def metadata(self) -> MetadataService:
        return MetadataService(self.repo_root())

    # Read path

    def list_worktrees(self) -> list[Worktree]:
        return self.registry.list()

    def find(self, branch: str) -> Worktree:
        return self.registry.find(branch)

    def status_rows(self) -> list[StatusRow]:
        """Status of every worktree; a failure on one row does not stop the others."""
        rows = []
        for wt in self.registry.list():
            try:
                rows.append(StatusRow(wt, status=self.registry.status(wt.path)))
            except CommandFailed as e:
                logger.warning(f"Could not get status for {wt.path}: {e}")
                rows.append(StatusRow(wt, error=str(e)))
        return rows

    def info(self, branch: str) -> tuple[Worktree, Optional[WorktreeStatus], WorktreeMetadata]:
        wt = self.registry.find(branch)
        try:
            status = self.registry.status(wt.path)
        except CommandFailed as e:
            logger.warning(f"Could not get status for {wt.path}: {e}")
            status = None
        return wt, status, self.metadata().load(branch)

    def gc_candidates(self) -> list[GcCandidate]:
        return GcScanner.scan(self.registry.list())

    # Lifecycle

    def create(self, branch: str, base: Optional[str] = None) -> CreateResult:
        """Create a worktree, copy configured files into it and run the post-create hook."""
        source = self.registry.toplevel()
        path = self.lifecycle.create(branch, base)
        result = CreateResult(path=path)

        config = self.config
        if config.copy_files:
            result.files_copied = copy_files(config.copy_files, source, path)
        if config.copy_dirs:
            result.dirs_copied = copy_dirs(config.copy_dirs, source, path)
        if config.post_create_hook:
            result.hook = self.hook_service.run_hook(config.post_create_hook, path, branch)

        return result

    def remove(self, branch: str, force: bool = False) -> RemoveResult:
        """Remove a worktree after running the pre-remove hook.

        Raises:
            WorktreeLocked: If the branch is locked and force is not set
        """
        wt = self.registry.find(branch)
        if not force and self.metadata().is_locked(branch):
            raise WorktreeLocked(branch)

        hook = None
        if self.config.pre_remove_hook:
            hook = self.hook_service.run_hook(self.config.pre_remove_hook, wt.path, branch)

        path = self.lifecycle.remove(branch, force=force)
        return RemoveResult(path=path, hook=hook)

    # Integration

    def sync(self, branch: str, base: Optional[str] = None,
             strategy: SyncStrategy = SyncStrategy.REBASE) -> str:
        return self.sync_engine.sync(branch, base or self.config.default_base, strategy)

    def apply(self, branch: str, target: Optional[str] = None,
              strategy: ApplyStrategy = ApplyStrategy.MERGE) -> str:
        return self.apply_engine.apply(branch, target or self.config.default_base, strategy)

    # Metadata

    def save_note(self, branch: str, note: str) -> None:
        self.registry.find(branch)
        self.metadata().save_note(branch, note)

    def lock(self, branch: str) -> None:
        self.registry.find(branch)
        self.metadata().lock(branch)

    def unlock(self, branch: str) -> None:
        self.registry.find(branch)
        self.metadata().unlock(branch)

    # Commands

    def exec_all(self, command: str) -> list[ExecResult]:
        """Run `command` in every worktree, one after another."""
        results = []
        for wt in self.registry.list():
            try:
                results.append(ExecResult(wt, output=run_command(self.runner, wt.path, command)))
            except CommandFailed as e:
                results.append(ExecResult(wt, output=e.stdout, error=str(e)))
        return results
