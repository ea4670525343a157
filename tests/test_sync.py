"""Tests for SyncEngine"""
import pytest

from gwa.exceptions import CommandFailed, HasUncommittedChanges, WorktreeNotFound
from gwa.models.worktree import SyncStrategy
from gwa.services.git.sync import SyncEngine
from gwa.services.git.worktrees import WorktreeRegistry
from tests.conftest import FEATURE_PATH, MAIN_PATH


def make_engine(runner):
    return SyncEngine(runner, WorktreeRegistry(runner))


class TestSyncPreconditions:
    """Test the checks that run before anything is changed."""

    def test_unknown_branch(self, runner):
        with pytest.raises(WorktreeNotFound):
            make_engine(runner).sync("nope", "main")
        assert runner.commands() == ["worktree"]

    def test_dirty_worktree_blocks_sync(self, runner):
        runner.on("status", stdout=" M src/app.py", cwd=FEATURE_PATH)

        with pytest.raises(HasUncommittedChanges) as exc_info:
            make_engine(runner).sync("feature-x", "main")

        assert exc_info.value.path == FEATURE_PATH
        assert exc_info.value.is_target is False
        assert not runner.called("fetch")
        assert not runner.called("rebase")
        assert not runner.called("merge")

    def test_dirty_check_uses_target_worktree(self, runner):
        runner.on("status", stdout=" M README.md", cwd=MAIN_PATH)
        make_engine(runner).sync("feature-x", "main")
        assert runner.called("rebase")


class TestSyncFetch:
    """Test fetch handling."""

    def test_fetch_runs_in_worktree(self, runner):
        make_engine(runner).sync("feature-x", "main")
        assert (["fetch", "origin"], FEATURE_PATH) in runner.calls

    def test_fetch_failure_is_soft(self, runner):
        runner.fail("fetch", stderr="fatal: 'origin' does not appear to be a git repository")

        result = make_engine(runner).sync("feature-x", "main")

        assert result == "No remote to fetch from, synced locally"
        assert not runner.called("rebase")
        assert not runner.called("merge")


class TestSyncStrategies:
    """Test rebase and merge strategies."""

    def test_rebase_is_default(self, runner):
        runner.on("rebase", stdout="Successfully rebased and updated refs/heads/feature-x.\n")

        result = make_engine(runner).sync("feature-x", "main")

        assert result == "Successfully rebased and updated refs/heads/feature-x."
        assert (["rebase", "main"], FEATURE_PATH) in runner.calls
        assert not runner.called("merge")

    def test_merge(self, runner):
        runner.on("merge", stdout="Already up to date.\n")

        result = make_engine(runner).sync("feature-x", "develop", SyncStrategy.MERGE)

        assert result == "Already up to date."
        assert (["merge", "develop"], FEATURE_PATH) in runner.calls
        assert not runner.called("rebase")

    def test_conflict_raises_without_abort(self, runner):
        runner.fail("rebase", stderr="CONFLICT (content): Merge conflict in app.py")

        with pytest.raises(CommandFailed) as exc_info:
            make_engine(runner).sync("feature-x", "main")

        assert "CONFLICT" in exc_info.value.stderr
        assert runner.commands()[-1] == "rebase"

    def test_order_of_steps(self, runner):
        make_engine(runner).sync("feature-x", "main", SyncStrategy.MERGE)
        assert runner.commands() == ["worktree", "status", "log", "fetch", "merge"]


class TestSyncEndToEnd:
    """Listing with main and feature-x where feature-x has uncommitted changes."""

    def test_dirty_feature_stops_after_status(self, runner):
        runner.on("status", "--porcelain", stdout="?? scratch.txt", cwd=FEATURE_PATH)

        with pytest.raises(HasUncommittedChanges):
            make_engine(runner).sync("feature-x", "main")

        # listing, then the two status queries and nothing else
        assert runner.calls == [
            (["worktree", "list", "--porcelain"], None),
            (["status", "--porcelain"], FEATURE_PATH),
            (["log", "-1", "--format=%s", "--no-walk"], FEATURE_PATH),
        ]
