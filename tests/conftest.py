"""Pytest fixtures for gwa tests"""
import tempfile
from pathlib import Path
from typing import Optional

import git
import pytest

from gwa.config import Config
from gwa.core import WorktreeManager
from gwa.services.git.runner import ProcessRunner


MAIN_PATH = "/work/repo"
FEATURE_PATH = "/work/feature-x"

TWO_WORKTREES = (
    f"worktree {MAIN_PATH}\n"
    "HEAD 1111111111111111111111111111111111111111\n"
    "branch refs/heads/main\n"
    "\n"
    f"worktree {FEATURE_PATH}\n"
    "HEAD 2222222222222222222222222222222222222222\n"
    "branch refs/heads/feature-x\n"
    "\n"
)

# Bare main repository with two linked worktrees
BARE_LISTING = (
    "worktree /w/repo.git\n"
    "bare\n"
    "\n"
    "worktree /w/a\n"
    "HEAD 3333333333333333333333333333333333333333\n"
    "branch refs/heads/a\n"
    "\n"
    "worktree /w/b\n"
    "HEAD 4444444444444444444444444444444444444444\n"
    "branch refs/heads/b\n"
    "\n"
)


def listing(*entries):
    """Porcelain listing for (path, branch) pairs; the first is the main worktree."""
    return "".join(
        f"worktree {path}\nHEAD {'0' * 40}\nbranch refs/heads/{branch}\n\n"
        for path, branch in entries
    )


class ScriptedRunner(ProcessRunner):
    """Runner that replays scripted results instead of spawning processes.

    Rules match on a prefix of the git arguments (after `git -C <path>`) and,
    optionally, on the `-C` path. Later rules win. Unmatched commands succeed
    with empty output.
    """

    def __init__(self):
        self.calls: list[tuple[list[str], Optional[str]]] = []
        self._rules: list[tuple[list[str], Optional[str], int, str, str]] = []

    def on(self, *prefix: str, stdout: str = "", stderr: str = "", exit_code: int = 0,
           cwd: Optional[str] = None) -> "ScriptedRunner":
        self._rules.append((list(prefix), cwd, exit_code, stdout, stderr))
        return self

    def fail(self, *prefix: str, stderr: str = "fatal: error", cwd: Optional[str] = None):
        return self.on(*prefix, stderr=stderr, exit_code=1, cwd=cwd)

    def _execute(self, command, cwd):
        args, where = list(command), cwd
        if args[:1] == ["git"]:
            args = args[1:]
            if args[:1] == ["-C"]:
                where, args = args[1], args[2:]
        self.calls.append((args, where))

        for prefix, rule_cwd, exit_code, stdout, stderr in reversed(self._rules):
            if args[:len(prefix)] == prefix and rule_cwd in (None, where):
                return exit_code, stdout, stderr
        return 0, "", ""

    def called(self, *prefix: str) -> bool:
        return any(args[:len(prefix)] == list(prefix) for args, _ in self.calls)

    def commands(self) -> list[str]:
        """Subcommand names in call order, e.g. ['worktree', 'status', 'log']."""
        return [args[0] for args, _ in self.calls]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def runner():
    """A scripted runner listing a main and a feature-x worktree, both clean."""
    return ScriptedRunner().on("worktree", "list", "--porcelain", stdout=TWO_WORKTREES).on(
        "log", stdout="Initial commit"
    )


@pytest.fixture
def manager(runner):
    """A WorktreeManager over the scripted runner with default config."""
    return WorktreeManager(runner=runner, config=Config())


@pytest.fixture
def isolated_home(temp_dir, monkeypatch):
    """Point HOME at an empty directory so no real global config is read."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def git_repo(temp_dir, isolated_home):
    """Create a real Git repository on branch main with one commit."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def in_repo(git_repo, monkeypatch):
    """Run with the repository as current directory; yields its resolved path."""
    path = Path(git_repo.working_dir).resolve()
    monkeypatch.chdir(path)
    return path
