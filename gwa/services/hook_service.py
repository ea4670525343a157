"""Post-create and pre-remove hook execution."""

from dataclasses import dataclass

from gwa.exceptions import CommandFailed
from gwa.logging_config import get_logger
from gwa.services.git.runner import ProcessRunner

logger = get_logger(__name__)

HOOK_SHELL = "/bin/sh"


@dataclass
class HookResult:
    """Outcome of a hook command."""
    success: bool
    output: str


def expand_variables(command: str, worktree_path: str, branch: str) -> str:
    """Substitute $WORKTREE_PATH and $BRANCH (bare or braced) in a hook command."""
    for name, value in (("WORKTREE_PATH", worktree_path), ("BRANCH", branch)):
        command = command.replace("${" + name + "}", value).replace("$" + name, value)
    return command


class HookService:
    """Runs configured hook commands inside a worktree."""

    def __init__(self, runner: ProcessRunner):
        self.runner = runner

    def run_hook(self, command: str, worktree_path: str, branch: str) -> HookResult:
        """
        Run a hook through the shell with the worktree as working directory.

        A failing hook is reported through the result rather than raised, so
        the caller decides whether it matters.

        Returns:
            HookResult whose output is stdout, or stderr when stdout is empty
        """
        expanded = expand_variables(command, worktree_path, branch)
        logger.info(f"Running hook for {branch}: {expanded}")

        try:
            result = self.runner.run([HOOK_SHELL, "-c", expanded], cwd=worktree_path)
        except CommandFailed as e:
            logger.warning(f"Hook exited {e.exit_code}: {expanded}")
            return HookResult(success=False, output=e.stdout or e.stderr)

        return HookResult(success=True, output=result.stdout or result.stderr)
