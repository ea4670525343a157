"""Subprocess runner for gwa"""

import git
from dataclasses import dataclass
from typing import Optional, Sequence

from gwa.exceptions import CommandFailed
from gwa.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished command."""

    stdout: str
    stderr: str
    exit_code: int


class ProcessRunner:
    """Runs external commands to completion and captures their output.

    Every component that talks to git receives a runner instance, so tests can
    substitute one that replays scripted results instead of spawning processes.
    """

    def run(self, command: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            command: Executable followed by its arguments
            cwd: Working directory for the child process (default: current directory)

        Returns:
            CommandResult with captured stdout and stderr

        Raises:
            CommandFailed: If the command exits non-zero. The exception carries
                the captured stdout and stderr.
        """
        command = list(command)
        logger.debug(f"Running: {' '.join(command)}" + (f" (in {cwd})" if cwd else ""))

        exit_code, stdout, stderr = self._execute(command, cwd)
        if exit_code != 0:
            logger.debug(f"Command exited {exit_code}: {stderr.strip()}")
            raise CommandFailed(command, exit_code, stdout, stderr)

        return CommandResult(stdout=stdout, stderr=stderr, exit_code=exit_code)

    def git(self, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        """Run a git subcommand, scoped to `cwd` with `git -C` when given."""
        command = ["git"]
        if cwd:
            command += ["-C", cwd]
        return self.run(command + list(args))

    def _execute(self, command: list[str], cwd: Optional[str]) -> tuple[int, str, str]:
        """Spawn the process and return (exit_code, stdout, stderr)."""
        return git.Git(cwd).execute(
            command,
            with_extended_output=True,
            with_exceptions=False,
        )
