"""Custom exceptions for gwa"""

from typing import Optional, Sequence


class GwaError(Exception):
    """Base exception for all gwa errors."""
    pass


class CommandFailed(GwaError):
    """Exception raised when an external command exits non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        exit_code: int,
        stdout: str = "",
        stderr: str = "",
    ):
        self.command = list(command)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

        error_msg = f"Command '{' '.join(self.command)}' failed (exit {exit_code})"
        if stderr.strip():
            error_msg += f": {stderr.strip()}"

        super().__init__(error_msg)


class NotAGitRepository(GwaError):
    """Exception raised when the worktree listing cannot be obtained."""

    def __init__(self, message: Optional[str] = None):
        self.message = message

        error_msg = "Not a git repository"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ConfigError(GwaError):
    """Exception raised for an unreadable or invalid configuration file."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Invalid config file '{path}': {message}")


class DomainError(GwaError):
    """Base class for errors reported to the user with a specific message."""
    pass


class WorktreeNotFound(DomainError):
    """Exception raised when no worktree has the requested branch."""

    def __init__(self, branch: Optional[str] = None):
        self.branch = branch
        if branch:
            super().__init__(f"Worktree for branch '{branch}' not found")
        else:
            super().__init__("No worktrees found")


class HasUncommittedChanges(DomainError):
    """Exception raised when a dirty worktree blocks sync or apply."""

    def __init__(self, path: str, is_target: bool = False):
        self.path = path
        self.is_target = is_target  # The worktree receiving an apply
        super().__init__(
            f"Worktree at {path} has uncommitted changes. Commit or stash first."
        )


class WorktreeLocked(DomainError):
    """Exception raised when removing a locked worktree without --force."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(
            f"Worktree '{branch}' is locked. Unlock it or use --force."
        )
