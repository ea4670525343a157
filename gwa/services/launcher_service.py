"""Launch editors, AI tools and ad hoc commands in a worktree."""

import shlex
import subprocess

from gwa.logging_config import get_logger
from gwa.services.git.runner import ProcessRunner

logger = get_logger(__name__)

EDITOR_COMMANDS = {
    "code": "code",
    "vscode": "code",
    "cursor": "cursor",
    "zed": "zed",
    "vim": "vim",
    "nvim": "nvim",
    "neovim": "nvim",
    "antigravity": "antigravity",
    "ag": "antigravity",
    "kiro": "kiro",
    "windsurf": "windsurf",
    "fleet": "fleet",
    "sublime": "subl",
    "subl": "subl",
    "helix": "hx",
    "hx": "hx",
    "idea": "idea",
    "intellij": "idea",
    "lapce": "lapce",
}

# Editors that take over the terminal and must run in the foreground
TERMINAL_EDITORS = {"vim", "nvim", "hx", "nano", "emacs"}

AI_TOOL_COMMANDS = {
    "claude": "claude",
    "claude-code": "claude",
    "aider": "aider",
    "copilot": "gh copilot",
    "opencode": "opencode",
    "oc": "opencode",
    "gemini": "gemini",
    "gemini-cli": "gemini",
    "codex": "codex",
    "openai-codex": "codex",
    "cody": "cody",
    "sourcegraph": "cody",
    "continue": "continue",
    "cont": "continue",
    "amazonq": "q",
    "q": "q",
    "cline": "cline",
}


def resolve_editor(name: str) -> str:
    """Map an editor name or alias to its command. Unknown names are used as-is."""
    return EDITOR_COMMANDS.get(name, name)


def resolve_ai_tool(name: str) -> str:
    """Map an AI tool name or alias to its command. Unknown names are used as-is."""
    return AI_TOOL_COMMANDS.get(name, name)


def open_editor(name: str, path: str) -> int:
    """Open `path` in an editor.

    GUI editors are started in the background; terminal editors run in the
    foreground until they exit.

    Returns:
        Exit code of a foreground editor, 0 for background ones
    """
    argv = shlex.split(resolve_editor(name)) + [path]
    logger.info(f"Opening {path} with {argv[0]}")
    if argv[0] in TERMINAL_EDITORS:
        return subprocess.run(argv, check=False).returncode
    subprocess.Popen(argv)
    return 0


def launch_ai_tool(name: str, path: str) -> int:
    """Run an AI tool interactively with `path` as working directory."""
    argv = shlex.split(resolve_ai_tool(name))
    logger.info(f"Launching {argv[0]} in {path}")
    return subprocess.run(argv, cwd=path, check=False).returncode


def run_command(runner: ProcessRunner, path: str, command: str) -> str:
    """Run a shell command in `path` and return its stdout.

    Raises:
        CommandFailed: If the command exits non-zero
    """
    return runner.run(["/bin/sh", "-c", command], cwd=path).stdout
