"""Command-line argument parsing for gwa."""

import argparse
from typing import Optional, Sequence

from gwa.__version__ import __version__
from gwa.models.worktree import ApplyStrategy, SyncStrategy


def build_parser() -> argparse.ArgumentParser:
    """Build the gwa argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="gwa",
        description="Git Worktree for AI - manage worktrees for parallel feature development",
        epilog="Examples: 'gwa new feature-x origin/main', 'gwa sync feature-x --merge'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"gwa {__version__}")

    sub = parser.add_subparsers(dest="command_name", metavar="<command>")

    def command(name, aliases=(), help=None):
        p = sub.add_parser(name, aliases=list(aliases), help=help)
        p.set_defaults(command=name)
        return p

    command("list", ["ls"], help="List all worktrees")
    command("status", ["st"], help="Show dirty state and last commit of every worktree")

    p = command("new", ["add", "a"], help="Create a worktree on a new branch")
    p.add_argument("branch", help="Name of the new branch")
    p.add_argument("base", nargs="?", help="Branch or ref to start from (default: current HEAD)")

    p = command("rm", ["del", "d"], help="Remove a worktree")
    p.add_argument("branch")
    p.add_argument(
        "--force", action="store_true", help="Remove even if locked or dirty"
    )

    p = command("sync", ["sy"], help="Sync a worktree with its base branch")
    p.add_argument("branch")
    p.add_argument("--base", help="Base branch (default: default_base from config)")
    strategy = p.add_mutually_exclusive_group()
    strategy.add_argument(
        "--rebase", dest="strategy", action="store_const", const=SyncStrategy.REBASE,
        help="Rebase onto the base branch (default)",
    )
    strategy.add_argument(
        "--merge", dest="strategy", action="store_const", const=SyncStrategy.MERGE,
        help="Merge the base branch in",
    )
    p.set_defaults(strategy=SyncStrategy.REBASE)

    p = command("apply", ["merge", "ap"], help="Apply a worktree's branch to a target branch")
    p.add_argument("branch")
    p.add_argument("--to", dest="target", help="Target branch (default: default_base from config)")
    strategy = p.add_mutually_exclusive_group()
    for choice in ApplyStrategy:
        strategy.add_argument(
            f"--{choice.value}", dest="strategy", action="store_const", const=choice,
            help=f"Apply using {choice.value}" + (" (default)" if choice == ApplyStrategy.MERGE else ""),
        )
    p.set_defaults(strategy=ApplyStrategy.MERGE)

    command("gc", help="List worktrees that look abandoned")

    p = command("editor", help="Open a worktree in an editor")
    p.add_argument("branch")
    p.add_argument("editor_name", nargs="?", help="Editor (default: editor from config)")

    p = command("ai", help="Launch an AI tool in a worktree")
    p.add_argument("branch")
    p.add_argument("tool_name", nargs="?", help="AI tool (default: ai_tool from config)")

    p = command("run", help="Run a command in a worktree")
    p.add_argument("branch")
    p.add_argument("cmd", nargs=argparse.REMAINDER, help="Command to run")

    p = command("cd", help="Print a worktree's path (for shell integration)")
    p.add_argument("branch")

    p = command("exec", help="Run a command in every worktree")
    p.add_argument("cmd", nargs=argparse.REMAINDER, help="Command to run")

    p = command("note", ["n"], help="Attach a note to a worktree")
    p.add_argument("branch")
    p.add_argument("text")

    p = command("info", ["i"], help="Show details of a worktree")
    p.add_argument("branch")

    p = command("lock", help="Lock a worktree against removal")
    p.add_argument("branch")

    p = command("unlock", help="Unlock a worktree")
    p.add_argument("branch")

    p = command("config", help="Edit or show configuration")
    p.add_argument("action", nargs="?", choices=["edit", "show", "path"], default="edit")
    p.add_argument("-g", "--global", dest="is_global", action="store_true",
                   help="Use the global config file")
    p.add_argument("-e", "--editor", dest="editor_override", help="Editor to open the file with")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
