"""Command-line interface for gwa"""

import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from gwa.cli.args import build_parser
from gwa.config import global_config_path, project_config_path
from gwa.constants import CONFIG_TEMPLATE
from gwa.core import WorktreeManager
from gwa.exceptions import (
    CommandFailed,
    DomainError,
    GwaError,
    HasUncommittedChanges,
    WorktreeNotFound,
)
from gwa.logging_config import get_logger, setup_logging
from gwa.services.display_service import DisplayService
from gwa.services.hook_service import HookResult
from gwa.services.launcher_service import launch_ai_tool, open_editor, run_command

console = Console()
logger = get_logger(__name__)


def _print_hook(name: str, hook: Optional[HookResult]) -> None:
    if hook is None:
        return
    if hook.success:
        console.print(f"[green]{name} hook succeeded[/green]")
    else:
        console.print(f"[yellow]{name} hook failed[/yellow]")
    if hook.output.strip():
        console.print(hook.output.rstrip(), markup=False, highlight=False)


def cmd_list(manager: WorktreeManager, args) -> int:
    DisplayService(console).display_worktree_list(manager.list_worktrees())
    return 0


def cmd_status(manager: WorktreeManager, args) -> int:
    rows = manager.status_rows()
    DisplayService(console).display_status_table((r.worktree, r.status, r.error) for r in rows)
    return 0


def cmd_new(manager: WorktreeManager, args) -> int:
    result = manager.create(args.branch, args.base)
    message = f"Created worktree for branch: {escape(args.branch)}"
    if args.base:
        message += f" (from {escape(args.base)})"
    console.print(message)
    console.print(f"  {escape(result.path)}", highlight=False)
    if result.files_copied or result.dirs_copied:
        console.print(f"Copied {result.files_copied} files and {result.dirs_copied} directories")
    _print_hook("post_create", result.hook)
    return 0


def cmd_rm(manager: WorktreeManager, args) -> int:
    result = manager.remove(args.branch, force=args.force)
    _print_hook("pre_remove", result.hook)
    console.print(f"Removed worktree for branch: {escape(args.branch)}")
    return 0


def cmd_sync(manager: WorktreeManager, args) -> int:
    base = args.base or manager.config.default_base
    console.print(
        f"Syncing {escape(args.branch)} with {escape(base)} using {args.strategy.value}..."
    )
    result = manager.sync(args.branch, base, args.strategy)
    console.print(f"Done: {result}", markup=False, highlight=False)
    return 0


def cmd_apply(manager: WorktreeManager, args) -> int:
    target = args.target or manager.config.default_base
    console.print(
        f"Applying {escape(args.branch)} to {escape(target)} using {args.strategy.value}..."
    )
    result = manager.apply(args.branch, target, args.strategy)
    console.print(f"Done: {result}", markup=False, highlight=False)
    return 0


def cmd_gc(manager: WorktreeManager, args) -> int:
    DisplayService(console).display_gc_candidates(manager.gc_candidates())
    return 0


def cmd_editor(manager: WorktreeManager, args) -> int:
    wt = manager.find(args.branch)
    editor = args.editor_name or manager.config.editor
    console.print(f"Opening {escape(wt.path)} in {escape(editor)}...")
    return open_editor(editor, wt.path)


def cmd_ai(manager: WorktreeManager, args) -> int:
    wt = manager.find(args.branch)
    tool = args.tool_name or manager.config.ai_tool
    console.print(f"Launching {escape(tool)} in {escape(wt.path)}...")
    return launch_ai_tool(tool, wt.path)


def cmd_run(manager: WorktreeManager, args) -> int:
    if not args.cmd:
        console.print("Usage: gwa run <branch> <command>")
        return 2
    command = " ".join(args.cmd)
    wt = manager.find(args.branch)
    console.print(f"Running in {escape(wt.path)}: {escape(command)}")
    try:
        output = run_command(manager.runner, wt.path, command)
    except CommandFailed as e:
        if e.stdout:
            console.print(e.stdout, markup=False, highlight=False)
        raise
    if output:
        console.print(output, markup=False, highlight=False)
    return 0


def cmd_cd(manager: WorktreeManager, args) -> int:
    # Plain print so shell wrappers can capture the path verbatim
    print(manager.find(args.branch).path)
    return 0


def cmd_exec(manager: WorktreeManager, args) -> int:
    if not args.cmd:
        console.print("Usage: gwa exec <command>")
        return 2
    results = manager.exec_all(" ".join(args.cmd))
    if not results:
        console.print("No worktrees found")
        return 0

    failed = 0
    for r in results:
        console.print(f"[bold]=== {escape(r.worktree.branch)} ({escape(r.worktree.path)}) ===[/bold]")
        if r.output:
            console.print(r.output, markup=False, highlight=False)
        if r.error:
            failed += 1
            console.print(f"[red]Error: {escape(r.error)}[/red]")
        console.print()
    return 1 if failed else 0


def cmd_note(manager: WorktreeManager, args) -> int:
    manager.save_note(args.branch, args.text)
    console.print(f"Note saved for branch '{escape(args.branch)}'")
    return 0


def cmd_info(manager: WorktreeManager, args) -> int:
    wt, status, metadata = manager.info(args.branch)
    DisplayService(console).display_info(wt, status, metadata)
    return 0


def cmd_lock(manager: WorktreeManager, args) -> int:
    manager.lock(args.branch)
    console.print(f"Locked worktree '{escape(args.branch)}'")
    return 0


def cmd_unlock(manager: WorktreeManager, args) -> int:
    manager.unlock(args.branch)
    console.print(f"Unlocked worktree '{escape(args.branch)}'")
    return 0


def cmd_config(manager: WorktreeManager, args) -> int:
    root = manager.repo_root(required=False)

    if args.action == "path":
        console.print(f"Global: {global_config_path()}", highlight=False)
        if root:
            console.print(f"Project: {project_config_path(root)}", highlight=False)
        return 0

    if args.action == "show":
        for key, value in manager.config.to_dict().items():
            if value is None or value == []:
                continue
            if isinstance(value, list):
                rendered = "[" + ", ".join(f'"{v}"' for v in value) + "]"
            else:
                rendered = f'"{value}"'
            console.print(f"{key} = {rendered}", markup=False, highlight=False)
        return 0

    if args.is_global:
        path = global_config_path()
    elif root:
        path = project_config_path(root)
    else:
        console.print("[red]Error: Not in a git repository. Use --global for global config.[/red]")
        return 1

    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
        logger.info(f"Created config file {path}")

    editor = args.editor_override or manager.config.editor
    console.print(f"Opening {escape(str(path))} in {escape(editor)}...")
    return open_editor(editor, str(path))


COMMANDS = {
    "list": cmd_list,
    "status": cmd_status,
    "new": cmd_new,
    "rm": cmd_rm,
    "sync": cmd_sync,
    "apply": cmd_apply,
    "gc": cmd_gc,
    "editor": cmd_editor,
    "ai": cmd_ai,
    "run": cmd_run,
    "cd": cmd_cd,
    "exec": cmd_exec,
    "note": cmd_note,
    "info": cmd_info,
    "lock": cmd_lock,
    "unlock": cmd_unlock,
    "config": cmd_config,
}


def domain_error_message(error: DomainError) -> str:
    """One-line message for a domain error, phrased for the command line."""
    if isinstance(error, HasUncommittedChanges):
        prefix = "Target worktree" if error.is_target else "Worktree"
        return f"{prefix} has uncommitted changes. Commit or stash first."
    if isinstance(error, WorktreeNotFound) and error.branch is None:
        return "No worktrees found"
    return str(error)


def main(argv: Optional[Sequence[str]] = None,
         manager: Optional[WorktreeManager] = None) -> int:
    """Main entry point for the application.

    Domain errors (unknown branch, dirty worktree, locked worktree) and git
    failures are printed as one line and exit with status 1.
    """
    parser = build_parser()
    parsed_args = parser.parse_args(argv)
    debug = parsed_args.debug

    try:
        setup_logging(verbose=parsed_args.verbose, debug=debug)

        if getattr(parsed_args, "command", None) is None:
            parser.print_help()
            return 0

        manager = manager or WorktreeManager()
        return COMMANDS[parsed_args.command](manager, parsed_args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 130
    except DomainError as e:
        console.print(f"[red]Error: {escape(domain_error_message(e))}[/red]")
        return 1
    except GwaError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]Error: Command not found: {escape(str(e.filename))}[/red]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
