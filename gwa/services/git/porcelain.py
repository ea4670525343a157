"""Parser for `git worktree list --porcelain` output."""

from typing import Optional

from gwa.constants import DETACHED_BRANCH
from gwa.models.worktree import Worktree

BRANCH_PREFIX = "branch refs/heads/"
WORKTREE_PREFIX = "worktree "


def parse_worktree_list(output: str) -> list[Worktree]:
    """Parse porcelain worktree listing into Worktree records.

    Format (blocks separated by blank lines):
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name    (or "detached", or "bare")

    The first block always describes the main worktree. Lines outside a
    block, and attribute lines we don't track, are ignored.

    Args:
        output: Raw stdout of the listing command

    Returns:
        Worktrees in listing order
    """
    worktrees: list[Worktree] = []
    current_path: Optional[str] = None
    current_is_main = False
    seen_block = False

    for line in output.split("\n"):
        line = line.rstrip("\r")

        if not line:
            current_path = None
            continue

        if line.startswith(WORKTREE_PREFIX):
            current_path = line[len(WORKTREE_PREFIX):]
            current_is_main = not seen_block
            seen_block = True
        elif line.startswith(BRANCH_PREFIX):
            if current_path is not None:
                worktrees.append(Worktree(current_path, line[len(BRANCH_PREFIX):], current_is_main))
                current_path = None
        elif line == "bare":
            current_path = None
        elif line.startswith("detached"):
            if current_path is not None:
                worktrees.append(Worktree(current_path, DETACHED_BRANCH, current_is_main))
                current_path = None

    return worktrees
