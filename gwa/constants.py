"""Shared constants for gwa."""

from dataclasses import dataclass
from typing import List


# Branch value for a worktree checked out at a bare revision
DETACHED_BRANCH = "(detached)"

# Last-commit summaries are cut to this width for table rendering
MAX_COMMIT_SUMMARY = 40
ELLIPSIS = "..."
NO_COMMITS = "(no commits)"

DEFAULT_REMOTE = "origin"
NO_REMOTE_SYNC_MESSAGE = "No remote to fetch from, synced locally"
SQUASH_COMMIT_MESSAGE = "Squashed commit from worktree"

# Project-local metadata and config directory name
METADATA_DIR_NAME = ".gwa"

GC_REASON_MISSING = "directory missing"
GC_REASON_DETACHED = "detached HEAD"


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


LIST_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("path", "Path", 40),
    ColumnDefinition("branch", "Branch", 20),
]

STATUS_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("path", "Path", 30),
    ColumnDefinition("branch", "Branch", 20),
    ColumnDefinition("dirty", "Dirty", 8),
    ColumnDefinition("last_commit", "Last Commit", MAX_COMMIT_SUMMARY),
]

GC_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 20),
    ColumnDefinition("path", "Path", 40),
    ColumnDefinition("reason", "Reason", 20),
]


CONFIG_TEMPLATE = """\
# gwa configuration
# Global: ~/.config/gwa/config.toml
# Project: .gwa/config.toml

# Default base branch for sync and apply
# default_base = "main"

# Custom worktrees directory (default: sibling to repo)
# worktrees_dir = "/path/to/worktrees"

# Editor for gwa editor command (default: code)
# editor = "code"

# AI tool for gwa ai command (default: claude)
# ai_tool = "claude"

# Files to copy to new worktrees
# copy_files = [".env", ".envrc"]

# Directories to copy to new worktrees
# copy_dirs = ["node_modules"]

# Hooks
# post_create_hook = "npm install"
# pre_remove_hook = "git stash"
"""
