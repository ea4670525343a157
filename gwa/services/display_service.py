"""Display and formatting service for worktree information"""
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gwa.constants import GC_COLUMNS, LIST_COLUMNS, STATUS_COLUMNS, ColumnDefinition
from gwa.models.metadata import WorktreeMetadata
from gwa.models.worktree import GcCandidate, Worktree, WorktreeStatus


class DisplayService:
    """Renders worktree listings, status tables and reports to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @staticmethod
    def _table(columns: list[ColumnDefinition]) -> Table:
        table = Table()
        for col in columns:
            table.add_column(col.label, min_width=col.width or None, overflow="fold")
        return table

    def display_worktree_list(self, worktrees: list[Worktree]) -> None:
        """Display worktree paths and branches."""
        if not worktrees:
            self.console.print("No worktrees found")
            return

        table = self._table(LIST_COLUMNS)
        for wt in worktrees:
            table.add_row(wt.path, wt.branch, style="cyan" if wt.is_main else None)
        self.console.print(table)

    def display_status_table(
            self,
            rows: Iterable[tuple[Worktree, Optional[WorktreeStatus], Optional[str]]],
        ) -> None:
        """Display dirty state and last commit per worktree.

        Each row is (worktree, status, error); status is None when it could
        not be computed, in which case the error text is shown instead.
        """
        rows = list(rows)
        if not rows:
            self.console.print("No worktrees found")
            return

        table = self._table(STATUS_COLUMNS)
        for wt, status, error in rows:
            if status is None:
                table.add_row(wt.path, wt.branch, "?", Text(f"error: {error}"), style="red")
                continue
            table.add_row(
                wt.path,
                wt.branch,
                "yes" if status.is_dirty else "no",
                Text(status.last_commit),
                style="yellow" if status.is_dirty else None,
            )
        self.console.print(table)

    def display_gc_candidates(self, candidates: list[GcCandidate]) -> None:
        """Display cleanup candidates with the reason each was flagged."""
        if not candidates:
            self.console.print("No cleanup candidates found")
            return

        table = self._table(GC_COLUMNS)
        for c in candidates:
            table.add_row(c.branch, c.path, c.reason)
        self.console.print("Cleanup candidates:")
        self.console.print(table)
        self.console.print("\nUse 'gwa rm <branch>' to remove worktrees")

    def display_info(self, wt: Worktree, status: Optional[WorktreeStatus],
                     metadata: WorktreeMetadata) -> None:
        """Display everything known about one worktree."""
        self.console.print(f"Branch:    {wt.branch}", markup=False)
        self.console.print(f"Path:      {wt.path}", markup=False, highlight=False)
        if status is None:
            self.console.print("Status:    unknown")
        else:
            self.console.print(f"Dirty:     {'yes' if status.is_dirty else 'no'}")
            self.console.print(f"Commit:    {status.last_commit}", markup=False)
        self.console.print(f"Locked:    {'yes' if metadata.locked else 'no'}")
        if metadata.note:
            self.console.print(f"Note:      {metadata.note.strip()}", markup=False)
