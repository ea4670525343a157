"""Per-branch notes and lock flags stored under the project metadata directory."""

import time
from pathlib import Path

from gwa.constants import METADATA_DIR_NAME
from gwa.logging_config import get_logger
from gwa.models.metadata import WorktreeMetadata

logger = get_logger(__name__)


class MetadataService:
    """Reads and writes `.gwa/notes/<branch>.txt` and `.gwa/locks/<branch>.lock`."""

    def __init__(self, repo_root: str):
        """Initialize the metadata service.

        Args:
            repo_root: Path of the main worktree; metadata lives in its .gwa directory
        """
        self.metadata_dir = Path(repo_root) / METADATA_DIR_NAME

    def _ensure_dir(self, directory: Path) -> None:
        """Create a metadata subdirectory that git status will not report."""
        directory.mkdir(parents=True, exist_ok=True)
        top = self.metadata_dir / directory.relative_to(self.metadata_dir).parts[0]
        gitignore = top / ".gitignore"
        if not gitignore.exists():
            gitignore.write_text("*\n", encoding="utf-8")

    def note_path(self, branch: str) -> Path:
        return self.metadata_dir / "notes" / f"{branch}.txt"

    def lock_path(self, branch: str) -> Path:
        return self.metadata_dir / "locks" / f"{branch}.lock"

    def load(self, branch: str) -> WorktreeMetadata:
        """Load the note and lock flag for `branch`."""
        note_file = self.note_path(branch)
        note = note_file.read_text(encoding="utf-8") if note_file.exists() else None
        return WorktreeMetadata(note=note, locked=self.is_locked(branch))

    def save_note(self, branch: str, note: str) -> None:
        """Replace the note for `branch`."""
        note_file = self.note_path(branch)
        # Branch names with slashes become nested directories
        self._ensure_dir(note_file.parent)
        note_file.write_text(note, encoding="utf-8")
        logger.info(f"Saved note for {branch}")

    def lock(self, branch: str) -> None:
        """Mark `branch` as locked, recording when."""
        lock_file = self.lock_path(branch)
        self._ensure_dir(lock_file.parent)
        lock_file.write_text(str(int(time.time())), encoding="utf-8")
        logger.info(f"Locked {branch}")

    def unlock(self, branch: str) -> None:
        """Clear the lock on `branch`. Unlocking an unlocked branch is a no-op."""
        self.lock_path(branch).unlink(missing_ok=True)
        logger.info(f"Unlocked {branch}")

    def is_locked(self, branch: str) -> bool:
        return self.lock_path(branch).exists()
