"""Copy untracked files and directories into a freshly created worktree."""

import shutil
from pathlib import Path
from typing import Iterable

from gwa.logging_config import get_logger

logger = get_logger(__name__)


def copy_files(patterns: Iterable[str], src_dir: str, dst_dir: str) -> int:
    """
    Copy files matching `patterns` from `src_dir` to the same relative place in `dst_dir`.

    Patterns may be plain relative paths or glob patterns. Sources that don't
    exist are skipped.

    Returns:
        Number of files copied
    """
    src_root = Path(src_dir)
    dst_root = Path(dst_dir)
    copied = 0

    for pattern in patterns:
        for src in sorted(src_root.glob(pattern)):
            if not src.is_file():
                continue
            dst = dst_root / src.relative_to(src_root)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
            logger.debug(f"Copied {src} -> {dst}")
            copied += 1

    return copied


def copy_dirs(dirs: Iterable[str], src_dir: str, dst_dir: str) -> int:
    """
    Recursively copy each directory in `dirs` from `src_dir` into `dst_dir`.

    Returns:
        Number of directories copied
    """
    copied = 0
    for name in dirs:
        src = Path(src_dir) / name
        if not src.is_dir():
            logger.debug(f"Skipping missing directory {src}")
            continue
        shutil.copytree(src, Path(dst_dir) / name, symlinks=True, dirs_exist_ok=True)
        copied += 1

    return copied
