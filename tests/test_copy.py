"""Tests for copying files into new worktrees"""
import pytest

from gwa.services.copy_service import copy_dirs, copy_files


@pytest.fixture
def src(temp_dir):
    root = temp_dir / "src"
    root.mkdir()
    (root / ".env").write_text("SECRET=1\n")
    (root / ".envrc").write_text("use nix\n")
    (root / "test.env").write_text("A=1\n")
    (root / "config").mkdir()
    (root / "config" / "local.json").write_text("{}")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = 1\n")
    return root


@pytest.fixture
def dst(temp_dir):
    root = temp_dir / "dst"
    root.mkdir()
    return root


class TestCopyFiles:
    """Test file pattern copying."""

    def test_plain_path(self, src, dst):
        assert copy_files([".env"], str(src), str(dst)) == 1
        assert (dst / ".env").read_text() == "SECRET=1\n"

    def test_suffix_glob(self, src, dst):
        assert copy_files(["*.env"], str(src), str(dst)) == 2
        assert (dst / ".env").exists()
        assert (dst / "test.env").exists()
        assert not (dst / ".envrc").exists()

    def test_prefix_glob(self, src, dst):
        assert copy_files([".env*"], str(src), str(dst)) == 2
        assert (dst / ".envrc").exists()
        assert not (dst / "test.env").exists()

    def test_nested_path_creates_parents(self, src, dst):
        assert copy_files(["config/local.json"], str(src), str(dst)) == 1
        assert (dst / "config" / "local.json").read_text() == "{}"

    def test_missing_file_is_skipped(self, src, dst):
        assert copy_files(["missing.txt", ".env"], str(src), str(dst)) == 1

    def test_directories_are_not_files(self, src, dst):
        assert copy_files(["config"], str(src), str(dst)) == 0


class TestCopyDirs:
    """Test recursive directory copying."""

    def test_copies_tree(self, src, dst):
        assert copy_dirs(["node_modules"], str(src), str(dst)) == 1
        assert (dst / "node_modules" / "pkg" / "index.js").read_text() == "module.exports = 1\n"

    def test_missing_dir_is_skipped(self, src, dst):
        assert copy_dirs(["vendor", "config"], str(src), str(dst)) == 1

    def test_existing_destination_is_merged(self, src, dst):
        (dst / "config").mkdir()
        (dst / "config" / "keep.txt").write_text("keep")

        assert copy_dirs(["config"], str(src), str(dst)) == 1
        assert (dst / "config" / "keep.txt").exists()
        assert (dst / "config" / "local.json").exists()
