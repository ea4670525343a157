"""Tests for porcelain worktree listing parsing"""

from gwa.services.git.porcelain import parse_worktree_list
from tests.conftest import TWO_WORKTREES


class TestParseWorktreeList:
    """Test parse_worktree_list."""

    def test_empty_output(self):
        assert parse_worktree_list("") == []

    def test_single_worktree(self):
        output = "worktree /path/to/repo\nHEAD abc123\nbranch refs/heads/main\n"
        result = parse_worktree_list(output)

        assert len(result) == 1
        assert result[0].path == "/path/to/repo"
        assert result[0].branch == "main"

    def test_multiple_worktrees_in_order(self):
        result = parse_worktree_list(TWO_WORKTREES)

        assert [(wt.path, wt.branch) for wt in result] == [
            ("/work/repo", "main"),
            ("/work/feature-x", "feature-x"),
        ]

    def test_branch_with_slashes(self):
        output = "worktree /w/feat\nHEAD abc\nbranch refs/heads/feature/login\n"
        assert parse_worktree_list(output)[0].branch == "feature/login"

    def test_path_with_spaces(self):
        output = "worktree /w/my project\nHEAD abc\nbranch refs/heads/main\n"
        assert parse_worktree_list(output)[0].path == "/w/my project"

    def test_detached_head(self):
        output = "worktree /path/to/detached\nHEAD abc123\ndetached\n"
        result = parse_worktree_list(output)

        assert len(result) == 1
        assert result[0].branch == "(detached)"
        assert result[0].is_detached

    def test_detached_sentinel_may_repeat(self):
        output = (
            "worktree /a\nHEAD 1\ndetached\n\n"
            "worktree /b\nHEAD 2\ndetached\n\n"
        )
        assert [wt.branch for wt in parse_worktree_list(output)] == ["(detached)", "(detached)"]

    def test_bare_entry_is_skipped(self):
        output = (
            "worktree /repo.git\nbare\n\n"
            "worktree /w/feature\nHEAD abc\nbranch refs/heads/feature\n\n"
        )
        result = parse_worktree_list(output)

        assert len(result) == 1
        assert result[0].path == "/w/feature"
        assert result[0].branch == "feature"

    def test_branch_without_worktree_line_is_ignored(self):
        output = "branch refs/heads/orphan\n\nworktree /w/a\nbranch refs/heads/a\n"
        result = parse_worktree_list(output)

        assert [wt.branch for wt in result] == ["a"]

    def test_blank_line_clears_pending_path(self):
        output = "worktree /w/a\n\nbranch refs/heads/a\n"
        assert parse_worktree_list(output) == []

    def test_extra_attributes_are_ignored(self):
        output = (
            "worktree /w/a\nHEAD abc\nbranch refs/heads/a\nlocked reason\n\n"
            "worktree /w/b\nHEAD def\nbranch refs/heads/b\nprunable gitdir file points to non-existent location\n"
        )
        assert [wt.branch for wt in parse_worktree_list(output)] == ["a", "b"]

    def test_non_heads_ref_is_ignored(self):
        output = "worktree /w/a\nHEAD abc\nbranch refs/remotes/origin/a\n"
        assert parse_worktree_list(output) == []

    def test_crlf_line_endings(self):
        output = "worktree /w/a\r\nHEAD abc\r\nbranch refs/heads/a\r\n\r\n"
        result = parse_worktree_list(output)
        assert [(wt.path, wt.branch) for wt in result] == [("/w/a", "a")]


class TestMainWorktreeTagging:
    """Test that the first listed worktree is tagged as main."""

    def test_first_block_is_main(self):
        result = parse_worktree_list(TWO_WORKTREES)

        assert result[0].is_main is True
        assert result[1].is_main is False

    def test_detached_main_is_still_main(self):
        output = "worktree /w/main\nHEAD abc\ndetached\n\nworktree /w/b\nbranch refs/heads/b\n"
        result = parse_worktree_list(output)

        assert result[0].is_main is True
        assert result[1].is_main is False

    def test_bare_main_leaves_no_main_entry(self):
        output = "worktree /repo.git\nbare\n\nworktree /w/b\nHEAD abc\nbranch refs/heads/b\n"
        result = parse_worktree_list(output)

        assert len(result) == 1
        assert result[0].is_main is False
