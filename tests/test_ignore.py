"""Tests for ignore pattern system."""

import pytest

from loosegit.ignore import DEFAULTS, IgnoreSpec


class TestIgnoreSpec:
    """Test ignore pattern matching."""

    def test_default_patterns(self, tmp_path):
        """Only the git directory is ignored by default."""
        ignore = IgnoreSpec(tmp_path)

        assert ignore.patterns == DEFAULTS
        assert ignore.is_ignored(".git", is_dir=True)
        assert ignore.is_ignored(".git/config")
        assert not ignore.is_ignored("a.txt")
        assert not ignore.is_ignored(".gitignore")

    def test_gitignore_patterns(self, tmp_path):
        """Test custom patterns from .gitignore."""
        (tmp_path / ".gitignore").write_text("""
# Comments should be ignored
*.log
build/
!keep.log
""")

        ignore = IgnoreSpec(tmp_path)

        assert ignore.is_ignored("debug.log")
        assert not ignore.is_ignored("keep.log")  # Negation pattern
        assert ignore.is_ignored("build", is_dir=True)
        assert not ignore.is_ignored("build")  # A file named build is kept
        assert "# Comments should be ignored" not in ignore.patterns

    def test_gitignore_disabled(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.log\n")

        ignore = IgnoreSpec(tmp_path, use_gitignore=False)
        assert not ignore.is_ignored("debug.log")

    def test_extra_patterns(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.log\n")

        ignore = IgnoreSpec(tmp_path, extra=["*.tmp", "!important.log"])
        assert ignore.is_ignored("scratch.tmp")
        assert not ignore.is_ignored("important.log")  # Extras come last and win
        assert ignore.is_ignored("debug.log")

    @pytest.mark.parametrize("name", ["a.txt", "README", "notes.md"])
    def test_unmatched_names(self, tmp_path, name):
        ignore = IgnoreSpec(tmp_path, extra=["*.log"])
        assert not ignore.is_ignored(name)
