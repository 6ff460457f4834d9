"""Gitignore-style pattern matching for loosegit."""

from pathlib import Path
from typing import Iterable

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern

from .constants import GIT_DIR, GITIGNORE_FILE


# Patterns that always apply
DEFAULTS = [
    f"{GIT_DIR}/",
]


def _read_pattern_file(path: Path) -> list:
    patterns = []
    for line in path.read_text(errors="replace").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            patterns.append(line)
    return patterns


class IgnoreSpec:
    """Manages gitignore-style patterns for untracked file exclusion."""

    def __init__(self, root: Path, extra: Iterable[str] = (), use_gitignore: bool = True):
        """Initialize ignore spec with default and custom patterns.

        Args:
            root: Repository root directory
            extra: Additional patterns to include
            use_gitignore: Whether to load the root .gitignore
        """
        self.root = root
        patterns = list(DEFAULTS)

        ignore_file = root / GITIGNORE_FILE
        if use_gitignore and ignore_file.is_file():
            patterns.extend(_read_pattern_file(ignore_file))

        patterns.extend(extra)
        self.patterns = patterns

        # Compile patterns once for efficiency
        self.spec = PathSpec.from_lines(GitWildMatchPattern, patterns)

    def is_ignored(self, relpath: str, is_dir: bool = False) -> bool:
        """Check if a repository-relative POSIX path should be ignored.

        Args:
            relpath: Repository-relative path in POSIX format
            is_dir: Whether the path is a directory; directory-only
                patterns ("build/") need the trailing slash to match

        Returns:
            True if the path matches any ignore pattern
        """
        if is_dir and not relpath.endswith("/"):
            relpath = relpath + "/"
        return self.spec.match_file(relpath)
