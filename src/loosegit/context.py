"""Repository context for managing paths and repository discovery."""

from pathlib import Path
from typing import Optional

from .config import StatusConfig, load_status_config
from .constants import GIT_DIR, HEAD_FILE, INDEX_FILE, OBJECTS_DIR
from .errors import RepositoryNotFound
from .ignore import IgnoreSpec
from .storage import LooseObjectStore


class RepoContext:
    """Manages repository root discovery and path resolution."""

    def __init__(self, start_path: Optional[Path] = None):
        """Initialize context by finding the repository root.

        Args:
            start_path: Path to start searching for the repository root
        """
        start = start_path or Path.cwd()
        root = self._find_root(start)
        if root is None:
            raise RepositoryNotFound(str(start))
        self.root = root
        self._config: Optional[StatusConfig] = None

    def _find_root(self, start: Path) -> Optional[Path]:
        """Walk up directory tree to find the repository root."""
        current = start.resolve()

        while current != current.parent:
            if (current / GIT_DIR).is_dir():
                return current
            current = current.parent

        # Check root directory
        if (current / GIT_DIR).is_dir():
            return current
        return None

    @property
    def git_dir(self) -> Path:
        return self.root / GIT_DIR

    @property
    def head_path(self) -> Path:
        return self.git_dir / HEAD_FILE

    @property
    def index_path(self) -> Path:
        return self.git_dir / INDEX_FILE

    @property
    def objects_dir(self) -> Path:
        return self.git_dir / OBJECTS_DIR

    def object_store(self) -> LooseObjectStore:
        """Get a store reading this repository's loose objects."""
        return LooseObjectStore(self.objects_dir)

    @property
    def config(self) -> StatusConfig:
        """Get the status configuration (memoized)."""
        if self._config is None:
            self._config = load_status_config(self.git_dir)
        return self._config

    def get_ignore_spec(self) -> IgnoreSpec:
        """Build the ignore specification from configuration."""
        return IgnoreSpec(
            self.root,
            extra=self.config.ignore,
            use_gitignore=self.config.use_gitignore,
        )
