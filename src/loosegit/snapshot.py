"""Working tree snapshot with hash computation."""

import logging
from pathlib import Path
from typing import Container, Optional

from .constants import GIT_DIR
from .core import PathSnapshot
from .errors import UnsupportedSubdirectory
from .hashing import compute_file_hash
from .ignore import IgnoreSpec

logger = logging.getLogger(__name__)


def scan_working_tree(
    root: Path,
    ignore: Optional[IgnoreSpec] = None,
    tracked: Container[str] = (),
) -> PathSnapshot:
    """
    Hash every file in the top level of the working tree.

    This is the expensive operation - reads and hashes every file.

    Args:
        root: Repository root (the working directory)
        ignore: Patterns for untracked entries to skip
        tracked: Paths in the index; these are never skipped

    Returns:
        PathSnapshot of file name -> blob hash

    Raises:
        UnsupportedSubdirectory: If a non-ignored entry is not a regular file
    """
    files = {}
    for entry in sorted(root.iterdir()):
        name = entry.name
        if name == GIT_DIR:
            continue

        is_file = entry.is_file() and not entry.is_symlink()
        if ignore is not None and name not in tracked and ignore.is_ignored(name, is_dir=entry.is_dir()):
            logger.debug("Skipping ignored path %s", name)
            continue

        if not is_file:
            raise UnsupportedSubdirectory(name)
        files[name] = compute_file_hash(entry)

    logger.debug("Hashed %d working tree files", len(files))
    return PathSnapshot(files=files)
