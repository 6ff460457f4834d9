"""HEAD and branch ref resolution."""

import logging
from pathlib import Path
from typing import Optional

from .constants import HEAD_FILE, HEADS_PREFIX, SYMREF_PREFIX
from .core import HeadState
from .errors import UndefinedField, require_field
from .storage.loose import is_object_hash

logger = logging.getLogger(__name__)

PACKED_REFS_FILE = "packed-refs"


def _read_text(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    return path.read_text().strip()


def read_packed_ref(git_dir: Path, ref: str) -> Optional[str]:
    """Look a ref up in packed-refs (written by ``git gc`` / ``git pack-refs``)."""
    content = _read_text(git_dir / PACKED_REFS_FILE)
    if not content:
        return None
    for line in content.splitlines():
        if line.startswith("#") or line.startswith("^"):
            continue
        parts = line.split(" ", 1)
        if len(parts) == 2 and parts[1] == ref:
            return parts[0]
    return None


def resolve_ref(git_dir: Path, ref: str) -> Optional[str]:
    """Get the commit a ref points to, or None if the branch has no commits."""
    commit = _read_text(git_dir / ref) or read_packed_ref(git_dir, ref)
    if not commit:
        return None
    if not is_object_hash(commit):
        raise UndefinedField("commit hash", f"ref {ref} contains {commit!r}")
    return commit


def read_head(git_dir: Path) -> HeadState:
    """Resolve HEAD to a branch name and commit hash.

    HEAD either holds ``ref: refs/heads/<branch>`` or, when detached, a
    commit hash directly.
    """
    content = require_field(_read_text(git_dir / HEAD_FILE), "HEAD", f"no {HEAD_FILE} in {git_dir}")

    if content.startswith(SYMREF_PREFIX):
        ref = content[len(SYMREF_PREFIX):].strip()
        branch = ref[len(HEADS_PREFIX):] if ref.startswith(HEADS_PREFIX) else ref
        commit = resolve_ref(git_dir, ref)
        logger.debug("HEAD -> %s (%s)", ref, commit or "unborn")
        return HeadState(branch=branch, commit=commit)

    if not is_object_hash(content):
        raise UndefinedField("HEAD", f"neither a ref nor a commit hash: {content!r}")
    logger.debug("HEAD detached at %s", content)
    return HeadState(branch=None, commit=content)
