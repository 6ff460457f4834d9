"""Status computation logic - reconciles HEAD, index and working tree."""

from typing import Optional

from .core import (
    PathSnapshot,
    StatusCategory,
    StatusEntry,
    StatusResult,
)


def _classify(newer: Optional[str], head: Optional[str]) -> StatusCategory:
    """Category for a path whose newer-side hash differs from the older side."""
    if newer is None:
        return StatusCategory.DELETED
    if head is None:
        return StatusCategory.NEW_FILE
    return StatusCategory.MODIFIED


def compute_status(
    head: PathSnapshot,
    index: PathSnapshot,
    working: PathSnapshot,
) -> StatusResult:
    """
    Classify every path across the three snapshots.

    Args:
        head: Files in the HEAD commit's tree.
        index: Files staged in the index.
        working: Files currently in the working tree.

    Returns:
        StatusResult with staged, unstaged and untracked paths.

    Note:
        Paths are visited once each, in first-seen order across HEAD,
        index and working tree. A path may be both staged and unstaged;
        an untracked path is never either.
    """
    result = StatusResult()

    all_paths = dict.fromkeys(head.paths())
    all_paths.update(dict.fromkeys(index.paths()))
    all_paths.update(dict.fromkeys(working.paths()))

    for path in all_paths:
        head_hash = head.get(path)
        index_hash = index.get(path)
        work_hash = working.get(path)

        # Not in index but on disk
        if index_hash is None and work_hash is not None:
            result.untracked.append(path)
            continue

        # Working tree vs index
        if index_hash != work_hash:
            result.not_staged.append(StatusEntry(
                path=path,
                category=_classify(work_hash, head_hash),
            ))

        # Index vs HEAD
        if index_hash != head_hash:
            result.to_be_committed.append(StatusEntry(
                path=path,
                category=_classify(index_hash, head_hash),
            ))

    return result
