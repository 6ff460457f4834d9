"""Core operations for loosegit."""

import logging
from dataclasses import dataclass
from typing import Optional

from .context import RepoContext
from .core import HeadState, PathSnapshot, StatusReport
from .diffing import compute_status
from .index import read_index_snapshot
from .objects import read_head_snapshot
from .refs import read_head
from .snapshot import scan_working_tree
from .storage import ObjectStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshots:
    """The three snapshots a status query compares."""
    head: PathSnapshot
    index: PathSnapshot
    working: PathSnapshot


def load_snapshots(
    ctx: RepoContext,
    head_state: HeadState,
    store: Optional[ObjectStore] = None,
) -> Snapshots:
    """Read HEAD tree, index and working tree for a repository.

    Any decode failure propagates; there is no partial result.
    """
    store = store or ctx.object_store()
    head = read_head_snapshot(store, head_state.commit)
    index = read_index_snapshot(ctx.index_path)
    working = scan_working_tree(ctx.root, ctx.get_ignore_spec(), tracked=index)
    logger.debug(
        "Snapshots: head=%d index=%d working=%d", len(head), len(index), len(working)
    )
    return Snapshots(head=head, index=index, working=working)


def get_status(ctx: RepoContext, store: Optional[ObjectStore] = None) -> StatusReport:
    """Compute the status report for a repository.

    Args:
        ctx: Repository context
        store: Object store to read from (defaults to the loose object store)

    Returns:
        StatusReport with the HEAD description and classified paths
    """
    head_state = read_head(ctx.git_dir)
    snapshots = load_snapshots(ctx, head_state, store)
    result = compute_status(snapshots.head, snapshots.index, snapshots.working)
    logger.debug("Status summary: %s", result.summary)
    return StatusReport(head=head_state, result=result)
