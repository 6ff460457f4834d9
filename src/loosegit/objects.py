"""Commit and tree object decoding.

Decoding works on whole loose objects as returned by ``ObjectStore.lookup``:
the ``<type> <size>\\0`` header is still attached and is skipped here.

Tree payload layout after the header::

    <mode> <path>\\0<20-byte binary hash><mode> <path>\\0<20-byte hash>...

Only regular files (mode 100644) are supported; subdirectories are not.
"""

import logging
from typing import Iterable, Optional, Tuple

from .constants import HASH_BYTE_LENGTH, HASH_HEX_LENGTH, REGULAR_FILE_MODE
from .core import PathSnapshot, TreeEntry
from .errors import MalformedCommit, UndefinedField, UnsupportedMode
from .hashing import object_header
from .storage import ObjectStore
from .storage.loose import is_object_hash

logger = logging.getLogger(__name__)

TREE_MARKER = "tree "
MODE_PREFIX = REGULAR_FILE_MODE + " "


def parse_tree_hash(commit_data: bytes) -> Optional[str]:
    """Extract the tree hash from the first line of a commit object.

    Returns None when the marker is missing or not followed by a full hash.
    """
    first_line = commit_data.split(b"\n", 1)[0].decode("utf-8", errors="replace")
    marker = first_line.find(TREE_MARKER)
    if marker < 0:
        return None
    tree_hash = first_line[marker + len(TREE_MARKER):][:HASH_HEX_LENGTH]
    if not is_object_hash(tree_hash):
        return None
    return tree_hash


def get_commit_tree_hash(store: ObjectStore, commit_hash: str) -> str:
    """Fetch a commit and return the hash of its tree."""
    tree_hash = parse_tree_hash(store.lookup(commit_hash))
    if tree_hash is None:
        raise MalformedCommit(commit_hash)
    return tree_hash


def decode_tree_entry(data: bytes, offset: int) -> Tuple[TreeEntry, int]:
    """Decode one tree entry starting at offset.

    Args:
        data: Tree object bytes
        offset: Start of the entry's ``<mode> <path>`` segment

    Returns:
        Tuple of (decoded entry, offset of the next entry)
    """
    boundary = data.find(b"\0", offset)
    if boundary < 0:
        raise UndefinedField("tree entry path", f"no terminator after offset {offset}")

    meta = data[offset:boundary].decode("utf-8", errors="surrogateescape")
    if not meta.startswith(MODE_PREFIX):
        mode, _, path = meta.partition(" ")
        raise UnsupportedMode(mode, path)
    path = meta[len(MODE_PREFIX):]

    hash_end = boundary + 1 + HASH_BYTE_LENGTH
    hash_bytes = data[boundary + 1:hash_end]
    if len(hash_bytes) != HASH_BYTE_LENGTH:
        raise UndefinedField("tree entry hash", f"entry {path!r} is truncated")

    return TreeEntry(mode=REGULAR_FILE_MODE, path=path, hash=hash_bytes.hex()), hash_end


def decode_tree(data: bytes) -> PathSnapshot:
    """Decode a tree object into a path -> hash snapshot.

    A path listed twice keeps the hash of its last entry.
    """
    header_end = data.find(b"\0")
    if header_end < 0:
        raise UndefinedField("tree header", "no terminator")
    offset = header_end + 1

    files = {}
    while offset < len(data):
        entry, offset = decode_tree_entry(data, offset)
        files[entry.path] = entry.hash
    return PathSnapshot(files=files)


def encode_tree_entries(entries: Iterable[TreeEntry]) -> bytes:
    """Encode entries as a tree payload (without the object header)."""
    body = b""
    for entry in entries:
        meta = f"{entry.mode} {entry.path}".encode("utf-8", errors="surrogateescape")
        body += meta + b"\0" + bytes.fromhex(entry.hash)
    return body


def encode_tree(entries: Iterable[TreeEntry]) -> bytes:
    """Encode entries as a complete tree object, header included."""
    body = encode_tree_entries(entries)
    return object_header("tree", body) + body


def read_head_snapshot(store: ObjectStore, commit_hash: Optional[str]) -> PathSnapshot:
    """Build the HEAD snapshot from a commit hash.

    An unborn branch (no commit yet) has an empty snapshot.
    """
    if commit_hash is None:
        logger.debug("No HEAD commit; using empty HEAD snapshot")
        return PathSnapshot()

    tree_hash = get_commit_tree_hash(store, commit_hash)
    snapshot = decode_tree(store.lookup(tree_hash))
    logger.debug("Decoded tree %s with %d entries", tree_hash[:12], len(snapshot))
    return snapshot
