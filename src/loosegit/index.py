"""Binary index (staging area) decoding.

Layout read here (index version 2)::

    header   12 bytes   "DIRC", version, entry count (big-endian uint32 at 8-11)
    entries  variable   62-byte metadata block, NUL-terminated path, padding
    trailer  20 bytes   checksum (ignored)

Inside an entry the 20-byte object hash sits at offset 40 and the path
starts at offset 62. The signature and version are not checked, so an index
written in another version layout decodes to garbage.
"""

import logging
import struct
from pathlib import Path
from typing import Iterable, Tuple
import hashlib

from .constants import (
    HASH_BYTE_LENGTH,
    INDEX_ENTRY_ALIGNMENT,
    INDEX_ENTRY_HASH_OFFSET,
    INDEX_ENTRY_PATH_OFFSET,
    INDEX_HEADER_SIZE,
)
from .core import IndexEntry, PathSnapshot
from .errors import UndefinedField, UnreadableFile

logger = logging.getLogger(__name__)


def read_entry_count(data: bytes) -> int:
    """Get the entry count from the index header."""
    if len(data) < INDEX_HEADER_SIZE:
        raise UndefinedField("index entry count", f"header is {len(data)} bytes")
    (count,) = struct.unpack(">L", data[8:INDEX_HEADER_SIZE])
    return count


def entry_padding(length: int) -> int:
    """Number of padding bytes after an entry of the given length.

    Always 1 to 8: an entry whose length is already a multiple of 8 still
    gets a full 8 bytes.
    """
    return INDEX_ENTRY_ALIGNMENT - (length % INDEX_ENTRY_ALIGNMENT)


def decode_index_entry(data: bytes, offset: int) -> Tuple[IndexEntry, int]:
    """Decode one index entry starting at offset.

    Args:
        data: Whole index file contents
        offset: Start of the entry

    Returns:
        Tuple of (decoded entry, offset of the next entry)
    """
    hash_start = offset + INDEX_ENTRY_HASH_OFFSET
    hash_bytes = data[hash_start:hash_start + HASH_BYTE_LENGTH]
    if len(hash_bytes) != HASH_BYTE_LENGTH:
        raise UndefinedField("index entry hash", f"entry at offset {offset} is truncated")

    path_start = offset + INDEX_ENTRY_PATH_OFFSET
    path_end = data.find(b"\0", path_start)
    if path_start > len(data) or path_end < 0:
        raise UndefinedField("index entry path", f"entry at offset {offset} has no terminator")

    path_bytes = data[path_start:path_end]
    length = INDEX_ENTRY_PATH_OFFSET + len(path_bytes)
    entry = IndexEntry(
        path=path_bytes.decode("utf-8", errors="surrogateescape"),
        hash=hash_bytes.hex(),
    )
    return entry, offset + length + entry_padding(length)


def decode_index(data: bytes) -> PathSnapshot:
    """Decode index file contents into a path -> hash snapshot."""
    count = read_entry_count(data)
    offset = INDEX_HEADER_SIZE
    files = {}
    for _ in range(count):
        entry, offset = decode_index_entry(data, offset)
        files[entry.path] = entry.hash
    return PathSnapshot(files=files)


def read_index_snapshot(index_path: Path) -> PathSnapshot:
    """Read the index file, or return an empty snapshot if there is none."""
    if not index_path.exists():
        logger.debug("No index at %s; using empty index snapshot", index_path)
        return PathSnapshot()
    try:
        data = index_path.read_bytes()
    except OSError as e:
        raise UnreadableFile(str(index_path), e.strerror or str(e)) from e
    snapshot = decode_index(data)
    logger.debug("Decoded index with %d entries", len(snapshot))
    return snapshot


def encode_index(entries: Iterable[IndexEntry], version: int = 2) -> bytes:
    """Encode entries in the version 2 layout, trailer checksum included.

    Stat fields are written as zeros apart from the mode (regular file).
    """
    entries = list(entries)
    data = b"DIRC" + struct.pack(">LL", version, len(entries))
    for entry in entries:
        path_bytes = entry.path.encode("utf-8", errors="surrogateescape")
        # ctime, mtime (s, ns each), dev, ino, mode, uid, gid, size
        stat_fields = struct.pack(">10L", 0, 0, 0, 0, 0, 0, 0o100644, 0, 0, 0)
        flags = struct.pack(">H", min(len(path_bytes), 0xFFF))
        record = stat_fields + bytes.fromhex(entry.hash) + flags + path_bytes
        data += record + b"\0" * entry_padding(len(record))
    return data + hashlib.sha1(data).digest()
