"""Hashing utilities for content addressing.

Objects are addressed by the SHA-1 of a type-tagged, length-prefixed
payload: ``<type> <byte length>\\0<content>``. Working tree files are hashed
the same way so they can be compared directly with index and tree entries.
"""

from pathlib import Path
import hashlib

from .errors import UnreadableFile


def object_header(obj_type: str, content: bytes) -> bytes:
    """Build the ``<type> <length>\\0`` header for content.

    The length is the number of bytes, never the number of decoded
    characters; the two differ for any non-ASCII text.
    """
    return f"{obj_type} {len(content)}\0".encode()


def compute_object_hash(obj_type: str, content: bytes) -> str:
    """Compute the content hash an object would be stored under.

    Args:
        obj_type: Object type tag ("blob", "tree" or "commit")
        content: Raw object payload

    Returns:
        40-character lowercase hex SHA-1
    """
    return hashlib.sha1(object_header(obj_type, content) + content).hexdigest()


def compute_blob_hash(content: bytes) -> str:
    """Compute the hash of content stored as a blob."""
    return compute_object_hash("blob", content)


def compute_file_hash(path: Path) -> str:
    """Compute the blob hash of a file on disk.

    The file is read in one shot so the length in the header always
    matches the bytes that were hashed.

    Args:
        path: Path to file to hash

    Returns:
        40-character lowercase hex SHA-1

    Raises:
        UnreadableFile: If the file cannot be read
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise UnreadableFile(str(path), e.strerror or str(e)) from e
    return compute_blob_hash(content)


__all__ = [
    "object_header",
    "compute_object_hash",
    "compute_blob_hash",
    "compute_file_hash",
]
