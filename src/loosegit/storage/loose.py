"""Loose object store implementation."""

import logging
import re
import zlib
from pathlib import Path
from typing import Optional

from ..core import ObjectRecord
from ..errors import DecompressionError, ObjectNotFound, UndefinedField, UnreadableFile
from .base import ObjectStore

logger = logging.getLogger(__name__)

_HASH_RE = re.compile(r"[0-9a-f]{40}")


def is_object_hash(value: str) -> bool:
    """Check that value is a 40-character lowercase hex hash."""
    return _HASH_RE.fullmatch(value) is not None


class LooseObjectStore:
    """
    Reads individually stored, zlib-compressed objects.

    Objects are sharded by hash: objects_dir/ab/<remaining 38 chars>
    """

    def __init__(self, objects_dir: Path):
        """
        Initialize loose object store.

        Args:
            objects_dir: The repository's objects directory
        """
        self.objects_dir = Path(objects_dir)

    def object_path(self, object_hash: str) -> Path:
        """Get the on-disk path for a hash (the file may not exist)."""
        if not is_object_hash(object_hash):
            raise UndefinedField("object hash", f"got {object_hash!r}")
        return self.objects_dir / object_hash[:2] / object_hash[2:]

    def lookup(self, object_hash: str) -> bytes:
        """
        Read and decompress an object.

        Args:
            object_hash: 40-character hex content hash

        Returns:
            Decompressed object bytes, header included
        """
        path = self.object_path(object_hash)
        if not path.is_file():
            raise ObjectNotFound(object_hash, str(path))

        try:
            compressed = path.read_bytes()
        except OSError as e:
            raise UnreadableFile(str(path), e.strerror or str(e)) from e

        try:
            data = zlib.decompress(compressed)
        except zlib.error as e:
            raise DecompressionError(object_hash, str(e)) from e

        logger.debug("Read object %s (%d bytes)", object_hash[:12], len(data))
        return data

    def exists(self, object_hash: str) -> bool:
        """Check if the object is stored."""
        try:
            return self.object_path(object_hash).is_file()
        except UndefinedField:
            return False


def _split_header(data: bytes) -> Optional[tuple]:
    null_index = data.find(b"\0")
    if null_index < 0:
        return None
    parts = data[:null_index].decode("ascii", errors="replace").split(" ")
    if len(parts) != 2 or not parts[1].isdigit():
        return None
    return parts[0], int(parts[1]), data[null_index + 1:]


def read_object(store: ObjectStore, object_hash: str) -> ObjectRecord:
    """Look up an object and split its ``<type> <size>\\0`` header."""
    data = store.lookup(object_hash)
    split = _split_header(data)
    if split is None:
        raise UndefinedField("object header", f"object {object_hash}")
    obj_type, size, content = split
    return ObjectRecord(obj_type=obj_type, size=size, content=content)
