"""Base protocol for object store implementations."""

from typing import Protocol


class ObjectStore(Protocol):
    """
    Protocol for object store implementations.

    Decoders and the reconciler only ever need ``lookup``, so a pack-aware
    store can replace the loose-object reader without touching them.
    """

    def lookup(self, object_hash: str) -> bytes:
        """
        Fetch a stored object.

        Args:
            object_hash: 40-character hex content hash

        Returns:
            Decompressed object bytes, header included

        Raises:
            ObjectNotFound: If the store has no such object
            DecompressionError: If the stored bytes are corrupt
        """
        ...
