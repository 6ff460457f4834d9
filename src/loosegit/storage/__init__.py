"""Storage package for reading repository objects."""

from .base import ObjectStore
from .loose import LooseObjectStore, read_object

__all__ = ["ObjectStore", "LooseObjectStore", "read_object"]
