"""Custom exceptions for loosegit.

Every failure while reading repository state aborts the whole status
computation. There is no partial report, so callers only need to catch
``LooseGitError`` at the outermost layer.
"""

from typing import Optional, TypeVar

T = TypeVar("T")


class LooseGitError(RuntimeError):
    """Base class for all loosegit errors."""
    pass


# Repository Errors
class RepositoryNotFound(LooseGitError):
    """No .git directory found walking up from the start path."""

    def __init__(self, start: str):
        self.start = start
        super().__init__(f"not a git repository (or any of the parent directories): {start}")


# Object Store Errors
class ObjectStoreError(LooseGitError):
    """Base class for object store errors."""
    pass


class ObjectNotFound(ObjectStoreError):
    """Loose object file does not exist."""

    def __init__(self, object_hash: str, path: Optional[str] = None):
        self.object_hash = object_hash
        self.path = path
        super().__init__(f"Object not found: {object_hash}")


class DecompressionError(ObjectStoreError):
    """Stored object bytes are not valid zlib data."""

    def __init__(self, object_hash: str, reason: str):
        self.object_hash = object_hash
        super().__init__(f"Could not decompress object {object_hash}: {reason}")


# Decode Errors
class DecodeError(LooseGitError):
    """Base class for object and index decoding errors."""
    pass


class MalformedCommit(DecodeError):
    """Commit object has no usable tree line."""

    def __init__(self, commit_hash: str):
        self.commit_hash = commit_hash
        super().__init__(f"Commit {commit_hash} has no 'tree ' line")


class UnsupportedMode(DecodeError):
    """Tree entry is not a regular file (e.g. a subdirectory)."""

    def __init__(self, mode: str, path: str):
        self.mode = mode
        self.path = path
        super().__init__(
            f"Unsupported tree entry mode {mode!r} for {path!r}. "
            f"Only regular files (100644) are supported."
        )


class UndefinedField(DecodeError):
    """An expected field could not be extracted from decoded data."""

    def __init__(self, field: str, context: str = ""):
        self.field = field
        message = f"Could not extract {field}"
        if context:
            message += f" ({context})"
        super().__init__(message)


# Working Tree Errors
class UnsupportedSubdirectory(LooseGitError):
    """Working tree contains something other than regular files."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Found sub-directory or non-regular file: {path}. "
            f"Only flat repositories without sub-directories are supported."
        )


# Filesystem Errors
class UnreadableFile(LooseGitError):
    """A repository or working tree file exists but could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Unable to read {path}: {reason}")


# Configuration Errors
class ConfigError(LooseGitError):
    """Configuration file could not be read."""
    pass


def require_field(value: Optional[T], field: str, context: str = "") -> T:
    """Return value, or raise UndefinedField when it is None."""
    if value is None:
        raise UndefinedField(field, context)
    return value
