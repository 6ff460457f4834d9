"""Core data models for loosegit.

Three Snapshots, One Report:
----------------------------
A status query builds three PathSnapshots - what HEAD committed, what the
index has staged, and what the working directory currently holds - each
mapping a relative path to the content hash it would be stored under.
The reconciler compares them pairwise:

1. Index vs HEAD gives "Changes to be committed"
2. Working tree vs Index gives "Changes not staged for commit"
3. Working tree paths absent from the index are "Untracked files"

Snapshots are frozen once built and discarded with the report.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============= Object Model =============

class ObjectType(str, Enum):
    """Type tag stored in a loose object header."""

    COMMIT = "commit"
    TREE = "tree"
    BLOB = "blob"


class ObjectRecord(BaseModel):
    """Decompressed loose object with its header split off."""

    obj_type: str
    size: int
    content: bytes


class TreeEntry(BaseModel):
    """Single (mode, path, hash) entry decoded from a tree object."""

    mode: str
    path: str
    hash: str  # 40 hex chars


class IndexEntry(BaseModel):
    """Fields of an index record used for status reporting."""

    path: str
    hash: str  # 40 hex chars


# ============= Snapshots =============

class PathSnapshot(BaseModel):
    """Path -> content hash mapping for one of HEAD, index or working tree."""

    model_config = ConfigDict(frozen=True)

    files: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple]) -> "PathSnapshot":
        """Build a snapshot from (path, hash) pairs; later duplicates win."""
        files = {}
        for path, hash_val in pairs:
            files[path] = hash_val
        return cls(files=files)

    def get(self, path: str) -> Optional[str]:
        return self.files.get(path)

    def paths(self) -> List[str]:
        return list(self.files.keys())

    def __contains__(self, path: object) -> bool:
        return path in self.files

    def __len__(self) -> int:
        return len(self.files)


# ============= HEAD State =============

class HeadState(BaseModel):
    """Where HEAD points: a branch, a detached commit, or an unborn branch."""

    branch: Optional[str] = None
    commit: Optional[str] = None

    @property
    def is_detached(self) -> bool:
        return self.branch is None

    @property
    def is_unborn(self) -> bool:
        return self.commit is None

    def describe(self) -> str:
        """Get the git-style first line of the status output."""
        if self.branch:
            return f"On branch {self.branch}"
        if self.commit:
            return f"HEAD detached at {self.commit[:7]}"
        return "HEAD detached (no commits yet)"


# ============= Change Classification =============

class StatusCategory(str, Enum):
    """Category of a changed path."""

    NEW_FILE = "new file"
    MODIFIED = "modified"
    DELETED = "deleted"


class StatusEntry(BaseModel):
    """Single classified path."""

    path: str
    category: StatusCategory


class StatusResult(BaseModel):
    """Result of reconciling HEAD, index and working tree snapshots."""

    to_be_committed: List[StatusEntry] = Field(default_factory=list)
    not_staged: List[StatusEntry] = Field(default_factory=list)
    untracked: List[str] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """Check if there is nothing to report."""
        return not (self.to_be_committed or self.not_staged or self.untracked)

    @property
    def summary(self) -> Dict[str, int]:
        """Get counts per section."""
        return {
            "to_be_committed": len(self.to_be_committed),
            "not_staged": len(self.not_staged),
            "untracked": len(self.untracked),
        }


class StatusReport(BaseModel):
    """Everything the status command prints."""

    head: HeadState
    result: StatusResult
