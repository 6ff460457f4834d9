"""Shared test fixtures and utilities."""

import zlib
from pathlib import Path
from typing import Dict, Optional, Union

import pytest

from loosegit.core import IndexEntry, TreeEntry
from loosegit.hashing import compute_blob_hash, compute_object_hash, object_header
from loosegit.index import encode_index
from loosegit.objects import encode_tree_entries


class RepoBuilder:
    """Writes git repository state directly to disk for tests."""

    def __init__(self, root: Path, branch: str = "main"):
        self.root = root
        self.git_dir = root / ".git"
        (self.git_dir / "objects").mkdir(parents=True)
        (self.git_dir / "refs" / "heads").mkdir(parents=True)
        self.branch = branch
        (self.git_dir / "HEAD").write_text(f"ref: refs/heads/{branch}\n")

    def write_object(self, obj_type: str, content: bytes) -> str:
        """Store a loose object and return its hash."""
        object_hash = compute_object_hash(obj_type, content)
        path = self.git_dir / "objects" / object_hash[:2] / object_hash[2:]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(object_header(obj_type, content) + content))
        return object_hash

    def write_tree(self, files: Dict[str, bytes]) -> str:
        entries = [
            TreeEntry(mode="100644", path=name, hash=self.write_object("blob", data))
            for name, data in sorted(files.items())
        ]
        return self.write_object("tree", encode_tree_entries(entries))

    def commit(self, files: Dict[str, bytes], message: str = "commit") -> str:
        """Write blobs, tree and commit, then point the current branch at it."""
        tree_hash = self.write_tree(files)
        body = (
            f"tree {tree_hash}\n"
            f"author Test <test@example.com> 1700000000 +0000\n"
            f"committer Test <test@example.com> 1700000000 +0000\n"
            f"\n{message}\n"
        ).encode()
        commit_hash = self.write_object("commit", body)
        (self.git_dir / "refs" / "heads" / self.branch).write_text(commit_hash + "\n")
        return commit_hash

    def stage(self, files: Dict[str, Union[bytes, str]]) -> None:
        """Write the index; values are file contents or ready-made hashes."""
        entries = []
        for name, value in sorted(files.items()):
            hash_val = value if isinstance(value, str) else compute_blob_hash(value)
            entries.append(IndexEntry(path=name, hash=hash_val))
        (self.git_dir / "index").write_bytes(encode_index(entries))

    def write(self, name: str, content: bytes = b"test content\n") -> Path:
        path = self.root / name
        path.write_bytes(content)
        return path

    def remove(self, name: str) -> None:
        (self.root / name).unlink()

    def config(self, text: str) -> None:
        (self.git_dir / "loosegit.yaml").write_text(text)

    def detach(self, commit_hash: Optional[str] = None) -> None:
        if commit_hash is None:
            commit_hash = (self.git_dir / "refs" / "heads" / self.branch).read_text().strip()
        (self.git_dir / "HEAD").write_text(commit_hash + "\n")


@pytest.fixture
def repo(tmp_path, monkeypatch):
    """Create an empty repository in tmp_path and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return RepoBuilder(tmp_path)


@pytest.fixture
def clean_repo(repo):
    """Repository with one committed, staged and unchanged file."""
    repo.commit({"a.txt": b"hello\n"})
    repo.stage({"a.txt": b"hello\n"})
    repo.write("a.txt", b"hello\n")
    return repo
