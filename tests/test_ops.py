"""End-to-end tests for status computation against on-disk repositories."""

import pytest

from loosegit import status, status_text
from loosegit.context import RepoContext
from loosegit.core import StatusCategory
from loosegit.errors import (
    MalformedCommit,
    ObjectNotFound,
    UnsupportedMode,
    UnsupportedSubdirectory,
)
from loosegit.ops import get_status, load_snapshots
from loosegit.refs import read_head


class TestStatusScenarios:
    """Full pipeline: refs, objects, index, working tree, reconciler."""

    def test_empty_repository(self, repo):
        assert status_text(repo.root) == "On branch main\nnothing to commit, working tree clean"

    def test_untracked_file(self, repo):
        repo.write("a.txt")

        text = status_text(repo.root, show_branch=False)
        assert text == "Untracked files:\n\ta.txt"

    def test_staged_new_file(self, repo):
        repo.write("a.txt", b"hello\n")
        repo.stage({"a.txt": b"hello\n"})

        text = status_text(repo.root)
        assert "Changes to be committed:" in text
        assert "new file:\ta.txt" in text
        assert "Untracked files:" not in text

    def test_modified_not_staged(self, clean_repo):
        clean_repo.write("a.txt", b"changed\n")

        text = status_text(clean_repo.root)
        assert "Changes not staged for commit:" in text
        assert "modified:\ta.txt" in text
        assert "Changes to be committed:" not in text

    def test_deleted_not_staged(self, clean_repo):
        clean_repo.remove("a.txt")

        report = status(clean_repo.root)
        assert [(e.path, e.category) for e in report.result.not_staged] == [
            ("a.txt", StatusCategory.DELETED)
        ]
        assert report.result.to_be_committed == []

    def test_clean_after_commit(self, clean_repo):
        report = status(clean_repo.root)
        assert report.result.is_clean
        assert report.head.branch == "main"

    def test_mixed_changes(self, clean_repo):
        clean_repo.commit({"a.txt": b"hello\n", "b.txt": b"b\n"})
        clean_repo.stage({"a.txt": b"hello again\n", "b.txt": b"b\n", "c.txt": b"c\n"})
        clean_repo.write("a.txt", b"hello again\n")
        clean_repo.write("b.txt", b"b changed\n")
        clean_repo.write("c.txt", b"c\n")
        clean_repo.write("d.txt", b"d\n")

        result = status(clean_repo.root).result
        assert {(e.path, e.category) for e in result.to_be_committed} == {
            ("a.txt", StatusCategory.MODIFIED),
            ("c.txt", StatusCategory.NEW_FILE),
        }
        assert [(e.path, e.category) for e in result.not_staged] == [
            ("b.txt", StatusCategory.MODIFIED)
        ]
        assert result.untracked == ["d.txt"]

    def test_detached_head(self, clean_repo):
        clean_repo.detach()
        clean_repo.write("a.txt", b"changed\n")

        text = status_text(clean_repo.root)
        assert text.startswith("HEAD detached at ")
        assert "modified:\ta.txt" in text

    def test_ignored_untracked_file(self, clean_repo):
        clean_repo.write(".gitignore", b"*.log\n")
        clean_repo.write("debug.log")

        result = status(clean_repo.root).result
        assert result.untracked == [".gitignore"]


class TestStatusErrors:
    """Every decode failure aborts the whole computation."""

    def test_subdirectory(self, clean_repo):
        (clean_repo.root / "src").mkdir()
        with pytest.raises(UnsupportedSubdirectory):
            get_status(RepoContext(clean_repo.root))

    def test_missing_commit_object(self, repo):
        (repo.git_dir / "refs" / "heads" / "main").write_text("f" * 40 + "\n")
        with pytest.raises(ObjectNotFound):
            get_status(RepoContext(repo.root))

    def test_malformed_commit(self, repo):
        commit_hash = repo.write_object("commit", b"author x\n\nno tree\n")
        (repo.git_dir / "refs" / "heads" / "main").write_text(commit_hash + "\n")
        with pytest.raises(MalformedCommit):
            get_status(RepoContext(repo.root))

    def test_tree_with_subdirectory(self, repo):
        sub_tree = repo.write_tree({"x.txt": b"x"})
        tree_body = b"40000 src\x00" + bytes.fromhex(sub_tree)
        tree_hash = repo.write_object("tree", tree_body)
        commit_hash = repo.write_object("commit", f"tree {tree_hash}\n\nmsg\n".encode())
        (repo.git_dir / "refs" / "heads" / "main").write_text(commit_hash + "\n")

        with pytest.raises(UnsupportedMode):
            get_status(RepoContext(repo.root))


class TestLoadSnapshots:
    """Test snapshot loading with a substitute object store."""

    def test_custom_store(self, clean_repo):
        ctx = RepoContext(clean_repo.root)
        real = ctx.object_store()
        calls = []

        class RecordingStore:
            def lookup(self, object_hash):
                calls.append(object_hash)
                return real.lookup(object_hash)

        head_state = read_head(ctx.git_dir)
        snapshots = load_snapshots(ctx, head_state, RecordingStore())

        assert snapshots.head == snapshots.index == snapshots.working
        assert calls[0] == head_state.commit
        assert len(calls) == 2  # commit and tree, never blobs
