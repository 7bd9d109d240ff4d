# tests/test_walker.py
import os
from pathlib import Path

import pytest

from dirlist.core.walker import PathWalker
from dirlist.errors import TraversalError
from dirlist.models import WalkOptions


@pytest.fixture
def sample_tree(tmp_path):
    """
    tmp_path/
      a.txt            (10 bytes)
      .git/config
      dir/inner.txt
      dir/sub/deep.txt
    """
    (tmp_path / "a.txt").write_bytes(b"0123456789")
    git = tmp_path / ".git"
    git.mkdir()
    (git / "config").write_text("[core]", encoding="utf-8")
    sub = tmp_path / "dir" / "sub"
    sub.mkdir(parents=True)
    (tmp_path / "dir" / "inner.txt").write_text("inner", encoding="utf-8")
    (sub / "deep.txt").write_text("deep", encoding="utf-8")
    return tmp_path


def _walk(root, **kwargs):
    return list(PathWalker(WalkOptions(root=root, **kwargs)).walk())


def _record_scandir(monkeypatch):
    visited = []
    real_scandir = os.scandir

    def recording_scandir(path):
        visited.append(Path(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", recording_scandir)
    return visited


def test_default_window_lists_direct_children(sample_tree):
    entries = _walk(sample_tree)
    assert [e.name for e in entries] == ["a.txt", "dir"]
    assert all(e.depth == 1 for e in entries)

def test_hidden_entries_included_on_request(sample_tree):
    entries = _walk(sample_tree, show_hidden=True)
    assert [e.name for e in entries] == [".git", "a.txt", "dir"]

def test_preorder_parent_before_children(sample_tree):
    entries = _walk(sample_tree, max_depth=3)
    assert [(e.name, e.depth) for e in entries] == [
        ("a.txt", 1),
        ("dir", 1),
        ("inner.txt", 2),
        ("sub", 2),
        ("deep.txt", 3),
    ]

def test_hidden_subtree_is_never_descended(sample_tree, monkeypatch):
    visited = _record_scandir(monkeypatch)
    entries = _walk(sample_tree, max_depth=5)

    assert all(".git" not in e.path.parts for e in entries)
    assert sample_tree / ".git" not in visited

def test_nothing_beyond_max_depth_is_read(sample_tree, monkeypatch):
    visited = _record_scandir(monkeypatch)
    entries = _walk(sample_tree, max_depth=2)

    assert max(e.depth for e in entries) == 2
    # depth-2 directories are listed but not opened
    assert sample_tree / "dir" / "sub" not in visited

def test_min_depth_suppresses_but_still_descends(sample_tree):
    entries = _walk(sample_tree, min_depth=2, max_depth=2)
    assert [e.name for e in entries] == ["inner.txt", "sub"]

def test_min_greater_than_max_is_empty(sample_tree, monkeypatch):
    visited = _record_scandir(monkeypatch)
    assert _walk(sample_tree, min_depth=3, max_depth=1) == []
    assert visited == []

def test_root_is_depth_zero(sample_tree):
    entries = _walk(sample_tree, min_depth=0, max_depth=0)
    assert len(entries) == 1
    assert entries[0].depth == 0
    assert entries[0].name == sample_tree.name

def test_dot_root_is_not_treated_as_hidden(sample_tree, monkeypatch):
    monkeypatch.chdir(sample_tree)
    entries = _walk(Path("."), min_depth=0, max_depth=1)
    assert [e.name for e in entries] == [".", "a.txt", "dir"]
    assert entries[1].path == Path("a.txt")

def test_file_root_yields_itself(sample_tree):
    entries = _walk(sample_tree / "a.txt", min_depth=0, max_depth=3)
    assert [e.name for e in entries] == ["a.txt"]

def test_order_is_stable_across_runs(sample_tree):
    first = _walk(sample_tree, max_depth=3, show_hidden=True)
    second = _walk(sample_tree, max_depth=3, show_hidden=True)
    assert first == second

@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks_are_not_followed(sample_tree):
    os.symlink(sample_tree / "dir", sample_tree / "link")
    entries = _walk(sample_tree, max_depth=3)

    assert "link" in [e.name for e in entries]
    assert all("link" not in e.path.parts[:-1] for e in entries)

def test_missing_root_is_a_traversal_error(tmp_path):
    with pytest.raises(TraversalError) as excinfo:
        _walk(tmp_path / "nope")
    assert excinfo.value.path == tmp_path / "nope"

def test_unreadable_directory_aborts_walk(sample_tree, monkeypatch):
    locked = sample_tree / "dir"
    real_scandir = os.scandir

    def guarded_scandir(path):
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", guarded_scandir)

    walker = PathWalker(WalkOptions(root=sample_tree, max_depth=2)).walk()
    seen = []
    with pytest.raises(TraversalError) as excinfo:
        for entry in walker:
            seen.append(entry.name)

    # Entries before the failure were already produced
    assert seen == ["a.txt", "dir"]
    assert excinfo.value.path == locked
    assert str(locked) in str(excinfo.value)
    assert "Permission denied" in str(excinfo.value)
