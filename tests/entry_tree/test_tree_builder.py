"""Unit tests for the TreeBuilder class and the build function."""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from anytree import PreOrderIter

from lstree.config import MAX_DEPTH, ListingConfig
from lstree.entry_tree.symlink_action import SymlinkAction
from lstree.entry_tree.tree_builder import TreeBuilder, build
from lstree.exceptions import BuildError
from lstree.types import EntryKind


@pytest.fixture
def temp_directory(tmp_path):
    """Create a temporary directory structure.

    root/
        .hidden_dir/visible.txt
        .hidden_file
        b.txt
        a_dir/
            nested/
                deep.txt
            inner.txt
        c.txt
    """
    (tmp_path / ".hidden_dir").mkdir()
    (tmp_path / ".hidden_dir" / "visible.txt").touch()
    (tmp_path / ".hidden_file").touch()
    (tmp_path / "b.txt").write_text("bbb")
    (tmp_path / "a_dir").mkdir()
    (tmp_path / "a_dir" / "nested").mkdir()
    (tmp_path / "a_dir" / "nested" / "deep.txt").touch()
    (tmp_path / "a_dir" / "inner.txt").touch()
    (tmp_path / "c.txt").touch()
    return tmp_path


def names(node):
    return [child.name for child in node.children]


def shape(node):
    """Nested (name, children) representation of a snapshot."""
    return (node.name, [shape(child) for child in node.children])


def truncate(node_shape, depth):
    name, children = node_shape
    if depth == 0:
        return (name, [])
    return (name, [truncate(child, depth - 1) for child in children])


def test_build_root_entry(temp_directory):
    root = build(temp_directory, 1, include_hidden=False)
    assert root.name == temp_directory.name
    assert root.full_path == temp_directory
    assert root.kind is EntryKind.DIRECTORY


def test_build_sorts_children_by_path(temp_directory):
    root = build(temp_directory, 2, include_hidden=True)
    assert names(root) == [".hidden_dir", ".hidden_file", "a_dir", "b.txt", "c.txt"]

    for node in PreOrderIter(root):
        keys = [os.fsencode(child.full_path) for child in node.children]
        assert keys == sorted(keys)


def test_build_is_deterministic(temp_directory):
    first = build(temp_directory, 3, include_hidden=True)
    second = build(temp_directory, 3, include_hidden=True)
    assert shape(first) == shape(second)


def test_hidden_entries_filtered(temp_directory):
    """Hidden entries are dropped, and hidden directories are never descended into."""
    root = build(temp_directory, 3, include_hidden=False)
    assert names(root) == ["a_dir", "b.txt", "c.txt"]
    assert all(not node.name.startswith(".") for node in PreOrderIter(root))
    assert "visible.txt" not in {node.name for node in PreOrderIter(root)}


def test_hidden_entries_included(temp_directory):
    root = build(temp_directory, 2, include_hidden=True)
    hidden_dir = next(child for child in root.children if child.name == ".hidden_dir")
    assert names(hidden_dir) == ["visible.txt"]


def test_depth_zero_returns_root_without_children(temp_directory):
    root = build(temp_directory, 0, include_hidden=True)
    assert root.is_dir
    assert root.children == ()


def test_depth_one_keeps_subdirectories_without_contents(temp_directory):
    root = build(temp_directory, 1, include_hidden=False)
    a_dir = next(child for child in root.children if child.name == "a_dir")
    assert a_dir.is_dir
    assert a_dir.children == ()


def test_deeper_build_matches_when_truncated(temp_directory):
    for depth in range(0, 4):
        shallow = shape(build(temp_directory, depth, include_hidden=True))
        deeper = shape(build(temp_directory, depth + 1, include_hidden=True))
        assert truncate(deeper, depth) == shallow


def test_child_count_matches_visible_entries(temp_directory):
    root = build(temp_directory, 1, include_hidden=False)
    visible = [name for name in os.listdir(temp_directory) if not name.startswith(".")]
    assert len(root.children) == len(visible)


def test_metadata_captured(temp_directory):
    root = build(temp_directory, 1, include_hidden=False)
    b_txt = next(child for child in root.children if child.name == "b.txt")
    assert b_txt.kind is EntryKind.FILE
    assert b_txt.metadata.size == 3
    assert b_txt.full_path == temp_directory / "b.txt"


@pytest.mark.parametrize("depth", [-1, 1.5, True, "2", MAX_DEPTH + 1])
def test_invalid_depth_rejected(temp_directory, depth):
    with pytest.raises(ValueError):
        build(temp_directory, depth, include_hidden=False)


def test_root_not_a_directory(temp_directory):
    with pytest.raises(BuildError, match="Not a directory"):
        build(temp_directory / "b.txt", 1, include_hidden=False)


def test_root_missing(tmp_path):
    with pytest.raises(BuildError):
        build(tmp_path / "missing", 1, include_hidden=False)


def test_root_unreadable(temp_directory):
    """A root that cannot be listed aborts the build."""
    real_listdir = os.listdir

    def fake_listdir(path):
        if Path(path) == temp_directory:
            raise PermissionError(13, "Permission denied")
        return real_listdir(path)

    with patch("os.listdir", side_effect=fake_listdir):
        with pytest.raises(BuildError, match="Permission denied"):
            build(temp_directory, 1, include_hidden=False)


def test_relative_root_is_made_absolute(temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory / "a_dir")
    root = build(".", 1, include_hidden=False)
    assert root.name == "a_dir"
    assert root.full_path == Path(os.getcwd())
    assert names(root) == ["inner.txt", "nested"]


def test_unreadable_metadata_skips_entry(temp_directory, caplog):
    """An entry whose metadata cannot be read is skipped; siblings are kept."""
    real_lstat = os.lstat

    def fake_lstat(path, *args, **kwargs):
        if Path(path).name == "b.txt":
            raise PermissionError(13, "Permission denied")
        return real_lstat(path, *args, **kwargs)

    with caplog.at_level(logging.WARNING), patch("os.lstat", side_effect=fake_lstat):
        root = build(temp_directory, 1, include_hidden=False)

    assert names(root) == ["a_dir", "c.txt"]
    assert any("b.txt" in record.getMessage() for record in caplog.records)


def test_unreadable_subdirectory_kept_without_children(temp_directory, caplog):
    real_listdir = os.listdir

    def fake_listdir(path):
        if Path(path).name == "a_dir":
            raise PermissionError(13, "Permission denied")
        return real_listdir(path)

    with caplog.at_level(logging.WARNING), patch("os.listdir", side_effect=fake_listdir):
        root = build(temp_directory, 3, include_hidden=False)

    a_dir = next(child for child in root.children if child.name == "a_dir")
    assert a_dir.children == ()
    assert names(root) == ["a_dir", "b.txt", "c.txt"]
    assert any("Failed to read directory" in record.getMessage() for record in caplog.records)


@pytest.mark.skipif(sys.platform == "darwin", reason="APFS rejects undecodable file names")
def test_undecodable_name_skipped(tmp_path, caplog):
    (tmp_path / "good.txt").touch()
    try:
        (tmp_path / os.fsdecode(b"bad\xff.txt")).touch()
    except (OSError, UnicodeEncodeError):
        pytest.skip("Filesystem does not accept undecodable names")

    with caplog.at_level(logging.WARNING):
        root = build(tmp_path, 1, include_hidden=False)

    assert names(root) == ["good.txt"]
    assert any("not valid text" in record.getMessage() for record in caplog.records)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported on this platform")
def test_special_files_skipped(tmp_path):
    os.mkfifo(tmp_path / "pipe")
    (tmp_path / "file.txt").touch()
    root = build(tmp_path, 1, include_hidden=False)
    assert names(root) == ["file.txt"]


@pytest.fixture
def temp_directory_with_symlinks(tmp_path):
    """Create a temporary directory structure with symlinks."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").touch()
    (tmp_path / "readme.md").touch()

    try:
        os.symlink(tmp_path / "src", tmp_path / "build")
        os.symlink(tmp_path / "readme.md", tmp_path / "readme_link")
        # A loop that would never terminate if symlinks were followed
        os.symlink(tmp_path, tmp_path / "src" / "loop")
        has_symlinks = True
    except (OSError, NotImplementedError):
        has_symlinks = False

    return tmp_path, has_symlinks


def test_symlinks_skipped_by_default(temp_directory_with_symlinks):
    tmp_path, has_symlinks = temp_directory_with_symlinks
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")

    root = build(tmp_path, 5, include_hidden=False)
    assert names(root) == ["readme.md", "src"]
    src = root.children[1]
    assert names(src) == ["main.py"]


def test_symlinks_shown_as_leaves(temp_directory_with_symlinks):
    tmp_path, has_symlinks = temp_directory_with_symlinks
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")

    root = build(tmp_path, 5, include_hidden=False, symlink_action=SymlinkAction.SHOW)
    assert names(root) == ["build", "readme.md", "readme_link", "src"]

    build_node = root.children[0]
    assert build_node.kind is EntryKind.SYMLINK
    assert build_node.children == ()

    src = root.children[3]
    assert names(src) == ["loop", "main.py"]
    assert src.children[0].children == ()


def test_tree_builder_uses_config(temp_directory):
    config = ListingConfig(max_depth=2, include_hidden=True)
    builder = TreeBuilder(config)
    root = builder.build(temp_directory)
    a_dir = next(child for child in root.children if child.name == "a_dir")
    assert names(a_dir) == ["inner.txt", "nested"]
    nested = a_dir.children[1]
    assert nested.children == ()


def test_build_at_max_depth(tmp_path):
    """The deepest accepted budget builds without hitting the recursion limit."""
    path = tmp_path
    for _ in range(MAX_DEPTH + 5):
        path = path / "d"
        path.mkdir()

    node = build(tmp_path, MAX_DEPTH, include_hidden=False)
    levels = 0
    while node.children:
        assert names(node) == ["d"]
        node = node.children[0]
        levels += 1
    assert levels == MAX_DEPTH
    assert node.is_dir
