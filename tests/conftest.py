"""Test configuration and fixtures for lstree."""

import stat
from pathlib import Path

import pytest

from lstree.entry_tree.entry_metadata import EntryMetadata
from lstree.entry_tree.entry_node import EntryNode
from lstree.types import EntryKind


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def make_entry():
    """Factory for snapshot nodes that do not touch the filesystem.

    Passing children makes a directory; otherwise a file is created unless
    is_dir=True is given.
    """

    def factory(name, children=None, is_dir=None, mode=0o644, uid=1000, gid=1000, size=0, parent_path="/snap"):
        if is_dir is None:
            is_dir = children is not None
        kind = EntryKind.DIRECTORY if is_dir else EntryKind.FILE
        type_bits = stat.S_IFDIR if is_dir else stat.S_IFREG
        metadata = EntryMetadata(kind, type_bits | mode, uid, gid, size)
        return EntryNode(name, Path(parent_path) / name, metadata, children=children)

    return factory
