"""Directory walker producing a listing snapshot.

This module provides the TreeBuilder class, which walks a directory to a bounded
depth and returns an immutable-by-convention tree of EntryNode objects. Failures on
individual entries are logged and the entry is left out; only failures on the root
abort the build.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from lstree.config import ListingConfig
from lstree.entry_tree.entry_metadata import EntryMetadata
from lstree.entry_tree.entry_node import EntryNode
from lstree.entry_tree.symlink_action import SymlinkAction
from lstree.exceptions import BuildError
from lstree.types import EntryKind, PathType

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def build(
    root_path: PathType,
    max_depth: int,
    include_hidden: bool,
    symlink_action: SymlinkAction = SymlinkAction.SKIP,
) -> EntryNode:
    """Build a listing snapshot of a directory.

    Convenience wrapper around TreeBuilder for callers that do not hold a
    ListingConfig.

    Args:
        root_path: Directory to list. Must exist and be a directory.
        max_depth: Number of directory levels to descend into, at most MAX_DEPTH. Mandatory.
        include_hidden: Whether entries starting with "." are included.
        symlink_action: Whether symlinks are skipped or stored as leaves.

    Returns:
        The root node of the snapshot.

    Raises:
        BuildError: If the root cannot be read or its name/metadata cannot be resolved.
        ValueError: If max_depth is not an integer from 0 to MAX_DEPTH.
    """
    config = ListingConfig(max_depth=max_depth, include_hidden=include_hidden, symlink_action=symlink_action)
    return TreeBuilder(config).build(root_path)


def _sort_key(node: EntryNode) -> bytes:
    return os.fsencode(node.full_path)


def _is_representable(name: str) -> bool:
    """Check that a name decoded from the filesystem is valid text.

    Undecodable bytes surface as lone surrogates, which cannot be encoded as UTF-8.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class TreeBuilder:
    """Walks a directory and builds a snapshot of its entries.

    The walk is depth-first and recursive. Each directory level consumes one unit of
    the configured depth budget, which ListingConfig caps at MAX_DEPTH so the walk
    stays within the interpreter's recursion limit. A directory reached with a budget
    of zero is kept in the tree but its contents are not read. Children of every
    directory are sorted by full path in byte order before being attached, and that
    order is the one used by every render mode.

    Symlinks are detected with ``os.lstat`` and never followed. Depending on the
    configured SymlinkAction they are either left out of the tree or stored as leaves.

    Error Handling:
        - The root cannot be listed, or its name or metadata cannot be read:
          BuildError is raised.
        - An entry's metadata cannot be read, or its name is not valid text:
          a warning is logged and the entry is skipped.
        - A subdirectory cannot be listed: a warning is logged and the
          directory is kept without children.

    Attributes:
        config (ListingConfig): Depth budget, hidden-file and symlink options.

    Example:
        >>> config = ListingConfig(max_depth=2)
        >>> root = TreeBuilder(config).build("src")  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['lstree']
    """

    def __init__(self, config: ListingConfig) -> None:
        self.config = config

    def build(self, root_path: PathType) -> EntryNode:
        """Build the snapshot rooted at root_path.

        Args:
            root_path: Directory to list. Relative paths are made absolute.

        Returns:
            The root node, a directory entry whose children are the listed entries.

        Raises:
            BuildError: If the root cannot be read as a directory, or its name or
                metadata cannot be resolved.
        """
        path = Path(os.path.abspath(root_path))
        # The filesystem root has no base name
        name = path.name or path.anchor
        if not name or not _is_representable(name):
            raise BuildError(str(path), "Could not read directory name")

        try:
            metadata = EntryMetadata.from_stat(os.stat(path))
        except (OSError, ValueError) as e:
            raise BuildError(str(path), f"Failed to open metadata: {e}") from e
        if metadata.kind is not EntryKind.DIRECTORY:
            raise BuildError(str(path), "Not a directory")

        logger.debug("Building listing of %s with depth %d", path, self.config.max_depth)
        try:
            return self._build_directory(path, name, metadata, self.config.max_depth)
        except OSError as e:
            raise BuildError(str(path), e.strerror or str(e)) from e

    def _build_directory(self, path: Path, name: str, metadata: EntryMetadata, depth: int) -> EntryNode:
        """Create a directory node, reading its contents while budget remains.

        Raises:
            OSError: If the directory itself cannot be listed.
        """
        if depth == 0:
            return EntryNode(name, path, metadata)

        logger.debug("Read dir: %s", path)
        children: List[EntryNode] = []
        for child_name in os.listdir(path):
            child = self._build_child(path / child_name, child_name, depth)
            if child is not None:
                children.append(child)

        children.sort(key=_sort_key)
        return EntryNode(name, path, metadata, children=children)

    def _build_child(self, path: Path, name: str, depth: int) -> Optional[EntryNode]:
        """Create the node for one directory entry, or None if it is left out."""
        if not self.config.include_hidden and name.startswith(HIDDEN_PREFIX):
            logger.debug("Filter hidden file %s", path)
            return None

        if not _is_representable(name):
            logger.warning("Skipping entry with a name that is not valid text: %r", path)
            return None

        try:
            stat_result = os.lstat(path)
        except OSError as e:
            logger.warning("Failed to read metadata of %s: %s", path, e.strerror or e)
            return None

        try:
            metadata = EntryMetadata.from_stat(stat_result)
        except ValueError as e:
            logger.debug("Skipping %s: %s", path, e)
            return None

        if metadata.kind is EntryKind.DIRECTORY:
            try:
                return self._build_directory(path, name, metadata, depth - 1)
            except OSError as e:
                logger.warning("Failed to read directory %s: %s", path, e.strerror or e)
                return EntryNode(name, path, metadata)

        if metadata.kind is EntryKind.SYMLINK and self.config.symlink_action is SymlinkAction.SKIP:
            logger.debug("Skipping symlink %s", path)
            return None

        return EntryNode(name, path, metadata)
