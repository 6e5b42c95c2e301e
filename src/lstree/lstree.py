"""Directory listing façade combining the tree builder and the renderer.

This module provides the DirectoryListing class, which validates the root path once,
builds the snapshot lazily and streams its rendered lines.
"""

from pathlib import Path
from typing import Iterator, List, Optional

from lstree.config import ListingConfig
from lstree.entry_tree.entry_node import EntryNode
from lstree.entry_tree.tree_builder import TreeBuilder
from lstree.rendering.renderer import Renderer
from lstree.types import PathType


class DirectoryListing:
    """Listing of one directory for one configuration.

    The root path is checked when the listing is created. The snapshot is built on
    first access and then reused, so rendering it several times always shows the
    same entries in the same order.

    Attributes:
        directory (Path): Directory being listed.
        config (ListingConfig): Build and render options.

    Example:
        >>> listing = DirectoryListing("src", ListingConfig(max_depth=2))  # doctest: +SKIP
        >>> for line in listing.stream_lines():  # doctest: +SKIP
        ...     print(line)
        |-lstree
        |  |-__init__.py
        ...

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        BuildError: If the directory cannot be read (raised on first access).
    """

    def __init__(self, directory: PathType, config: ListingConfig) -> None:
        self.directory = Path(directory)
        if not self.directory.exists():
            raise FileNotFoundError(f"Path does not exist: {directory}")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")
        self.config = config
        self._tree: Optional[EntryNode] = None

    def build(self) -> EntryNode:
        """Build the snapshot if it has not been built yet, and return it.

        Raises:
            BuildError: If the directory cannot be read.
        """
        if self._tree is None:
            self._tree = TreeBuilder(self.config).build(self.directory)
        return self._tree

    @property
    def tree(self) -> EntryNode:
        """The snapshot of the directory, built on first access."""
        return self.build()

    def stream_lines(self) -> Iterator[str]:
        """Generate the rendered lines of the listing."""
        yield from Renderer(self.config).stream_lines(self.tree)


def list_directory(directory: PathType, config: ListingConfig) -> List[str]:
    """Build and render a listing, returning all of its lines."""
    return list(DirectoryListing(directory, config).stream_lines())
