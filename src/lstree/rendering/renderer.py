"""Render mode selection for listing snapshots.

This module provides the Renderer class, which picks the row style matching a
ListingConfig and streams the lines of a snapshot through it.
"""

import logging
from typing import Iterator, Optional

from lstree.config import ListingConfig
from lstree.entry_tree.entry_node import EntryNode
from lstree.rendering.base_style import RowStyle
from lstree.rendering.flat_style import FlatDetailedStyle, FlatSimpleStyle
from lstree.rendering.identity import IdentityResolver
from lstree.rendering.tree_style import TreeStyle

logger = logging.getLogger(__name__)


class Renderer:
    """Turns a listing snapshot into output lines.

    Render modes:
        - flat, simple: immediate children on one tab-separated line
        - flat, detailed: a header and one row per immediate child
        - tree, simple: one line per entry with branch markers

    Detailed rendering cannot be combined with tree rendering. When both are
    requested the detailed flat listing is produced and a warning is logged.

    Attributes:
        config (ListingConfig): Selects the render mode.
        resolver (IdentityResolver): Owner/group lookups for detailed rows.

    Example:
        >>> renderer = Renderer(ListingConfig(max_depth=1))
        >>> for line in renderer.stream_lines(root):  # doctest: +SKIP
        ...     print(line)
        README.md	setup.py	src
    """

    def __init__(self, config: ListingConfig, resolver: Optional[IdentityResolver] = None) -> None:
        self.config = config
        self.resolver = resolver if resolver is not None else IdentityResolver()

    def select_style(self) -> RowStyle:
        """Return the row style for the configured mode."""
        if self.config.detailed:
            if self.config.tree:
                logger.warning("Cannot display list and tree, will do list")
            return FlatDetailedStyle(self.resolver, self.config.identity_action)
        if self.config.tree:
            return TreeStyle(self.config.max_depth)
        return FlatSimpleStyle()

    def stream_lines(self, root: EntryNode) -> Iterator[str]:
        """Generate the output lines for a snapshot.

        Args:
            root: Directory node returned by the tree builder.

        Yields:
            Output lines, without trailing newlines.
        """
        if not root.is_dir:
            logger.error("Cannot list non dir type: %s", root.full_path)
            return
        yield from self.select_style().stream_lines(root)


def render(tree: EntryNode, config: ListingConfig) -> Iterator[str]:
    """Generate the output lines of a snapshot for the given configuration."""
    return Renderer(config).stream_lines(tree)
