"""Row style base class defining how a snapshot is turned into output lines.

This module provides the abstract base class that every render mode implements.
The renderer picks one style per pass; a style never mutates the tree it is given.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from lstree.entry_tree.entry_node import EntryNode


class RowStyle(ABC):
    """Abstract base class for the row styles of a listing.

    The output of a style is divided into two phases:
    1. Header - an optional single line printed once before any row
    2. Rows - the lines produced from the given directory node

    Example:
        >>> class NamesStyle(RowStyle):
        ...     def format_header(self):
        ...         return None
        ...
        ...     def stream_rows(self, root):
        ...         for child in root.children:
        ...             yield child.name
    """

    @abstractmethod
    def format_header(self) -> Optional[str]:
        """Return the header line, or None if this style has no header."""
        pass

    @abstractmethod
    def stream_rows(self, root: EntryNode) -> Iterator[str]:
        """Generate the rows for a directory node.

        Args:
            root: The directory node whose contents are rendered.

        Yields:
            Output lines, without trailing newlines.
        """
        pass

    def stream_lines(self, root: EntryNode) -> Iterator[str]:
        """Generate the header, if any, followed by the rows."""
        header = self.format_header()
        if header is not None:
            yield header
        yield from self.stream_rows(root)
