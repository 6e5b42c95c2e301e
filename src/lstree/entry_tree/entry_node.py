"""Node representation for entries in a listing snapshot."""

from pathlib import Path
from typing import Any, Iterable, Optional

from anytree import Node

from lstree.entry_tree.entry_metadata import EntryMetadata
from lstree.types import EntryKind


class EntryNode(Node):  # type: ignore
    """Node class representing a file or directory in a listing snapshot.

    Extends anytree.Node with the entry's full path and its metadata snapshot.
    Children are attached once, already in their final order, by the tree builder;
    the order of ``children`` is the order every renderer uses.

    Attributes:
        name (str): The base name of the entry.
        full_path (Path): Absolute path of the entry, used for sorting and lookups.
        metadata (EntryMetadata): Metadata captured when the entry was built.
        parent (Optional[EntryNode]): The parent node in the tree.
        children (tuple[EntryNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> from lstree.entry_tree.entry_metadata import EntryMetadata
        >>> meta = EntryMetadata(EntryKind.DIRECTORY, 0o40755, 0, 0, 4096)
        >>> root = EntryNode("root", Path("/root"), meta)
        >>> root.is_dir
        True
    """

    def __init__(
        self,
        name: str,
        full_path: Path,
        metadata: EntryMetadata,
        parent: Optional["EntryNode"] = None,
        children: Optional[Iterable["EntryNode"]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize an EntryNode.

        Args:
            name: The base name of the entry.
            full_path: Absolute path of the entry.
            metadata: Metadata snapshot of the entry.
            parent: The parent node. Defaults to None.
            children: Child nodes, in display order. Only valid for directories.
            **kwargs: Additional arguments passed to anytree.Node.

        Raises:
            ValueError: If children are given for an entry that is not a directory.
        """
        if children and metadata.kind is not EntryKind.DIRECTORY:
            raise ValueError(f"Only directories can have children: {full_path}")
        super().__init__(name, parent=parent, children=children, **kwargs)
        self.full_path = full_path
        self.metadata = metadata

    @property
    def kind(self) -> EntryKind:
        return self.metadata.kind

    @property
    def is_dir(self) -> bool:
        return self.metadata.kind is EntryKind.DIRECTORY
