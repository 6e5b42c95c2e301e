"""Tree row style: one name per line with branch markers."""

from typing import Iterator, Optional

from lstree.entry_tree.entry_node import EntryNode
from lstree.rendering.base_style import RowStyle

ITEM_SIGN = "|-"
LAST_SIGN = "|_"
INDENT = "|  "


class TreeStyle(RowStyle):
    """Depth-first, pre-order rendering of a snapshot.

    Every line is the per-level indent followed by a branch marker and the entry name.
    The last sibling gets LAST_SIGN and the others ITEM_SIGN. A directory counts as a
    last sibling only when it has no children of its own, since otherwise its contents
    follow directly below it.

    Recursion stops at max_depth levels even if the snapshot is deeper.

    Example:
        >>> style = TreeStyle(max_depth=2)
        >>> for line in style.stream_lines(root):  # doctest: +SKIP
        ...     print(line)
        |-docs
        |  |_readme.md
        |_setup.py
    """

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth

    def format_header(self) -> Optional[str]:
        return None

    def stream_rows(self, root: EntryNode) -> Iterator[str]:
        yield from self._stream_level(root, 0)

    def _stream_level(self, node: EntryNode, level: int) -> Iterator[str]:
        if level >= self.max_depth:
            return
        indent = INDENT * level
        children = node.children
        for index, child in enumerate(children):
            is_last = index == len(children) - 1
            marker = LAST_SIGN if is_last and not child.children else ITEM_SIGN
            yield f"{indent}{marker}{child.name}"
            if child.is_dir:
                yield from self._stream_level(child, level + 1)
