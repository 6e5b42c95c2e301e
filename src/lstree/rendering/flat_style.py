"""Flat row styles: a single line of names, or one detailed row per entry.

Both styles look only at the immediate children of the node they are given. How
deep the snapshot goes is entirely the builder's concern.
"""

import logging
from typing import Callable, Iterator, Optional

from lstree.entry_tree.entry_node import EntryNode
from lstree.exceptions import IdentityLookupError
from lstree.rendering.base_style import RowStyle
from lstree.rendering.identity import IdentityResolver
from lstree.rendering.identity_action import IdentityAction
from lstree.rendering.permissions import format_permissions

logger = logging.getLogger(__name__)

DETAILED_HEADER = "Mode\t\t user\t group\t size\t\t name"


class FlatSimpleStyle(RowStyle):
    """Names of the immediate children on one tab-separated line."""

    def format_header(self) -> Optional[str]:
        return None

    def stream_rows(self, root: EntryNode) -> Iterator[str]:
        yield "\t".join(child.name for child in root.children)


class FlatDetailedStyle(RowStyle):
    """One row per immediate child: permissions, owner, group, size and name.

    An owner or group id without a name is handled per row according to the
    configured IdentityAction; it never aborts the listing.

    Attributes:
        resolver (IdentityResolver): Source of owner and group names.
        identity_action (IdentityAction): Placeholder or skip for unresolvable ids.
    """

    def __init__(
        self,
        resolver: Optional[IdentityResolver] = None,
        identity_action: IdentityAction = IdentityAction.PLACEHOLDER,
    ) -> None:
        self.resolver = resolver if resolver is not None else IdentityResolver()
        self.identity_action = identity_action

    def format_header(self) -> Optional[str]:
        return DETAILED_HEADER

    def stream_rows(self, root: EntryNode) -> Iterator[str]:
        for child in root.children:
            row = self.format_row(child)
            if row is not None:
                yield row

    def format_row(self, entry: EntryNode) -> Optional[str]:
        """Format a single entry, or return None if the row is skipped."""
        metadata = entry.metadata
        try:
            owner = self._resolve(self.resolver.owner_name, metadata.uid)
            group = self._resolve(self.resolver.group_name, metadata.gid)
        except IdentityLookupError as e:
            logger.warning("Skipping %s: %s", entry.full_path, e)
            return None

        mode = format_permissions(metadata.mode, metadata.kind)
        return f"{mode}\t{owner}\t{group}\t{metadata.size}\t\t{entry.name}"

    def _resolve(self, lookup: Callable[[int], str], ident: int) -> str:
        try:
            return lookup(ident)
        except IdentityLookupError as e:
            if self.identity_action is IdentityAction.SKIP:
                raise
            logger.debug("%s, using placeholder", e)
            return e.kind
