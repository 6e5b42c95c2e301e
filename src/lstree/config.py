"""Listing configuration passed explicitly to the tree builder and the renderer."""

import argparse
from dataclasses import dataclass

from lstree.entry_tree.symlink_action import SymlinkAction
from lstree.rendering.identity_action import IdentityAction

# Largest accepted depth budget; one directory level per unit
MAX_DEPTH = 255


@dataclass(frozen=True)
class ListingConfig:
    """Options controlling how a directory is walked and displayed.

    A single value is created per invocation (usually from the command line) and
    handed to both the builder and the renderer, so neither depends on global state.

    Attributes:
        max_depth: Depth budget from 0 to MAX_DEPTH. 1 lists only the immediate contents
            of the root, 0 lists nothing below the root. Values above 1 select tree rendering.
        include_hidden: Whether entries whose name starts with "." are listed.
        detailed: Whether to render permission, owner, group and size columns.
        symlink_action: Whether symlinks are left out of the tree or shown as leaves.
        identity_action: What to do with rows whose owner or group has no name.

    Example:
        >>> config = ListingConfig(max_depth=3)
        >>> config.tree
        True
        >>> ListingConfig(max_depth=-1)
        Traceback (most recent call last):
        ...
        ValueError: max_depth must be an integer from 0 to 255, got -1
    """

    max_depth: int
    include_hidden: bool = False
    detailed: bool = False
    symlink_action: SymlinkAction = SymlinkAction.SKIP
    identity_action: IdentityAction = IdentityAction.PLACEHOLDER

    def __post_init__(self) -> None:
        valid_type = isinstance(self.max_depth, int) and not isinstance(self.max_depth, bool)
        if not valid_type or not 0 <= self.max_depth <= MAX_DEPTH:
            raise ValueError(f"max_depth must be an integer from 0 to {MAX_DEPTH}, got {self.max_depth!r}")
        # Accept plain strings for the enum fields
        object.__setattr__(self, "symlink_action", SymlinkAction(self.symlink_action))
        object.__setattr__(self, "identity_action", IdentityAction(self.identity_action))

    @property
    def tree(self) -> bool:
        """True if the depth budget asks for tree rendering."""
        return self.max_depth > 1

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ListingConfig":
        """Build a configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by the lstree argument parser.

        Returns:
            The corresponding configuration.
        """
        return cls(
            max_depth=args.depth,
            include_hidden=args.all,
            detailed=args.list,
            symlink_action=SymlinkAction(args.symlinks),
            identity_action=IdentityAction(args.identity),
        )
