"""Symlink action enum for deciding how symbolic links appear in a listing."""

from enum import Enum


class SymlinkAction(str, Enum):
    """Action to take when a symbolic link is encountered while building a listing.

    Symlinks are never traversed, whichever action is chosen.

    Values:
        SKIP: Log the symlink and leave it out of the tree (default behavior)
        SHOW: Store the symlink as a leaf entry with its own lstat metadata
    """

    SKIP = "skip"
    SHOW = "show"
