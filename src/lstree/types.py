from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds captured while building a listing.

    Only files and directories are stored in a tree by default. Symlinks are
    always detected, and are stored as leaves only when the symlink policy asks
    for them to be shown.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (never traversed)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
