"""Permission string formatting for detailed listings."""

from typing import Tuple

from lstree.types import EntryKind

# (mask, letter) for owner, group and other, each as read, write, execute
PERMISSION_BITS: Tuple[Tuple[int, str], ...] = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)

KIND_MARKERS = {
    EntryKind.DIRECTORY: "d",
    EntryKind.SYMLINK: "l",
    EntryKind.FILE: "-",
}


def format_permissions(mode: int, kind: EntryKind = EntryKind.FILE) -> str:
    """Format mode bits as a 10-character permission string.

    Args:
        mode: Raw mode bits. Only the nine permission bits are inspected.
        kind: Kind of the entry, which selects the leading character.

    Returns:
        The permission string, e.g. "drwxr-xr-x".

    Example:
        >>> format_permissions(0o754)
        '-rwxr-xr--'
        >>> format_permissions(0o754, EntryKind.DIRECTORY)
        'drwxr-xr--'
    """
    letters = "".join(letter if mode & mask else "-" for mask, letter in PERMISSION_BITS)
    return KIND_MARKERS[kind] + letters
