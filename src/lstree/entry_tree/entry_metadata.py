"""Metadata snapshot captured for each entry when a listing is built."""

import os
import stat
from dataclasses import dataclass

from lstree.types import EntryKind


@dataclass(frozen=True)
class EntryMetadata:
    """Immutable metadata of a filesystem entry.

    The values are copied out of an ``os.stat_result`` at build time and are never
    refreshed, so a rendered listing always reflects the moment the tree was built.

    Attributes:
        kind: Whether the entry is a file, a directory, or a symlink.
        mode: Raw ``st_mode`` bits, including the file type bits.
        uid: Numeric owner id.
        gid: Numeric group id.
        size: Size in bytes.

    Example:
        >>> meta = EntryMetadata(EntryKind.FILE, 0o100644, 1000, 1000, 12)
        >>> meta.permission_bits == 0o644
        True
    """

    kind: EntryKind
    mode: int
    uid: int
    gid: int
    size: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "EntryMetadata":
        """Create a metadata snapshot from the result of ``os.lstat``.

        Args:
            stat_result: Result of an lstat call on the entry.

        Returns:
            The metadata snapshot.

        Raises:
            ValueError: If the entry is neither a directory, a regular file, nor a symlink.
        """
        mode = stat_result.st_mode
        if stat.S_ISLNK(mode):
            kind = EntryKind.SYMLINK
        elif stat.S_ISDIR(mode):
            kind = EntryKind.DIRECTORY
        elif stat.S_ISREG(mode):
            kind = EntryKind.FILE
        else:
            raise ValueError(f"Unsupported file type: {stat.filemode(mode)[0]!r}")
        return cls(
            kind=kind,
            mode=mode,
            uid=stat_result.st_uid,
            gid=stat_result.st_gid,
            size=stat_result.st_size,
        )

    @property
    def permission_bits(self) -> int:
        """The nine owner/group/other permission bits of the mode."""
        return stat.S_IMODE(self.mode) & 0o777

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
