"""Owner and group name resolution for detailed listings."""

import grp
import pwd
from typing import Dict

from lstree.exceptions import IdentityLookupError

OWNER_PLACEHOLDER = "Owner"
GROUP_PLACEHOLDER = "Group"


class IdentityResolver:
    """Resolves numeric owner and group ids to names through the system databases.

    Results, including failures, are cached for the lifetime of the resolver, so one
    resolver per render pass performs at most one lookup per distinct id.

    Example:
        >>> resolver = IdentityResolver()
        >>> resolver.owner_name(0)  # doctest: +SKIP
        'root'
    """

    def __init__(self) -> None:
        self._owners: Dict[int, str] = {}
        self._groups: Dict[int, str] = {}

    def owner_name(self, uid: int) -> str:
        """Return the user name for uid.

        Raises:
            IdentityLookupError: If the user database has no entry for uid.
        """
        if uid not in self._owners:
            try:
                self._owners[uid] = pwd.getpwuid(uid).pw_name
            except KeyError:
                self._owners[uid] = ""
        if not self._owners[uid]:
            raise IdentityLookupError(OWNER_PLACEHOLDER, uid)
        return self._owners[uid]

    def group_name(self, gid: int) -> str:
        """Return the group name for gid.

        Raises:
            IdentityLookupError: If the group database has no entry for gid.
        """
        if gid not in self._groups:
            try:
                self._groups[gid] = grp.getgrgid(gid).gr_name
            except KeyError:
                self._groups[gid] = ""
        if not self._groups[gid]:
            raise IdentityLookupError(GROUP_PLACEHOLDER, gid)
        return self._groups[gid]
