"""Identity action enum for handling unresolvable owner and group ids."""

from enum import Enum


class IdentityAction(str, Enum):
    """Action to take when an owner or group id cannot be resolved to a name.

    Values:
        PLACEHOLDER: Render "Owner" or "Group" in place of the name (default behavior)
        SKIP: Omit the row from the detailed listing and log a warning
    """

    PLACEHOLDER = "placeholder"
    SKIP = "skip"
