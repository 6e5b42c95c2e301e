class BuildError(Exception):
    """
    Exception raised when a listing cannot be built at all.

    This exception covers failures that abort the whole build rather than a single
    entry: the root path cannot be read as a directory, or its own name or metadata
    cannot be resolved. Failures on individual entries below the root never raise it.

    Attributes:
        path (str): The path that could not be processed.
        reason (str): Human-readable description of the failure.

    Example:
        >>> error = BuildError("/root/secret", "Permission denied")
        >>> str(error)
        'Failed to read directory /root/secret: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the failing path and a reason.

        Args:
            path (str): The path that could not be processed.
            reason (str): Description of the underlying failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read directory {path}: {reason}")


class IdentityLookupError(Exception):
    """
    Exception raised when a numeric owner or group id has no name.

    Raised by the identity resolver and handled per entry by the detailed renderer,
    which either substitutes a placeholder or omits the row.

    Attributes:
        kind (str): Either "Owner" or "Group".
        ident (int): The numeric id that could not be resolved.

    Example:
        >>> error = IdentityLookupError("Owner", 4242)
        >>> str(error)
        'Owner id 4242 could not be resolved'
    """

    def __init__(self, kind: str, ident: int) -> None:
        self.kind = kind
        self.ident = ident
        super().__init__(f"{kind} id {ident} could not be resolved")
