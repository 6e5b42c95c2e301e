"""Directory listing utilities.

This package provides tools for listing directory contents as a flat name
list, an indented tree, or a detailed table of permissions, owners and sizes.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("lstree")
except PackageNotFoundError:
    __version__ = "unknown"
