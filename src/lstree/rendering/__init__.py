"""Rendering of listing snapshots.

This package turns a snapshot produced by the tree builder into output lines,
as a flat name list, an indented tree, or a detailed table.
"""
