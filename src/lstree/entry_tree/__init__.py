"""In-memory snapshot of a directory listing.

This package provides the node and metadata types that make up a listing
snapshot, and the builder that walks the filesystem to produce one.
"""
