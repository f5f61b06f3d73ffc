"""In-memory directory tree: building from the filesystem and rendering as text.

This package provides the node type, the builder that walks the filesystem while
applying depth limits and exclusion rules, and the renderer that draws the result
with box-drawing connectors.
"""
