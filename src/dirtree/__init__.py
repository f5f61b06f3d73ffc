"""Directory tree visualization utilities.

This package provides tools for walking a directory and printing it as an
indented tree, similar to the Unix ``tree`` command.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"
