"""Permission action enum for handling unreadable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be read during traversal.

    Either way the directory is kept in the tree as a leaf and traversal continues.

    Values:
        IGNORE: Render the directory as a leaf silently (default behavior)
        WARN: Render the directory as a leaf and print a warning to stderr
    """

    IGNORE = "ignore"
    WARN = "warn"
