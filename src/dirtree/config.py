"""Run configuration shared by the tree builder and renderer."""

from typing import NamedTuple, Optional

from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.types import PathType


class TreeConfig(NamedTuple):
    """Immutable configuration for one run.

    Attributes:
        start_path: Directory to list. Its string form labels the root line.
        max_depth: Number of directory levels to show below the root, or None for
            no limit.
        directories_only: Whether file entries are left out of the tree entirely.
        exclusion_rules: Rules pruning entries (and their descendants) from the walk.
        permission_action: What to do about directories that cannot be read.

    Example:
        >>> config = TreeConfig(".", max_depth=2)
        >>> config.show_files
        True
    """

    start_path: PathType
    max_depth: Optional[int] = None
    directories_only: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None
    permission_action: PermissionAction = PermissionAction.IGNORE

    @property
    def show_files(self) -> bool:
        return not self.directories_only
