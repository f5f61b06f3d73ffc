"""Construction of the directory tree from the filesystem.

This module provides the TreeBuilder class, which walks a directory depth-first and
produces a TreeNode tree with depth limits, exclusion rules and directories-only
filtering already applied. Nothing is filtered later at render time.
"""

import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from dirtree.config import TreeConfig
from dirtree.file_system_tree.exclusion_tracker import ExclusionTracker
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.tree_node import TreeNode


class TreeBuilder:
    """Builds a TreeNode tree for the start path of a run configuration.

    Depth is counted from the start path at depth 0. With a maximum depth of ``k``,
    directories at depth ``k`` are shown as leaves and nothing deeper appears, so no
    displayed entry lies more than ``k`` levels below the root.

    Entries are visited in the byte order of their names. For each entry:

    - if the exclusion rules exclude it, its path is recorded in the exclusion tracker
      and it is skipped together with everything beneath it;
    - in directories-only mode, files are skipped without being recorded;
    - directories are attached only when a node is produced and then expanded in turn;
    - files become leaf nodes.

    Directories that cannot be listed (permission denied, removed mid-walk) become
    leaves. Traversal of siblings and ancestors always continues.

    Attributes:
        config (TreeConfig): The run configuration.
        exclusion_tracker (ExclusionTracker): Paths pruned so far during this build.

    Example:
        >>> from dirtree.config import TreeConfig
        >>> builder = TreeBuilder(TreeConfig("src", max_depth=1))  # doctest: +SKIP
        >>> root = builder.build()  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['dirtree']
    """

    def __init__(self, config: TreeConfig, exclusion_tracker: Optional[ExclusionTracker] = None) -> None:
        """Initialize a TreeBuilder, validating the start path up front.

        Args:
            config: The run configuration.
            exclusion_tracker: Tracker to record excluded paths in. A fresh tracker
                is created when omitted.

        Raises:
            FileNotFoundError: If the start path doesn't exist.
            NotADirectoryError: If the start path isn't a directory.
        """
        self._start_path = Path(config.start_path)
        if not self._start_path.exists():
            raise FileNotFoundError(f"Directory '{config.start_path}' does not exist")
        if not self._start_path.is_dir():
            raise NotADirectoryError(f"'{config.start_path}' is not a directory")

        self.config = config
        self.exclusion_tracker = exclusion_tracker if exclusion_tracker is not None else ExclusionTracker()
        self._absolute_start = Path(os.path.abspath(self._start_path))
        self._root_label = os.fspath(config.start_path)

    def build(self) -> Optional[TreeNode]:
        """Build the tree rooted at the configured start path.

        Returns:
            The root node, or None if the root itself produced no node.
        """
        return self.build_node(self._start_path, 0)

    def build_node(self, directory_path: Path, current_depth: int) -> Optional[TreeNode]:
        """Build the node for a directory and everything beneath it.

        The walk keeps its pending directories on an explicit stack, so nesting depth
        is limited only by the filesystem.

        Args:
            directory_path: Directory to build. Either the start path or a path
                discovered beneath it.
            current_depth: Depth of the directory below the start path.

        Returns:
            The directory node, or None when no node should be produced: the depth
            limit is exceeded, the path lies beneath an excluded path, or no bare
            name can be derived for it.
        """
        node = self._make_node(directory_path, current_depth)
        if node is None:
            return None

        max_depth = self.config.max_depth
        pending: List[Tuple[TreeNode, Path, int]] = [(node, self._absolute(directory_path), current_depth)]
        while pending:
            parent, absolute_path, depth = pending.pop()

            # Children of a directory at the limit would lie below it
            if max_depth is not None and depth >= max_depth:
                continue

            entries = self._scan(absolute_path)
            if entries is None:
                continue

            subdirectories: List[Tuple[TreeNode, Path, int]] = []
            relative_dir = self._relative(absolute_path)
            for entry in entries:
                is_dir = self._is_dir(entry)
                relative_path = f"{relative_dir}{entry.name}/" if is_dir else f"{relative_dir}{entry.name}"

                if self.config.exclusion_rules is not None and self.config.exclusion_rules.exclude(relative_path):
                    self.exclusion_tracker.record(entry.path)
                    continue

                if self.config.directories_only and not is_dir:
                    continue

                if is_dir:
                    child_path = Path(entry.path)
                    child = self._make_node(child_path, depth + 1)
                    if child is not None:
                        child.parent = parent
                        subdirectories.append((child, self._absolute(child_path), depth + 1))
                else:
                    TreeNode(entry.name, parent=parent, is_dir=False)

            # Reversed so directories are listed in pre-order
            pending.extend(reversed(subdirectories))

        return node

    def _make_node(self, directory_path: Path, depth: int) -> Optional[TreeNode]:
        """Create the childless node for a directory, or None if it must not appear."""
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            return None

        if self.exclusion_tracker.is_under_excluded(self._absolute(directory_path)):
            return None

        if depth == 0:
            name = self._root_label if directory_path == self._start_path else str(directory_path)
        else:
            name = Path(directory_path).name
            if not name:
                return None

        return TreeNode(name, is_dir=True)

    def _scan(self, directory_path: Path) -> Optional[List["os.DirEntry[str]"]]:
        """List a directory sorted by the raw bytes of each name.

        Returns:
            The sorted entries, or None if the directory could not be read.
        """
        try:
            with os.scandir(directory_path) as it:
                entries = list(it)
        except OSError as e:
            if self.config.permission_action == PermissionAction.WARN:
                print(f"Warning: cannot read directory '{directory_path}': {e.strerror or e}", file=sys.stderr)
            return None

        # Raw byte order of the name, not locale collation
        entries.sort(key=lambda entry: os.fsencode(entry.name))
        return entries

    @staticmethod
    def _is_dir(entry: "os.DirEntry[str]") -> bool:
        try:
            return entry.is_dir()
        except OSError:
            return False

    def _absolute(self, path: Path) -> Path:
        if path == self._start_path:
            return self._absolute_start
        return Path(os.path.abspath(path))

    def _relative(self, absolute_path: Path) -> str:
        """Return the path relative to the start path with a trailing slash, or ''."""
        if absolute_path == self._absolute_start:
            return ""
        return absolute_path.relative_to(self._absolute_start).as_posix() + "/"
