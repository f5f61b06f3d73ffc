"""Text rendering of a built directory tree with box-drawing connectors."""

import sys
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from dirtree.file_system_tree.tree_node import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
SPACE = "    "


class TreeCounts(NamedTuple):
    directories: int
    files: int


class TreeRenderer:
    """Renders a TreeNode tree one line at a time, counting entries as it goes.

    The root's name is printed alone on the first line and never counted. Every other
    node prints as ``<prefix><connector><name>`` in pre-order, where the connector is
    ``└── `` for the last sibling and ``├── `` otherwise. A node's children extend its
    prefix with four spaces if it was the last sibling, else with ``│   ``, which
    threads each ancestor's "more siblings follow" state down the page.

    Attributes:
        show_files (bool): Whether file nodes count towards ``file_count``.
        directory_count (int): Directories rendered so far.
        file_count (int): Files rendered so far (only when show_files is True).

    Example:
        >>> root = TreeNode("X", is_dir=True)
        >>> a = TreeNode("A", parent=root, is_dir=True)
        >>> _ = TreeNode("f.txt", parent=a)
        >>> _ = TreeNode("g.txt", parent=root)
        >>> renderer = TreeRenderer()
        >>> for line in renderer.stream_lines(root):
        ...     print(line)
        X
        ├── A
        │   └── f.txt
        └── g.txt
        >>> renderer.counts
        TreeCounts(directories=1, files=2)
    """

    def __init__(self, show_files: bool = True) -> None:
        self.show_files = show_files
        self.directory_count = 0
        self.file_count = 0

    @property
    def counts(self) -> TreeCounts:
        return TreeCounts(self.directory_count, self.file_count)

    def stream_lines(self, root: TreeNode) -> Iterator[str]:
        """Generate the rendered tree one line at a time, without trailing newlines.

        Counts are reset when rendering starts and updated as each line is yielded.

        Args:
            root: Root node of the tree to render.

        Yields:
            The root line, then one line per descendant in pre-order.
        """
        self.directory_count = 0
        self.file_count = 0

        yield root.name

        pending = self._pending_children(root, "")
        while pending:
            node, prefix, is_last = pending.pop()

            if node.is_dir:
                self.directory_count += 1
            elif self.show_files:
                self.file_count += 1

            connector = LAST_BRANCH if is_last else BRANCH
            yield f"{prefix}{connector}{node.name}"

            pending.extend(self._pending_children(node, prefix + (SPACE if is_last else VERTICAL)))

    @staticmethod
    def _pending_children(node: TreeNode, prefix: str) -> List[Tuple[TreeNode, str, bool]]:
        """Return the children of a node with their prefix, last one first, ready to be popped."""
        children = node.children
        last = len(children) - 1
        return [(child, prefix, index == last) for index, child in reversed(list(enumerate(children)))]

    def render(self, root: TreeNode, write: Optional[Callable[[str], object]] = None) -> TreeCounts:
        """Write the rendered tree line by line and return the final counts.

        Args:
            root: Root node of the tree to render.
            write: Callable receiving each line with a trailing newline. Defaults to
                ``sys.stdout.write``.

        Returns:
            The number of directories and files rendered, excluding the root.
        """
        if write is None:
            write = sys.stdout.write
        for line in self.stream_lines(root):
            write(line + "\n")
        return self.counts
