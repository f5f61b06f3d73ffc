"""Directory tree listing with streaming output.

This module ties the pieces of a run together: the builder walks the filesystem once,
the renderer streams the tree line by line, and the summary reports the counts
gathered while rendering.
"""

from typing import Iterator, Optional

from dirtree.config import TreeConfig
from dirtree.file_system_tree.exclusion_tracker import ExclusionTracker
from dirtree.file_system_tree.tree_builder import TreeBuilder
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.file_system_tree.tree_renderer import TreeRenderer
from dirtree.summary import stream_summary


class StreamingDirTree:
    """Streaming directory tree listing for one run configuration.

    The tree is built by ``build`` or when ``stream_tree`` is first iterated. Lines
    are yielded as they are rendered, so output appears immediately and counts grow
    incrementally.

    Streaming properties:
    - The tree can only be streamed once
    - Counts reflect only the lines streamed so far until tree_complete is True

    Attributes:
        config (TreeConfig): The run configuration.

    Example:
        >>> listing = StreamingDirTree(TreeConfig("src"))  # doctest: +SKIP
        >>> for line in listing.stream_tree():  # doctest: +SKIP
        ...     print(line, end="")
        src
        └── dirtree
        >>> for line in listing.stream_summary():  # doctest: +SKIP
        ...     print(line, end="")
        <BLANKLINE>
        1 directories, 0 files

    Raises:
        FileNotFoundError: If the start path doesn't exist.
        NotADirectoryError: If the start path isn't a directory.
    """

    def __init__(self, config: TreeConfig, exclusion_tracker: Optional[ExclusionTracker] = None) -> None:
        """Initialize the listing, validating the start path up front.

        Args:
            config: The run configuration.
            exclusion_tracker: Tracker handed to the builder. A fresh one is created
                when omitted.

        Raises:
            FileNotFoundError: If the start path doesn't exist.
            NotADirectoryError: If the start path isn't a directory.
        """
        self.config = config
        self._builder = TreeBuilder(config, exclusion_tracker)
        self._renderer = TreeRenderer(show_files=config.show_files)
        self._root: Optional[TreeNode] = None
        self._built = False
        self._tree_started = False
        self._tree_complete = False

    @property
    def directory_count(self) -> int:
        """Number of directories streamed so far, excluding the root."""
        return self._renderer.directory_count

    @property
    def file_count(self) -> int:
        """Number of files streamed so far. Always 0 in directories-only mode."""
        return self._renderer.file_count

    @property
    def tree_complete(self) -> bool:
        return self._tree_complete

    def build(self) -> Optional[TreeNode]:
        """Walk the filesystem and build the tree, if that hasn't happened yet.

        Calling this before ``stream_tree`` separates the walk from the output, e.g.
        to install output-only signal handling once the walk is done.

        Returns:
            The root node, or None if the root itself produced no node.
        """
        if not self._built:
            self._root = self._builder.build()
            self._built = True
        return self._root

    def stream_tree(self) -> Iterator[str]:
        """Build the tree if needed and yield its rendered lines.

        Yields:
            Lines of the tree representation, each with a trailing newline.

        Raises:
            RuntimeError: If the tree has already been streamed.
        """
        if self._tree_started:
            raise RuntimeError("Tree has already been streamed")
        self._tree_started = True

        root = self.build()
        if root is not None:
            for line in self._renderer.stream_lines(root):
                yield line + "\n"

        self._tree_complete = True

    def stream_summary(self) -> Iterator[str]:
        """Yield a blank line and the summary line for the counts gathered so far."""
        yield from stream_summary(self.directory_count, self.file_count, self.config.directories_only)
