"""Node representation for entries in the directory tree."""

from typing import Any, Optional

from anytree import Node, TreeError


class TreeNode(Node):  # type: ignore
    """Node class representing a directory or file in the tree.

    Extends anytree.Node with a flag telling directories from files. Children are
    owned by exactly one parent and kept in the order they were attached, which the
    builder guarantees is sorted listing order.

    A file node never has children; attaching one raises ``anytree.TreeError``.

    Attributes:
        name (str): The display label. The start path as given for the root node,
            the bare entry name for every other node.
        parent (Optional[TreeNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("project", is_dir=True)
        >>> readme = TreeNode("README.md", parent=root)
        >>> [child.name for child in root.children]
        ['README.md']
        >>> readme.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The display label of the node.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        # Set before attaching so _pre_attach on children can rely on it
        self.is_dir = is_dir
        super().__init__(name, parent, **kwargs)

    def _pre_attach(self, parent: "TreeNode") -> None:
        if not getattr(parent, "is_dir", True):
            raise TreeError(f"Cannot attach '{self.name}' to file node '{parent.name}'")
