"""Unit tests for the TreeNode class."""

import pytest
from anytree import TreeError

from dirtree.file_system_tree.tree_node import TreeNode


def test_tree_node_initialization():
    """Test basic initialization of TreeNode."""
    file_node = TreeNode("notes.txt")
    assert file_node.name == "notes.txt"
    assert not file_node.is_dir
    assert file_node.children == ()

    dir_node = TreeNode("docs", is_dir=True)
    assert dir_node.name == "docs"
    assert dir_node.is_dir


def test_children_keep_attach_order():
    """Test that children appear in the order they were attached."""
    root = TreeNode("root", is_dir=True)
    names = ["b.txt", "a", "C"]
    for name in names:
        TreeNode(name, parent=root, is_dir=(name == "a"))

    assert [child.name for child in root.children] == names
    assert all(child.parent is root for child in root.children)


def test_attach_after_construction():
    root = TreeNode("root", is_dir=True)
    child = TreeNode("sub", is_dir=True)
    child.parent = root
    assert root.children == (child,)


def test_file_node_cannot_have_children():
    """Test that attaching anything beneath a file node is refused."""
    file_node = TreeNode("file.txt", is_dir=False)

    with pytest.raises(TreeError, match="file node"):
        TreeNode("child", parent=file_node)

    assert file_node.children == ()
