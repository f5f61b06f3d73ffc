"""Unit tests for the TreeRenderer class."""

import io
import sys

import pytest

from dirtree.config import TreeConfig
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
from dirtree.file_system_tree.tree_builder import TreeBuilder
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.file_system_tree.tree_renderer import LAST_BRANCH, SPACE, TreeCounts, TreeRenderer


def make_tree(spec, name="root"):
    """Build a TreeNode tree from nested dicts; None marks a file."""
    root = TreeNode(name, is_dir=True)

    def add(parent, children):
        for child_name, grandchildren in children.items():
            node = TreeNode(child_name, parent=parent, is_dir=grandchildren is not None)
            if grandchildren:
                add(node, grandchildren)

    add(root, spec)
    return root


def test_sample_scenario():
    root = make_tree({"A": {"f.txt": None}, "g.txt": None}, name="X")
    renderer = TreeRenderer()

    assert list(renderer.stream_lines(root)) == ["X", "├── A", "│   └── f.txt", "└── g.txt"]
    assert renderer.counts == TreeCounts(directories=1, files=2)


def test_last_sibling_connectors_and_prefixes():
    root = make_tree(
        {
            "a": {"a1": None, "a2": None},
            "b": {"b1": None},
            "c": {"c1": None, "c2": None},
        }
    )

    assert list(TreeRenderer().stream_lines(root)) == [
        "root",
        "├── a",
        "│   ├── a1",
        "│   └── a2",
        "├── b",
        "│   └── b1",
        "└── c",
        "    ├── c1",
        "    └── c2",
    ]


def test_prefix_threads_through_several_levels():
    root = make_tree({"a": {"b": {"c": {"leaf": None}, "d": None}}, "z": None})

    assert list(TreeRenderer().stream_lines(root)) == [
        "root",
        "├── a",
        "│   └── b",
        "│       ├── c",
        "│       │   └── leaf",
        "│       └── d",
        "└── z",
    ]


def test_empty_tree_renders_root_only():
    renderer = TreeRenderer()
    assert list(renderer.stream_lines(TreeNode("empty", is_dir=True))) == ["empty"]
    assert renderer.counts == TreeCounts(0, 0)


def test_empty_directories_are_counted():
    root = make_tree({"a": {}, "b": {}})
    renderer = TreeRenderer()
    list(renderer.stream_lines(root))
    assert renderer.counts == TreeCounts(directories=2, files=0)


def test_files_not_counted_when_show_files_is_false():
    root = make_tree({"A": {"f.txt": None}, "g.txt": None})
    renderer = TreeRenderer(show_files=False)

    lines = list(renderer.stream_lines(root))

    # Rendering itself is unchanged; only the count is gated
    assert len(lines) == 4
    assert renderer.counts == TreeCounts(directories=1, files=0)


def test_counts_accumulate_while_streaming():
    root = make_tree({"a": {}, "b.txt": None, "c": {}})
    renderer = TreeRenderer()
    lines = renderer.stream_lines(root)

    next(lines)
    assert renderer.counts == TreeCounts(0, 0)
    next(lines)
    assert renderer.counts == TreeCounts(1, 0)
    next(lines)
    assert renderer.counts == TreeCounts(1, 1)
    list(lines)
    assert renderer.counts == TreeCounts(2, 1)


def test_counts_reset_between_renders():
    root = make_tree({"a": {}, "b.txt": None})
    renderer = TreeRenderer()
    list(renderer.stream_lines(root))
    list(renderer.stream_lines(root))
    assert renderer.counts == TreeCounts(1, 1)


def test_render_writes_each_line_with_newline():
    root = make_tree({"A": {"f.txt": None}, "g.txt": None}, name="X")
    output = io.StringIO()

    counts = TreeRenderer().render(root, output.write)

    assert output.getvalue() == "X\n├── A\n│   └── f.txt\n└── g.txt\n"
    assert counts == (1, 2)


def test_render_defaults_to_stdout(capsys):
    TreeRenderer().render(make_tree({"only.txt": None}, name="R"))
    assert capsys.readouterr().out == "R\n└── only.txt\n"


@pytest.mark.parametrize("directories_only", [False, True])
def test_line_count_matches_node_count(project_tree, directories_only):
    root = TreeBuilder(TreeConfig(project_tree, directories_only=directories_only)).build()
    renderer = TreeRenderer(show_files=not directories_only)

    lines = list(renderer.stream_lines(root))

    assert len(lines) - 1 == renderer.directory_count + renderer.file_count


def test_rendering_is_repeatable(project_tree):
    config = TreeConfig(project_tree, exclusion_rules=RegexExclusionRules([r"\.pyc$"]))
    first = list(TreeRenderer().stream_lines(TreeBuilder(config).build()))
    second = list(TreeRenderer().stream_lines(TreeBuilder(config).build()))
    assert first == second


def test_nesting_deeper_than_the_recursion_limit():
    depth = sys.getrecursionlimit() + 100
    root = node = TreeNode("root", is_dir=True)
    for _ in range(depth):
        node = TreeNode("a", parent=node, is_dir=True)
    TreeNode("bottom.txt", parent=node)
    renderer = TreeRenderer()

    lines = list(renderer.stream_lines(root))

    assert len(lines) == depth + 2
    assert lines[-1] == SPACE * depth + LAST_BRANCH + "bottom.txt"
    assert renderer.counts == TreeCounts(directories=depth, files=1)
