"""Test configuration and fixtures for dirtree."""

import sys

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session):
    """Let pytest's tmp_path cleanup remove trees nested deeper than the default recursion limit."""
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 20000))


@pytest.fixture
def sample_tree(tmp_path):
    """Create the tree X/{A/f.txt, g.txt} and return the path of X."""
    root = tmp_path / "X"
    root.mkdir()
    (root / "A").mkdir()
    (root / "A" / "f.txt").write_text("f")
    (root / "g.txt").write_text("g")
    return root


@pytest.fixture
def project_tree(tmp_path):
    """Create a small project layout with nested directories and assorted files."""
    root = tmp_path / "project"
    (root / "src" / "pkg" / "sub").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "node_modules" / "lodash").mkdir(parents=True)
    (root / "build").mkdir()

    (root / "README.md").write_text("# Project\n")
    (root / "setup.cfg").write_text("[metadata]\n")
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "main.pyc").write_bytes(b"\x00")
    (root / "src" / "pkg" / "__init__.py").write_text("")
    (root / "src" / "pkg" / "sub" / "deep.py").write_text("")
    (root / "docs" / "index.md").write_text("")
    (root / "node_modules" / "lodash" / "index.js").write_text("")
    (root / "build" / "out.bin").write_bytes(b"\x01")
    return root
