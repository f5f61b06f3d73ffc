"""Unit tests for GitIgnoreExclusionRules."""

import pytest

from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def gitignore(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text("# comment\n*.pyc\nbuild/\n/docs/\n*.log\n!keep.log\n")
    return path


@pytest.mark.parametrize(
    "path,expected",
    [
        ("module.pyc", True),
        ("src/module.pyc", True),
        ("module.py", False),
        ("build/", True),
        ("src/build/", True),
        # A directory-only pattern doesn't match a file with the same name
        ("build", False),
        ("docs/", True),
        ("src/docs/", False),
        ("server.log", True),
        ("keep.log", False),
        ("logs/keep.log", False),
    ],
)
def test_exclude(gitignore, path, expected):
    rules = GitIgnoreExclusionRules(gitignore)
    assert rules.exclude(path) is expected


def test_load_multiple_files_in_order(tmp_path):
    first = tmp_path / "first.ignore"
    first.write_text("*.txt\n")
    second = tmp_path / "second.ignore"
    second.write_text("!important.txt\n")

    rules = GitIgnoreExclusionRules([first, second])
    assert rules.exclude("notes.txt")
    assert not rules.exclude("important.txt")


def test_missing_rules_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Rules file not found"):
        GitIgnoreExclusionRules(tmp_path / "missing.ignore")


def test_add_rule():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()

    rules.add_rule("*.tmp")
    assert rules.has_rules()
    assert rules.exclude("a/b/c.tmp")
    assert not rules.exclude("c.txt")


def test_comment_only_file_has_no_rules(tmp_path):
    path = tmp_path / "empty.ignore"
    path.write_text("# nothing here\n\n")
    assert not GitIgnoreExclusionRules(path).has_rules()
