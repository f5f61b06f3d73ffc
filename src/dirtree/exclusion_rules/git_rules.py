"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules evaluated the way Git evaluates .gitignore files.

    Patterns are matched by the pathspec library against root-relative paths, so
    they may refer to whole routes (``docs/build/``) as well as names (``*.log``).
    Directory-only patterns ending in ``/`` match because directories are passed with
    a trailing slash. Later patterns override earlier ones, which makes negation
    (``!keep.log``) work across files.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("logs/keep.log")
        False
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, loading any files given.

        Args:
            rules_files: Path or sequence of paths to .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self._spec = GitIgnoreSpec.from_lines([])
        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self._spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths to read, in order.

        Raises:
            FileNotFoundError: If any rules file does not exist. Files read before the
                missing one are kept.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            self._extend(path.read_text(encoding="utf-8").splitlines())

    def add_rule(self, rule: str) -> None:
        self._extend([rule])

    def has_rules(self) -> bool:
        # Blank and comment lines compile to patterns that neither include nor exclude
        return any(pattern.include is not None for pattern in self._spec.patterns)

    def _extend(self, lines: Sequence[str]) -> None:
        # Recompile from the full line list so ordering and negation stay consistent
        self._spec = GitIgnoreSpec.from_lines(self._lines + list(lines))
        self._lines.extend(lines)
