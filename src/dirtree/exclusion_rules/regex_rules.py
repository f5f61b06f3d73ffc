"""Exclusion rules matching regular expressions against bare entry names."""

import re
from typing import List, Optional, Sequence

from dirtree.exceptions import InvalidPatternError

from .base_rules import BaseExclusionRules


class RegexExclusionRules(BaseExclusionRules):
    """Exclusion rules built from regular expressions.

    An entry is excluded when ANY pattern is found anywhere in its bare name. Matching
    uses ``re.search``, so patterns are unanchored: ``test`` excludes ``test``,
    ``tests`` and ``latest.txt`` alike. Use ``^`` and ``$`` to pin a full name.

    Only the last component of a path is considered, never the route leading to it.

    Attributes:
        patterns (List[str]): Source text of the compiled patterns, in insertion order.

    Example:
        >>> rules = RegexExclusionRules([r"\\.pyc$", "^node_modules$"])
        >>> rules.matches("cache.pyc")
        True
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("node_modules_backup/")
        False
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None) -> None:
        """Initialize the rules, compiling any patterns given.

        Args:
            patterns: Regular expressions to compile. Defaults to None (no rules).

        Raises:
            InvalidPatternError: If any pattern fails to compile.
        """
        self._compiled: List["re.Pattern[str]"] = []
        for pattern in patterns or []:
            self.add_rule(pattern)

    @property
    def patterns(self) -> List[str]:
        return [compiled.pattern for compiled in self._compiled]

    def add_rule(self, rule: str) -> None:
        """Compile a regular expression and add it to the rules.

        Args:
            rule: The regular expression to add.

        Raises:
            InvalidPatternError: If the expression does not compile. The rules are
                left unchanged.
        """
        try:
            compiled = re.compile(rule)
        except re.error as e:
            raise InvalidPatternError(rule, str(e)) from e
        self._compiled.append(compiled)

    def matches(self, entry_name: str) -> bool:
        """Check a bare entry name against every pattern.

        Args:
            entry_name: File or directory name without any leading path.

        Returns:
            True if any pattern is found in the name.
        """
        return any(compiled.search(entry_name) for compiled in self._compiled)

    def exclude(self, path: str) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        return self.matches(name)

    def has_rules(self) -> bool:
        return bool(self._compiled)
