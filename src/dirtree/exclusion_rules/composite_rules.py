"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that combine several rule objects with a logical OR.

    The CLI uses this to evaluate regular expression rules (``-I``) and .gitignore
    rules (``-e``) together: an entry is pruned if any constituent excludes it.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rules, evaluated in order.

    Example:
        >>> from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("*.log")
        >>> composite = CompositeExclusionRules([RegexExclusionRules(["^tmp"]), git_rules])
        >>> composite.exclude("tmpfiles/")
        True
        >>> composite.exclude("app.log")
        True
        >>> composite.exclude("src/")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)
