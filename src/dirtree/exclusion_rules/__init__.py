"""Exclusion rules for pruning files and directories from the tree."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .regex_rules import RegexExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "RegexExclusionRules",
]
