from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Implementations decide whether an entry discovered during the tree walk should be
    pruned. An excluded entry produces no node and none of its descendants are visited.

    Paths handed to ``exclude`` are relative to the root being listed, use forward
    slashes as separators, and carry a trailing slash when the entry is a directory.
    Rules that only care about the entry's bare name (such as regular expression rules)
    derive it from the last path component.

    Example:
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules(["^build$"])
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/builder.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Root-relative path of the entry, with a trailing slash for
                directories.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types without file support use this default, which raises.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return True if at least one rule is configured."""
        return True
