"""Record of paths pruned by exclusion rules during one tree build."""

import os
from pathlib import Path
from typing import Set

from dirtree.types import PathType


class ExclusionTracker:
    """Set of absolute paths excluded while their parent directory was scanned.

    Exclusion normally prunes an entry by never creating its node, so nothing beneath
    it is visited. The tracker is the safety net for a directory reached through a
    second route: before descending, the builder asks whether the path lies beneath
    something already excluded.

    A tracker belongs to a single build pass and only grows.

    Example:
        >>> tracker = ExclusionTracker()
        >>> tracker.record("/srv/app/node_modules")
        >>> tracker.is_under_excluded("/srv/app/node_modules/lodash")
        True
        >>> tracker.is_under_excluded("/srv/app/node_modules")
        False
    """

    def __init__(self) -> None:
        self._excluded: Set[Path] = set()

    def record(self, path: PathType) -> None:
        """Add a path to the exclusion set.

        Args:
            path: Path of the excluded entry. Relative paths are made absolute
                against the current working directory.
        """
        self._excluded.add(self._normalize(path))

    def is_under_excluded(self, path: PathType) -> bool:
        """Check whether a path is a strict descendant of any recorded path.

        Args:
            path: Path to check.

        Returns:
            True if some ancestor of ``path`` was recorded. A recorded path itself
            is not considered to be under an excluded path.
        """
        if not self._excluded:
            return False
        return any(parent in self._excluded for parent in self._normalize(path).parents)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self._normalize(path) in self._excluded

    def __len__(self) -> int:
        return len(self._excluded)

    @staticmethod
    def _normalize(path: PathType) -> Path:
        return Path(os.path.abspath(path))
