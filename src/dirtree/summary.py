"""Formatting of the trailing summary line."""

from typing import Iterator


def format_summary(directory_count: int, file_count: int, directories_only: bool) -> str:
    """Format the directory and file counts as the summary line.

    The words are used as-is regardless of the count.

    Args:
        directory_count: Number of directories listed, excluding the root.
        file_count: Number of files listed.
        directories_only: Whether the run listed directories only, in which case the
            file count is omitted.

    Returns:
        The summary line without a trailing newline.

    Example:
        >>> format_summary(1, 2, False)
        '1 directories, 2 files'
        >>> format_summary(3, 0, True)
        '3 directories'
    """
    if directories_only:
        return f"{directory_count} directories"
    return f"{directory_count} directories, {file_count} files"


def stream_summary(directory_count: int, file_count: int, directories_only: bool) -> Iterator[str]:
    """Yield a blank line followed by the summary line, each newline-terminated."""
    yield "\n"
    yield format_summary(directory_count, file_count, directories_only) + "\n"
