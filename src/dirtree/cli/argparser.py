"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
import sys
from typing import Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.exceptions import InvalidPatternError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules


def non_negative_int(value: str) -> int:
    """Argument type for depth limits.

    Raises:
        argparse.ArgumentTypeError: If value is not an integer of at least 0.
    """
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: '{value}' (expected a non-negative integer)")
    if level < 0:
        raise argparse.ArgumentTypeError(f"invalid level: '{value}' (expected a non-negative integer)")
    return level


def create_exclusion_action(
    regex_rules: RegexExclusionRules, git_rules: GitIgnoreExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion options.

    The returned action updates the provided rule objects as arguments are processed.
    A regular expression that fails to compile is reported on stderr and dropped, so
    the remaining patterns still apply.

    Args:
        regex_rules: Rules receiving ``-I/--exclude`` patterns.
        git_rules: Rules receiving ``-e/--exclude-from`` files.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude-from"):
                git_rules.load_rules(str(values))
            else:  # -I/--exclude
                try:
                    regex_rules.add_rule(str(values))
                except InvalidPatternError as e:
                    print(f"Warning: {e}", file=sys.stderr)
                    return

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(regex_rules: RegexExclusionRules, git_rules: GitIgnoreExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        regex_rules: Rules object populated from ``-I/--exclude`` during parsing.
        git_rules: Rules object populated from ``-e/--exclude-from`` during parsing.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: list the contents of a directory as an indented tree.

    Entries are sorted by name (byte order) and drawn with box-drawing connectors,
    followed by a summary of how many directories and files were listed.
    Directories that cannot be read are shown without contents.
    """

    epilog = """
    Examples:
      # List the current directory
      dirtree

      # Show at most two levels below the root
      dirtree -L 2 /path/to/project

      # List directories only
      dirtree -d /path/to/project

      # Prune entries whose name matches a regular expression
      dirtree -I '^\\.git$' -I 'node_modules' -I '\\.pyc$' /path/to/project

      # Prune entries matched by .gitignore-style files
      dirtree -e .gitignore /path/to/project

      # Report directories that cannot be read
      dirtree -P warn /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(regex_rules, git_rules)

    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to list (default: current directory).",
    )
    parser.add_argument(
        "-L",
        "--max-depth",
        type=non_negative_int,
        metavar="LEVEL",
        help="Descend only LEVEL directories deep. 0 lists nothing below the root.",
    )
    parser.add_argument(
        "-d",
        "--directories-only",
        action="store_true",
        help="List directories only.",
    )
    parser.add_argument(
        "-I",
        "--exclude",
        metavar="PATTERN",
        dest="exclude",
        action=ExclusionAction,
        help=(
            "Exclude files and directories whose name contains a match for the regular expression "
            "PATTERN, along with everything beneath them. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        metavar="FILE",
        dest="exclude_from",
        action=ExclusionAction,
        help=(
            "Exclude entries matched by the gitignore-style patterns in FILE, evaluated against paths "
            "relative to the listed directory. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn"],
        default="ignore",
        help="How to report directories that cannot be read (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse handles.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If the directory argument is empty.
    """
    if not args.directory:
        raise ValueError("Directory argument must not be empty")
