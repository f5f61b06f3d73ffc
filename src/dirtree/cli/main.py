"""Command-line interface for dirtree.

This module provides the command-line entry point, which lists a directory as an
indented tree followed by a summary of how many directories and files were shown.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`)
      on Unix-like systems
    - SIGINT: Ctrl+C stops the directory walk at once; while writing it is recorded
      and output stops cleanly. Either way the exit status is 130

Exit Codes:
    0: Successful completion, including listings where some directories were unreadable
    1: The directory does not exist, is not a directory, or another runtime error occurred
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List the current directory two levels deep, skipping version control data
    $ dirtree -L 2 -I '^\\.git$'
"""

import argparse
import sys
from typing import List, Optional, Sequence

from dirtree.cli.argparser import create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.config import TreeConfig
from dirtree.dirtree import StreamingDirTree
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
from dirtree.file_system_tree.permission_action import PermissionAction


def build_config(
    args: argparse.Namespace, regex_rules: RegexExclusionRules, git_rules: GitIgnoreExclusionRules
) -> TreeConfig:
    """Turn parsed arguments and the rules populated during parsing into a TreeConfig.

    Rule objects without any rules are left out, so an empty composite never runs.
    """
    active: List[BaseExclusionRules] = [rules for rules in (regex_rules, git_rules) if rules.has_rules()]
    exclusion_rules: Optional[BaseExclusionRules]
    if not active:
        exclusion_rules = None
    elif len(active) == 1:
        exclusion_rules = active[0]
    else:
        exclusion_rules = CompositeExclusionRules(active)

    return TreeConfig(
        start_path=args.directory,
        max_depth=args.max_depth,
        directories_only=args.directories_only,
        exclusion_rules=exclusion_rules,
        permission_action=PermissionAction(args.permission_action),
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dirtree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Invalid directory or runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    try:
        # Rule objects populated while the arguments are parsed
        regex_rules = RegexExclusionRules()
        git_rules = GitIgnoreExclusionRules()

        parser = create_parser(regex_rules, git_rules)
        args = parser.parse_args(argv)
        validate_args(args)

        listing = StreamingDirTree(build_config(args, regex_rules, git_rules))

        # Ctrl+C during the walk raises KeyboardInterrupt; the handlers only cover output
        listing.build()
        setup_signal_handling()

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                for line in listing.stream_tree():
                    safe_writer.write(line)
                for line in listing.stream_summary():
                    safe_writer.write(line)
            except BrokenPipeError:
                pass

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
