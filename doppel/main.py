"""Module: main.py

Author: Michael Economou
Date: 2026-10-02

Command-line entry point for doppel.

Sets up logging, validates options, scans the directory, and hands the groups
of similar files to the terminal review session or the review window.

Functions:
    build_parser: Creates the argument parser.
    main: Runs doppel and returns the process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
from collections.abc import Sequence

from doppel.app.options import ReviewOptions
from doppel.app.workflow import build_review_plan
from doppel.config import APP_DESCRIPTION, APP_NAME, APP_VERSION, DEFAULT_MIN_PREFIX_LENGTH
from doppel.core.diff.diff_executor import DiffExecutor
from doppel.core.errors import DoppelError
from doppel.ui.review_session import ReviewSession, print_groups
from doppel.utils.logging.logger_factory import get_cached_logger
from doppel.utils.logging.logger_setup import ConfigureLogger, get_user_config_dir
from doppel.utils.shared.external_tools import resolve_diff_tool

logger = get_cached_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

# Options whose values are regexes that often start with "-"
PATTERN_OPTIONS = ("--suffix",)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        epilog="If no directory is specified, the current directory is used.",
    )
    parser.add_argument("directory", nargs="?", default=".", help="directory to scan")
    parser.add_argument(
        "--diff-tool",
        default="",
        metavar="CMD",
        help="override default diff command (default: 'diff')",
    )
    parser.add_argument(
        "--min-prefix",
        type=int,
        default=DEFAULT_MIN_PREFIX_LENGTH,
        metavar="N",
        help=f"minimum prefix length for grouping files (default: {DEFAULT_MIN_PREFIX_LENGTH})",
    )
    parser.add_argument(
        "--suffix",
        default="",
        metavar="REGEX",
        help=(
            "only consider files whose names match the indicated suffix pattern (regex), "
            "e.g. --suffix='-\\d{1,2}'"
        ),
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="review groups in a window")
    mode.add_argument("--list", action="store_true", help="print the groups and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug output")
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} version {APP_VERSION}"
    )
    return parser


def join_pattern_values(argv: Sequence[str]) -> list[str]:
    """Glue pattern options to their values ("--suffix", "-\\d+" -> "--suffix=-\\d+").

    argparse reads a separate value starting with "-" as another option, so
    "--suffix -\\d{1,2}" would otherwise fail to parse. Arguments after "--"
    are left alone.
    """
    joined: list[str] = []
    remaining = iter(argv)
    for arg in remaining:
        if arg == "--":
            joined.append(arg)
            joined.extend(remaining)
            break
        if arg in PATTERN_OPTIONS:
            value = next(remaining, None)
            joined.append(arg if value is None else f"{arg}={value}")
        else:
            joined.append(arg)
    return joined


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for doppel.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Process exit code

    """
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(join_pattern_values(argv))

    ConfigureLogger(
        log_name=APP_NAME,
        log_dir=os.path.join(get_user_config_dir(), "logs"),
        console_level=logging.DEBUG if args.verbose else None,
    )
    logger.debug(
        "Platform: %s %s, Python %s",
        platform.system(),
        platform.release(),
        platform.python_version(),
        extra={"dev_only": True},
    )

    try:
        options = ReviewOptions.from_user_input(
            directory=args.directory,
            min_prefix_length=args.min_prefix,
            suffix=args.suffix,
            diff_tool=args.diff_tool,
        )
        plan = build_review_plan(options)

        if plan.empty_message:
            print(plan.empty_message)
            return EXIT_OK

        if args.list:
            print_groups(plan.groups)
            return EXIT_OK

        try:
            diff_executor = DiffExecutor(resolve_diff_tool(options.diff_tool))
        except FileNotFoundError as e:
            logger.warning("%s Comparisons will fail.", e)
            diff_executor = DiffExecutor()

        if args.gui:
            from doppel.ui.dialogs.review_dialog import show_review_dialog

            show_review_dialog(plan.groups, diff_executor)
        else:
            ReviewSession(plan.groups, diff_executor).run()

    except DoppelError as e:
        logger.debug("Run failed: %s", e, exc_info=True, extra={"dev_only": True})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED

    return EXIT_OK
