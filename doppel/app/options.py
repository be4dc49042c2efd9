"""Module: options.py

Author: Michael Economou
Date: 2026-10-02

Validated run options.

User input is checked here, before any matching runs: the minimum prefix
length must be positive and the suffix pattern must compile. Suffix patterns
are anchored to the end of the stem by appending SUFFIX_PATTERN_ANCHOR when
the user left it out, and compiled with re.ASCII so "\\d" means [0-9] as it
does in the date rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from doppel.config import DEFAULT_MIN_PREFIX_LENGTH, SUFFIX_PATTERN_ANCHOR
from doppel.core.errors import InvalidOptionError, SuffixPatternError


def validate_min_prefix_length(value: int) -> int:
    """Return value if it is a usable minimum prefix length.

    Raises:
        InvalidOptionError: If value is below 1

    """
    if value < 1:
        raise InvalidOptionError("min-prefix must be at least 1")
    return value


def anchor_suffix_pattern(pattern: str) -> str:
    """Append the end anchor unless the pattern already ends with it."""
    if pattern.endswith(SUFFIX_PATTERN_ANCHOR):
        return pattern
    return pattern + SUFFIX_PATTERN_ANCHOR


def compile_suffix_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile a user suffix pattern, anchored at the end.

    Args:
        pattern: Regular expression text, or None/"" for no filtering

    Returns:
        Compiled pattern, or None when no pattern was given

    Raises:
        SuffixPatternError: If the pattern does not compile

    """
    if not pattern:
        return None
    try:
        return re.compile(anchor_suffix_pattern(pattern), re.ASCII)
    except re.error as e:
        raise SuffixPatternError(pattern, str(e)) from e


@dataclass(frozen=True)
class ReviewOptions:
    """Everything a run needs, already validated.

    Attributes:
        directory: Directory to scan
        min_prefix_length: Minimum shared filename prefix for grouping
        suffix_pattern: Compiled suffix pattern, or None
        diff_tool: Diff command override, or None for the default

    """

    directory: str = "."
    min_prefix_length: int = DEFAULT_MIN_PREFIX_LENGTH
    suffix_pattern: re.Pattern[str] | None = None
    diff_tool: str | None = None

    @classmethod
    def from_user_input(
        cls,
        directory: str = ".",
        min_prefix_length: int = DEFAULT_MIN_PREFIX_LENGTH,
        suffix: str | None = None,
        diff_tool: str | None = None,
    ) -> ReviewOptions:
        """Validate raw values and build options.

        Raises:
            InvalidOptionError: If min_prefix_length is below 1
            SuffixPatternError: If suffix does not compile

        """
        return cls(
            directory=directory,
            min_prefix_length=validate_min_prefix_length(min_prefix_length),
            suffix_pattern=compile_suffix_pattern(suffix),
            diff_tool=diff_tool or None,
        )
