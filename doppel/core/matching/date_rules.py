"""Module: date_rules.py

Author: Michael Economou
Date: 2026-10-02

Heuristics that tell a date suffix apart from a version suffix.

A suffix pattern like "-\\d{1,2}" matches both "report-2" (a version) and the
"-30" of "report-2026-01-30" (a date). Each rule below looks at the full stem
and at the base name left after deleting the match. Rules run in order and
the first one that fires decides the verdict:

1. TRAILING_RESIDUAL_DIGITS: the base name still ends in "-<digits>"
   ("report-2026-01" after removing "-30").
2. SEQUENCE_COUNT: the stem holds DATE_SEQUENCE_THRESHOLD or more
   "-<digits>" segments.
3. LONG_NUMERIC_SEGMENT: some "-<digits>" segment has YEAR_MIN_DIGITS or more
   digits ("report-2024").

Nested versions such as "file-1-2" trip rule 1 and are treated as dates.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from doppel.config import DATE_SEQUENCE_THRESHOLD, YEAR_MIN_DIGITS
from doppel.models.suffix_match import DateRule

# ASCII digits only; filenames with other numerals are not dates
_TRAILING_HYPHEN_DIGITS = re.compile(r"-[0-9]+\Z")
_HYPHEN_DIGITS = re.compile(r"-([0-9]+)")


def has_trailing_residual_digits(stem: str, base_name: str) -> bool:
    """Base name left after removing the suffix still ends in "-<digits>"."""
    return _TRAILING_HYPHEN_DIGITS.search(base_name) is not None


def has_date_sequence(stem: str, base_name: str) -> bool:
    """Stem holds enough "-<digits>" segments to read as year-month-day."""
    return len(_HYPHEN_DIGITS.findall(stem)) >= DATE_SEQUENCE_THRESHOLD


def has_long_numeric_segment(stem: str, base_name: str) -> bool:
    """Stem holds a "-<digits>" segment long enough to be a year."""
    return any(len(digits) >= YEAR_MIN_DIGITS for digits in _HYPHEN_DIGITS.findall(stem))


DATE_RULES: tuple[tuple[DateRule, Callable[[str, str], bool]], ...] = (
    (DateRule.TRAILING_RESIDUAL_DIGITS, has_trailing_residual_digits),
    (DateRule.SEQUENCE_COUNT, has_date_sequence),
    (DateRule.LONG_NUMERIC_SEGMENT, has_long_numeric_segment),
)


def classify_date_rule(stem: str, base_name: str) -> DateRule | None:
    """Return the first date rule that fires for a suffix match, or None.

    Args:
        stem: Filename without its final extension
        base_name: Stem with the matched suffix deleted

    Returns:
        The DateRule that marks the match as a date, or None for a version

    Examples:
        >>> classify_date_rule("file-2026-01-30", "file-2026-01")
        <DateRule.TRAILING_RESIDUAL_DIGITS: 'trailing_residual_digits'>
        >>> classify_date_rule("file-2024", "file")
        <DateRule.LONG_NUMERIC_SEGMENT: 'long_numeric_segment'>
        >>> classify_date_rule("file-1", "file") is None
        True

    """
    for rule, check in DATE_RULES:
        if check(stem, base_name):
            return rule
    return None


def is_likely_date(stem: str, base_name: str) -> bool:
    """True when the suffix removed from stem looks like part of a date."""
    return classify_date_rule(stem, base_name) is not None
