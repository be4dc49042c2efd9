"""Module: suffix_match.py

Author: Michael Economou
Date: 2026-10-02

Records produced while classifying suffix-pattern matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DateRule(Enum):
    """Heuristics that mark a numeric suffix as part of a date."""

    TRAILING_RESIDUAL_DIGITS = "trailing_residual_digits"  # "file-2026-01" left after "-30"
    SEQUENCE_COUNT = "sequence_count"  # three or more "-<digits>" segments
    LONG_NUMERIC_SEGMENT = "long_numeric_segment"  # a "-<digits>" segment reads as a year


@dataclass(frozen=True)
class SuffixMatch:
    """One file whose stem ends with a match of the suffix pattern.

    Attributes:
        file: Path as supplied by the caller
        stem: Filename without its final extension
        base_name: Stem with the matched suffix deleted
        date_rule: Heuristic that flagged the match as a date, or None

    """

    file: str
    stem: str
    base_name: str
    date_rule: DateRule | None = None

    @property
    def is_date_like(self) -> bool:
        """True when a date heuristic fired and the file must be dropped."""
        return self.date_rule is not None
