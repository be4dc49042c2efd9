"""Module: suffix_classifier.py

Author: Michael Economou
Date: 2026-10-02

Narrows a file list to versioned copies and the files they were copied from.

Given a compiled suffix pattern (for example "-\\d{1,2}$"), a file is kept when:
- its stem ends with a pattern match that the date rules accept as a version
  ("document-2.txt"), or
- its stem equals the base name left over from such a match
  ("document.txt" once "document-2.txt" is accepted).

Matches that occur inside the stem but not at its end never count. The result
keeps input order and lists each path once.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from doppel.core.matching.date_rules import classify_date_rule
from doppel.models.file_entry import FileEntry
from doppel.models.suffix_match import SuffixMatch
from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def match_suffix(file_path: str, pattern: re.Pattern[str]) -> SuffixMatch | None:
    """Match a suffix pattern against the end of a file's stem.

    Args:
        file_path: Path of the file to test
        pattern: Compiled suffix pattern

    Returns:
        SuffixMatch with the date verdict, or None if the stem does not end
        with a match

    """
    stem = FileEntry.from_path(file_path).stem
    match = pattern.search(stem)
    if match is None or match.end() != len(stem):
        return None

    base_name = stem[: match.start()] + stem[match.end() :]
    return SuffixMatch(
        file=file_path,
        stem=stem,
        base_name=base_name,
        date_rule=classify_date_rule(stem, base_name),
    )


def classify_suffix_matches(files: Sequence[str], pattern: re.Pattern[str]) -> list[SuffixMatch]:
    """Return a SuffixMatch for every file whose stem ends with a pattern match."""
    matches = []
    for file_path in files:
        suffix_match = match_suffix(file_path, pattern)
        if suffix_match is not None:
            matches.append(suffix_match)
    return matches


def filter_files_by_suffix(
    files: Sequence[str], pattern: re.Pattern[str] | None
) -> Sequence[str]:
    """Keep version-suffixed files and their unsuffixed base files.

    Args:
        files: File paths, absolute or relative; duplicates allowed
        pattern: Compiled suffix pattern, or None to disable filtering

    Returns:
        The input unchanged when pattern is None, otherwise the kept paths
        in input order without duplicates

    """
    if pattern is None:
        return files

    accepted: set[str] = set()
    base_names: set[str] = set()

    for suffix_match in classify_suffix_matches(files, pattern):
        if suffix_match.is_date_like:
            logger.debug(
                "[SuffixClassifier] Skipping date-like suffix: %s (%s)",
                suffix_match.file,
                suffix_match.date_rule.value,
                extra={"dev_only": True},
            )
            continue
        accepted.add(suffix_match.file)
        base_names.add(suffix_match.base_name)

    result: list[str] = []
    included: set[str] = set()
    for file_path in files:
        if file_path in included:
            continue
        if file_path in accepted or FileEntry.from_path(file_path).stem in base_names:
            result.append(file_path)
            included.add(file_path)

    logger.debug(
        "[SuffixClassifier] Kept %d of %d files (%d versioned, pattern %r)",
        len(result),
        len(files),
        len(accepted),
        pattern.pattern,
        extra={"dev_only": True},
    )

    return result
