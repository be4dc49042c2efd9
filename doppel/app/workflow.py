"""Module: workflow.py

Author: Michael Economou
Date: 2026-10-02

Scan, filter and group: everything that happens before the review starts.

    files = scan_directory(directory)
    files = filter_files_by_suffix(files, suffix_pattern)   # when a pattern is set
    groups = group_files_by_prefix(files, min_prefix_length)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from doppel.app.options import ReviewOptions
from doppel.config import MIN_GROUP_SIZE
from doppel.core.errors import ScanError
from doppel.core.matching.prefix_clusterer import group_files_by_prefix
from doppel.core.matching.suffix_classifier import filter_files_by_suffix
from doppel.models.file_group import FileGroup
from doppel.utils.filesystem.directory_scanner import scan_directory
from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

NOT_ENOUGH_FILES_MESSAGE = "Not enough files found to compare (need at least 2)."
NO_GROUPS_MESSAGE = "No groups of similar files found."


@dataclass
class ReviewPlan:
    """Outcome of the scan, filter and group stages.

    Attributes:
        directory: Directory that was scanned
        scanned_count: Number of files found by the scan
        candidates: Files left after suffix filtering
        groups: Groups of similarly named files

    """

    directory: str
    scanned_count: int = 0
    candidates: list[str] = field(default_factory=list)
    groups: list[FileGroup] = field(default_factory=list)

    @property
    def has_enough_files(self) -> bool:
        """At least two candidates survived filtering."""
        return len(self.candidates) >= MIN_GROUP_SIZE

    @property
    def has_groups(self) -> bool:
        return bool(self.groups)

    @property
    def empty_message(self) -> str | None:
        """Message to show when there is nothing to review, else None."""
        if not self.has_enough_files:
            return NOT_ENOUGH_FILES_MESSAGE
        if not self.has_groups:
            return NO_GROUPS_MESSAGE
        return None


def build_review_plan(options: ReviewOptions) -> ReviewPlan:
    """Run the scan, filter and group stages for a directory.

    Args:
        options: Validated run options

    Returns:
        ReviewPlan with the groups to review

    Raises:
        ScanError: If the directory cannot be listed

    """
    try:
        files = scan_directory(options.directory)
    except NotADirectoryError as e:
        raise ScanError(f"{options.directory} is not a directory") from e
    except OSError as e:
        raise ScanError(f"failed to scan directory: {e}") from e

    plan = ReviewPlan(directory=options.directory, scanned_count=len(files))
    plan.candidates = list(filter_files_by_suffix(files, options.suffix_pattern))

    if options.suffix_pattern is not None:
        logger.info(
            "[Workflow] Suffix filter %r kept %d of %d files",
            options.suffix_pattern.pattern,
            len(plan.candidates),
            len(files),
        )

    if plan.has_enough_files:
        plan.groups = group_files_by_prefix(plan.candidates, options.min_prefix_length)

    logger.info(
        "[Workflow] %s: %d files scanned, %d groups found",
        options.directory,
        plan.scanned_count,
        len(plan.groups),
    )

    return plan
