"""Module: file_group.py

Author: Michael Economou
Date: 2026-10-02

FileGroup model for a set of similarly named files.

Used for:
- Review sessions (list members, enumerate pairs to compare)
- Review window (group list and file pickers)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from itertools import combinations

from doppel.models.file_entry import base_filename


@dataclass
class FileGroup:
    """
    Represents two or more files whose names share a common prefix.

    Attributes:
        files: Member paths, in input order
        min_prefix_length: Prefix length the group was built with
    """

    files: list[str] = field(default_factory=list)
    min_prefix_length: int = 0

    @property
    def file_count(self) -> int:
        """Return the number of files in this group."""
        return len(self.files)

    @property
    def filenames(self) -> list[str]:
        """Return member base filenames, in member order."""
        return [base_filename(path) for path in self.files]

    @property
    def common_prefix(self) -> str:
        """Prefix shared by every member filename.

        Membership is transitive, so this can be shorter than min_prefix_length.
        """
        if not self.files:
            return ""
        return os.path.commonprefix(self.filenames)

    def pairs(self) -> list[tuple[str, str]]:
        """Return every unordered pair of members as (earlier, later) tuples."""
        return list(combinations(self.files, 2))

    def index_of(self, file_path: str) -> int:
        """Return the position of a member, or -1 if it is not in the group."""
        try:
            return self.files.index(file_path)
        except ValueError:
            return -1

    def __repr__(self) -> str:
        """Return string representation of FileGroup."""
        return (
            f"FileGroup(file_count={self.file_count}, "
            f"common_prefix={self.common_prefix!r}, "
            f"min_prefix_length={self.min_prefix_length})"
        )
