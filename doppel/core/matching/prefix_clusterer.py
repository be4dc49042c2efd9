"""Module: prefix_clusterer.py

Author: Michael Economou
Date: 2026-10-02

Groups files whose base filenames share a long enough common prefix.

Every pair of files is compared once; pairs whose filenames share at least
min_prefix_length leading characters are merged with a union-find, so group
membership is transitive.

Output is deterministic: groups are ordered by the input position of their
first member, and members keep input order.
"""

from __future__ import annotations

from collections.abc import Sequence

from doppel.config import DEFAULT_MIN_PREFIX_LENGTH, MIN_GROUP_SIZE
from doppel.core.matching.disjoint_set import DisjointSet
from doppel.models.file_entry import base_filename
from doppel.models.file_group import FileGroup
from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def common_prefix(first: str, second: str) -> str:
    """Return the longest common prefix of two strings.

    Examples:
        >>> common_prefix("document-1.txt", "document_copy.txt")
        'document'
        >>> common_prefix("doc", "document")
        'doc'

    """
    length = 0
    for first_char, second_char in zip(first, second):
        if first_char != second_char:
            break
        length += 1
    return first[:length]


def group_files_by_prefix(
    files: Sequence[str], min_prefix_length: int = DEFAULT_MIN_PREFIX_LENGTH
) -> list[FileGroup]:
    """Partition files into groups of similarly named files.

    Only the final path segment takes part in the comparison. Repeated paths
    count once. Groups with a single member are dropped.

    Args:
        files: File paths, absolute or relative
        min_prefix_length: Minimum shared prefix length, at least 1 (the
            caller validates it)

    Returns:
        List of FileGroup objects with two or more files each

    """
    paths = list(dict.fromkeys(files))
    if len(paths) < MIN_GROUP_SIZE:
        return []

    filenames = [base_filename(path) for path in paths]
    clusters = DisjointSet(len(paths))

    for i in range(len(filenames)):
        for j in range(i + 1, len(filenames)):
            if len(common_prefix(filenames[i], filenames[j])) >= min_prefix_length:
                clusters.union(i, j)

    # dict keeps first-seen order of roots, which is the input order of first members
    members_by_root: dict[int, list[str]] = {}
    for index, root in enumerate(clusters.roots()):
        members_by_root.setdefault(root, []).append(paths[index])

    groups = [
        FileGroup(files=members, min_prefix_length=min_prefix_length)
        for members in members_by_root.values()
        if len(members) >= MIN_GROUP_SIZE
    ]

    logger.debug(
        "[PrefixClusterer] Grouped %d files into %d groups (min prefix %d)",
        len(paths),
        len(groups),
        min_prefix_length,
        extra={"dev_only": True},
    )

    return groups
