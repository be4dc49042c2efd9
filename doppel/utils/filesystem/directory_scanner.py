"""Module: directory_scanner.py

Author: Michael Economou
Date: 2026-10-02

Lists the files of a single directory level for the matching stages.
"""

import os

from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def scan_directory(directory: str) -> list[str]:
    """Collect all non-directory entries of a directory (non-recursive).

    Entries are returned as paths joined onto the given directory, sorted by
    name. Symlinks are not followed, so a link to a directory is listed like
    a file.

    Args:
        directory: Directory to list

    Returns:
        List of file paths

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        OSError: If the directory cannot be read

    """
    with os.scandir(directory) as entries:
        names = sorted(entry.name for entry in entries if not entry.is_dir(follow_symlinks=False))

    files = [os.path.join(directory, name) for name in names]

    logger.debug(
        "[DirectoryScanner] Found %d files in %s",
        len(files),
        directory,
        extra={"dev_only": True},
    )

    return files
