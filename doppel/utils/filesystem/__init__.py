"""Filesystem utilities package.

Directory listing for the matching stages.
"""

from doppel.utils.filesystem.directory_scanner import scan_directory

__all__ = [
    "scan_directory",
]
