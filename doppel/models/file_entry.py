"""Module: file_entry.py

Author: Michael Economou
Date: 2026-10-02

Immutable view of a caller-supplied file path.

FileEntry splits a path into the pieces the matchers work on:
- filename: the final path segment
- stem: the filename with its final extension removed
- extension: everything from the last "." of the filename onward ("" if none)

No filesystem access happens here; the path does not need to exist.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_SEPARATORS = os.sep + (os.altsep or "")


def base_filename(path: str) -> str:
    """Return the final segment of a path, ignoring trailing separators."""
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        return path
    return os.path.basename(stripped)


def split_extension(filename: str) -> tuple[str, str]:
    """Split a filename at its last dot.

    Unlike os.path.splitext, a leading dot counts: ".profile" has an empty
    stem and the extension ".profile".

    Returns:
        Tuple of (stem, extension)

    """
    dot = filename.rfind(".")
    if dot == -1:
        return filename, ""
    return filename[:dot], filename[dot:]


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A path plus its filename, stem and extension."""

    full_path: str
    filename: str
    stem: str
    extension: str

    @classmethod
    def from_path(cls, file_path: str) -> FileEntry:
        """Create a FileEntry from a path string.

        Args:
            file_path: Absolute or relative path, as supplied by the caller

        Returns:
            FileEntry instance

        """
        filename = base_filename(file_path)
        stem, extension = split_extension(filename)
        return cls(full_path=file_path, filename=filename, stem=stem, extension=extension)

    def __str__(self) -> str:
        return self.full_path
