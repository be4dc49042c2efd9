"""Data models for doppel.

This package contains:
- FileEntry: A path split into base filename, stem and extension
- FileGroup: A group of similarly named files for review
- SuffixMatch / DateRule: Outcome of classifying one suffix match
"""

from doppel.models.file_entry import FileEntry
from doppel.models.file_group import FileGroup
from doppel.models.suffix_match import DateRule, SuffixMatch

__all__ = ["DateRule", "FileEntry", "FileGroup", "SuffixMatch"]
