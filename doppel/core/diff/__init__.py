"""Compare stage: run an external diff program on two files."""

from doppel.core.diff.diff_executor import DiffExecutor

__all__ = ["DiffExecutor"]
