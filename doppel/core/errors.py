"""Module: errors.py

Author: Michael Economou
Date: 2026-10-02

Exceptions raised at the boundaries of doppel.

The matching core itself never raises; these cover option validation,
directory scanning and the external diff tool.
"""


class DoppelError(Exception):
    """Base class for errors reported to the user."""


class InvalidOptionError(DoppelError):
    """Raised when a configuration value is out of range."""


class SuffixPatternError(DoppelError):
    """Raised when a suffix pattern does not compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"invalid suffix pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class ScanError(DoppelError):
    """Raised when a directory cannot be listed."""


class DiffError(DoppelError):
    """Raised when the diff tool cannot be executed or reports trouble."""
