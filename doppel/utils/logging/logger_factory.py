"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-02

Cached access to doppel's module loggers.

get_logger patches the logging methods of each logger it returns; the cache
makes that happen once per name, even when several threads ask at once.
"""

import inspect
import logging
import threading

from doppel.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger cache keyed by logger name."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name; defaults to the caller's module name

        Returns:
            logging.Logger: Cached logger instance
        """
        if name is None:
            frame = inspect.currentframe().f_back
            name = frame.f_globals.get("__name__", "unknown")

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)
            return cls._loggers[name]


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Return the cached logger for name (usually the caller's __name__)."""
    return LoggerFactory.get_logger(name)
