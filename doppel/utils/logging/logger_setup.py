"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-02

This module provides the ConfigureLogger class for setting up logging in the application.
The root logger is configured to log to the console (WARNING and higher by default,
dev-only records hidden) and, optionally, to rotating session files under the user
config directory.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from doppel.config import (
    APP_NAME,
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from doppel.utils.logging.logger_file_helper import add_file_handler
from doppel.utils.logging.logger_helper import DevOnlyFilter

CONSOLE_LOG_FORMAT = "[%(levelname)s] %(message)s"


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Get user configuration directory based on OS."""
    if os.name == "nt":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(base_dir, app_name)


class ConfigureLogger:
    """
    Configures application-wide logging on the root logger.

    Logs to the console at the configured console level, and to timestamped
    rotating files when file logging is enabled and a log directory is given.
    """

    def __init__(
        self,
        log_name: str = APP_NAME,
        log_dir: str | None = None,
        console_level: int | None = None,
        file_level: int | None = None,
        log_to_file: bool = LOG_TO_FILE,
    ):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files. Files are skipped when None.
            console_level (int): Console level; defaults to LOG_CONSOLE_LEVEL.
            file_level (int): File level; defaults to LOG_FILE_LEVEL.
            log_to_file (bool): Whether to write session log files at all.
        """
        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.WARNING)
        if file_level is None:
            file_level = getattr(logging, LOG_FILE_LEVEL, logging.INFO)

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_file_path: str | None = None

        if self.logger.hasHandlers():
            return

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if log_to_file and log_dir:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            try:
                add_file_handler(
                    logger=self.logger,
                    log_path=self.log_file_path,
                    level=file_level,
                    max_bytes=LOG_FILE_MAX_BYTES,
                    backup_count=LOG_FILE_BACKUP_COUNT,
                )
                if LOG_DEBUG_FILE_ENABLED:
                    add_file_handler(
                        logger=self.logger,
                        log_path=os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                        level=logging.DEBUG,
                        max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                        backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                    )
            except OSError as e:
                # A read-only home directory must not stop the tool from running
                self.log_file_path = None
                self.logger.warning("Could not open log file in %s: %s", log_dir, e)

    def _setup_console_handler(self, level: int) -> None:
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
        self.logger.addHandler(console_handler)
