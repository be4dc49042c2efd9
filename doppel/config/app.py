"""Module: doppel.config.app

Author: Michael Economou
Date: 2026-10-02

Application-level configuration: app info, logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "doppel"
APP_VERSION = "0.1.0"
APP_AUTHOR = "Michael Economou"

APP_DESCRIPTION = (
    "Scans a directory for files with similar names and provides an interactive "
    "interface to compare them using side-by-side diffs."
)

# =====================================
# LOGGING CONFIGURATION
# =====================================

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "WARNING"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 2_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 2

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
