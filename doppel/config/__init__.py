"""Module: doppel.config

Author: Michael Economou
Date: 2026-10-02

Configuration package for doppel.

This package organizes configuration into logical modules:
- app: Application info, logging settings
- matching: Prefix clustering and suffix classification defaults
- features: External tools (diff command, output width)
- ui: Review window sizes and fonts

All settings are re-exported from this module:
    from doppel.config import APP_NAME, DEFAULT_MIN_PREFIX_LENGTH
"""

from doppel.config.app import *  # noqa: F401, F403
from doppel.config.features import *  # noqa: F401, F403
from doppel.config.matching import *  # noqa: F401, F403
from doppel.config.ui import *  # noqa: F401, F403
