"""doppel: find files whose names suggest they are variants of each other.

Author: Michael Economou
Date: 2026-10-02
"""

from doppel.config.app import APP_VERSION

__version__ = APP_VERSION
