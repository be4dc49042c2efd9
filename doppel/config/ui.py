"""Module: doppel.config.ui

Author: Michael Economou
Date: 2026-10-02

Review window settings.
"""

WINDOW_TITLE = "doppel - Similar Files"

REVIEW_WINDOW_MIN_WIDTH = 1000
REVIEW_WINDOW_MIN_HEIGHT = 600

# Initial width of the group list in the splitter
GROUP_PANEL_WIDTH = 320

DIFF_FONT_SIZE = 10
