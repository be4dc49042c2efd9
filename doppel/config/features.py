"""Module: doppel.config.features

Author: Michael Economou
Date: 2026-10-02

External tool settings used by the compare stage.
"""

# =====================================
# DIFF TOOL
# =====================================

DEFAULT_DIFF_TOOL = "diff"

# Column width passed to side-by-side diffs
SIDE_BY_SIDE_WIDTH = 120
