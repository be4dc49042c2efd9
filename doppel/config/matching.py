"""Module: doppel.config.matching

Author: Michael Economou
Date: 2026-10-02

Defaults for name-similarity clustering and suffix classification.
"""

# =====================================
# PREFIX CLUSTERING
# =====================================

# Minimum number of leading characters two filenames must share to be grouped
DEFAULT_MIN_PREFIX_LENGTH = 3

# Smallest group worth reviewing (singletons are dropped)
MIN_GROUP_SIZE = 2

# =====================================
# SUFFIX CLASSIFICATION
# =====================================

# Appended to user suffix patterns that are not already end-anchored
SUFFIX_PATTERN_ANCHOR = "$"

# A stem with this many "-<digits>" segments reads as year-month-day
DATE_SEQUENCE_THRESHOLD = 3

# A "-<digits>" segment with at least this many digits reads as a year
YEAR_MIN_DIGITS = 4
