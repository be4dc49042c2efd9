"""Name matching package.

- prefix_clusterer: group files whose names share a long enough prefix
- suffix_classifier: keep version-like suffixed files and their base files
- date_rules: heuristics telling date suffixes apart from version suffixes
"""

from doppel.core.matching.date_rules import DATE_RULES, classify_date_rule, is_likely_date
from doppel.core.matching.prefix_clusterer import common_prefix, group_files_by_prefix
from doppel.core.matching.suffix_classifier import (
    classify_suffix_matches,
    filter_files_by_suffix,
    match_suffix,
)

__all__ = [
    "DATE_RULES",
    "classify_date_rule",
    "classify_suffix_matches",
    "common_prefix",
    "filter_files_by_suffix",
    "group_files_by_prefix",
    "is_likely_date",
    "match_suffix",
]
