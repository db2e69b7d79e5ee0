"""
Utility Functions

Modules:
    fuzzy: Tiered fuzzy scoring, filtering, and common-prefix extension
"""

from jsonfs.utils.fuzzy import common_prefix, fuzzy_filter, normalize_name, score

__all__ = [
    "common_prefix",
    "fuzzy_filter",
    "normalize_name",
    "score",
]
