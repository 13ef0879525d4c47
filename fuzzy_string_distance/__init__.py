"""
fuzzy_string_distance — fuzzy string comparisons using Levenshtein distance.

Plain string comparison is very sensitive to typos. The Levenshtein distance
gives the minimum number of single character edits (insertions, deletions or
substitutions) needed to turn one string into the other, a sliding scale
between 0 (identical) and the length of the longer string (unrelated)::

    >>> from fuzzy_string_distance import levenshtein_distance
    >>> levenshtein_distance("rust", "rusty")  # insert y
    1
    >>> levenshtein_distance("bug", "")  # delete all characters
    3
    >>> levenshtein_distance("typography", "typpgrapy")  # fix both typos
    2
"""

from __future__ import annotations

import logging

from . import distance, process, utils
from ._levenshtein import (
    levenshtein_distance,
    levenshtein_distance_ignore_ascii_case,
    local_levenshtein_distance,
    local_levenshtein_distance_ignore_ascii_case,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"

__all__ = [
    "distance",
    "process",
    "utils",
    "levenshtein_distance",
    "levenshtein_distance_ignore_ascii_case",
    "local_levenshtein_distance",
    "local_levenshtein_distance_ignore_ascii_case",
    "__version__",
]
