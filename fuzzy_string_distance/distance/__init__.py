"""
fuzzy_string_distance.distance — edit distance metrics.
"""

from __future__ import annotations

from . import Levenshtein, LocalLevenshtein  # noqa: F401

__all__ = [
    "Levenshtein",
    "LocalLevenshtein",
]
