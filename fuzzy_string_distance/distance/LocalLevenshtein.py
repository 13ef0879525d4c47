"""
fuzzy_string_distance.distance.LocalLevenshtein

Levenshtein distance from *s1* to the closest substring of *s2*. The metric
is asymmetric: *s1* is the query and its length bounds the distance, so the
similarity and the normalized variants are all relative to ``len(s1)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fuzzy_string_distance._levenshtein import local_levenshtein_distance


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the local Levenshtein distance of *s1* against *s2*.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    dist = local_levenshtein_distance(s1, s2)
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the local Levenshtein similarity, ``len(s1) - distance``.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    sim = len(s1) - local_levenshtein_distance(s1, s2)
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the local Levenshtein distance divided by ``len(s1)``.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    norm_dist = local_levenshtein_distance(s1, s2) / len(s1) if s1 else 0.0
    return norm_dist if score_cutoff is None or norm_dist <= score_cutoff else 1.0


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates ``1.0 - normalized_distance``.
    """
    norm_sim = 1.0 - normalized_distance(s1, s2, processor=processor)
    return norm_sim if score_cutoff is None or norm_sim >= score_cutoff else 0.0


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
