"""fuzzy_string_distance.distance.Levenshtein"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fuzzy_string_distance._levenshtein import levenshtein_distance


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Levenshtein distance between two strings.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    dist = levenshtein_distance(s1, s2)
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Levenshtein similarity, ``max(len(s1), len(s2)) - distance``.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    sim = max(len(s1), len(s2)) - levenshtein_distance(s1, s2)
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Levenshtein distance scaled to ``[0.0, 1.0]`` by the length
    of the longer string.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    maximum = max(len(s1), len(s2))
    norm_dist = levenshtein_distance(s1, s2) / maximum if maximum else 0.0
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
