"""
fuzzy_string_distance.process — rank a collection of choices against a query.

Every scorer here is a distance, so lower is better: results are sorted in
ascending order and ``score_cutoff`` is the largest distance accepted.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

logger = logging.getLogger(__name__)


def _resolve_scorer(scorer: Callable[..., Any] | None) -> Callable[..., Any]:
    from .distance import LocalLevenshtein

    return scorer if scorer is not None else LocalLevenshtein.distance


def _iter_choices(choices: Iterable[Any] | Mapping[Any, Any]) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, choice)``; the key is the mapping key or the position."""
    if isinstance(choices, Mapping):
        yield from choices.items()
    else:
        yield from enumerate(choices)


def extract_iter(
    query: Any,
    choices: Iterable[Any] | Mapping[Any, Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> Iterator[tuple[Any, Any, Any]]:
    """Lazily yield ``(choice, distance, key)`` for every accepted choice,
    in input order. ``None`` choices are skipped.
    """
    _scorer = _resolve_scorer(scorer)
    processed_query = processor(query) if processor is not None else query

    for key, choice in _iter_choices(choices):
        if choice is None:
            continue
        processed_choice = processor(choice) if processor is not None else choice
        dist = _scorer(processed_query, processed_choice)
        if score_cutoff is None or dist <= score_cutoff:
            yield choice, dist, key


def extract(
    query: Any,
    choices: Iterable[Any] | Mapping[Any, Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    limit: int | None = 5,
    score_cutoff: float | None = None,
) -> list[tuple[Any, Any, Any]]:
    """Return the best matches from *choices* for *query*.

    Matches are ordered by ascending distance, ties keep their input order.
    ``limit=None`` returns every match passing ``score_cutoff``.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit!r}")

    ranked = (
        (dist, position, choice, key)
        for position, (choice, dist, key) in enumerate(
            extract_iter(
                query,
                choices,
                scorer=scorer,
                processor=processor,
                score_cutoff=score_cutoff,
            )
        )
    )
    best = sorted(ranked) if limit is None else heapq.nsmallest(limit, ranked)
    logger.debug("extract: %d match(es) for query %r", len(best), query)
    return [(choice, dist, key) for dist, _, choice, key in best]


def extractOne(
    query: Any,
    choices: Iterable[Any] | Mapping[Any, Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> tuple[Any, Any, Any] | None:
    """Return the single best match, or ``None`` when nothing passes
    ``score_cutoff``.
    """
    best = extract(
        query,
        choices,
        scorer=scorer,
        processor=processor,
        limit=1,
        score_cutoff=score_cutoff,
    )
    return best[0] if best else None


def cdist(
    queries: Iterable[Any],
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
    dtype: Any = None,
) -> Any:
    """Compute a pairwise distance matrix. Requires numpy.

    Row ``i`` holds the distances from ``queries[i]`` to every choice.
    ``score_cutoff`` is passed on to the scorer, so the metric functions
    report values past it the way they do on their own.
    """
    try:
        import numpy as np
    except ImportError as e:
        msg = "cdist requires numpy: pip install fuzzy-string-distance[all]"
        raise ImportError(msg) from e

    _scorer = _resolve_scorer(scorer)
    if processor is not None:
        queries = [processor(q) for q in queries]
        choices = [processor(c) for c in choices]
    else:
        queries = list(queries)
        choices = list(choices)

    kwargs: dict[str, Any] = {}
    if score_cutoff is not None:
        kwargs["score_cutoff"] = score_cutoff

    matrix = np.zeros(
        (len(queries), len(choices)), dtype=dtype if dtype is not None else np.float32
    )
    for i, q in enumerate(queries):
        for j, c in enumerate(choices):
            matrix[i, j] = _scorer(q, c, **kwargs)

    logger.debug("cdist: computed a %dx%d matrix", *matrix.shape)
    return matrix


__all__ = ["extract", "extractOne", "extract_iter", "cdist"]
