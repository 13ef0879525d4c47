"""
fuzzy_string_distance._levenshtein — the edit distance engine.

Both the global and the local distance share one two-row recurrence and only
differ in how the first row is initialised and how the final row is read.
Strings are compared codepoint by codepoint, so a multi-codepoint grapheme
cluster (an emoji with modifiers, say) can count as several edits.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .utils import ascii_lower


def _last_row(
    source: Sequence[Any],
    target: Sequence[Any],
    first_row: list[int],
) -> list[int]:
    """Run the recurrence over every item of *source* and return the final row.

    ``first_row`` is row 0 of the logical matrix and must hold
    ``len(target) + 1`` entries. Only the previous and the current row are
    kept alive.
    """
    previous = first_row
    for i, source_item in enumerate(source, 1):
        current = [i]
        for j, target_item in enumerate(target):
            deletion = previous[j + 1] + 1
            insertion = current[j] + 1
            substitution = previous[j] + (source_item != target_item)
            current.append(min(deletion, insertion, substitution))
        previous = current
    return previous


def levenshtein_distance(source: Sequence[Any], target: Sequence[Any]) -> int:
    """Minimum number of single codepoint insertions, deletions or
    substitutions needed to turn *source* into *target*.

    A fuzzy ``==``: 0 means equal, ``max(len(source), len(target))`` means
    completely unrelated. The result is symmetric.
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    return _last_row(source, target, list(range(len(target) + 1)))[-1]


def levenshtein_distance_ignore_ascii_case(source: str, target: str) -> int:
    """Like :func:`levenshtein_distance`, ignoring ASCII case differences.

    Only ``A``-``Z`` are folded, every other codepoint compares as is.
    """
    return levenshtein_distance(ascii_lower(source), ascii_lower(target))


def local_levenshtein_distance(source: Sequence[Any], target: Sequence[Any]) -> int:
    """Minimum number of edits needed to turn *source* into any substring
    of *target*.

    A fuzzy ``in``: think of *source* as a search query and *target* as a
    longer item to search in. Skipping a prefix or a suffix of *target* is
    free, while every codepoint of *source* has to be accounted for, so the
    result lies between 0 and ``len(source)`` and is not symmetric::

        local_levenshtein_distance("long", "A long sentence")  # 0
        local_levenshtein_distance("A long sentence", "long")  # 11

    See "Fuzzy Substring Matching: On-device Fuzzy Friend Search at Snapchat"
    (arXiv:2211.02767).
    """
    if not source:
        # the empty substring matches anywhere
        return 0
    if not target:
        return len(source)

    # Row 0 is all zeros so a match can start anywhere in target, and taking
    # the minimum of the last row lets it end anywhere.
    return min(_last_row(source, target, [0] * (len(target) + 1)))


def local_levenshtein_distance_ignore_ascii_case(source: str, target: str) -> int:
    """Like :func:`local_levenshtein_distance`, ignoring ASCII case differences."""
    return local_levenshtein_distance(ascii_lower(source), ascii_lower(target))


__all__ = [
    "levenshtein_distance",
    "levenshtein_distance_ignore_ascii_case",
    "local_levenshtein_distance",
    "local_levenshtein_distance_ignore_ascii_case",
]
