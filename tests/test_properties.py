"""Property-based tests for fuzzy_string_distance using Hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from fuzzy_string_distance import (
    levenshtein_distance,
    levenshtein_distance_ignore_ascii_case,
    local_levenshtein_distance,
    local_levenshtein_distance_ignore_ascii_case,
)
from fuzzy_string_distance.distance import Levenshtein, LocalLevenshtein

# Small alphabet so that matches actually happen.
short_text = st.text(alphabet="abcAB é🧑", max_size=7)


def full_matrix_distance(a: str, b: str) -> int:
    """Textbook Wagner-Fischer with the whole matrix kept in memory."""
    d = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        d[i][0] = i
    for j in range(len(b) + 1):
        d[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost)
    return d[len(a)][len(b)]


def fold_ascii(s: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in s)


# ---------------------------------------------------------------------------
# Global distance
# ---------------------------------------------------------------------------

@given(st.text())
def test_distance_identity(s: str) -> None:
    assert levenshtein_distance(s, s) == 0


@given(st.text(), st.text())
def test_distance_symmetry(s1: str, s2: str) -> None:
    assert levenshtein_distance(s1, s2) == levenshtein_distance(s2, s1)


@given(st.text(), st.text())
def test_distance_bounds(s1: str, s2: str) -> None:
    dist = levenshtein_distance(s1, s2)
    assert abs(len(s1) - len(s2)) <= dist <= max(len(s1), len(s2))
    assert dist <= len(s1) + len(s2)


@given(short_text, short_text)
def test_distance_matches_full_matrix(s1: str, s2: str) -> None:
    assert levenshtein_distance(s1, s2) == full_matrix_distance(s1, s2)


@given(short_text, short_text, short_text)
def test_distance_triangle_inequality(s1: str, s2: str, s3: str) -> None:
    assert levenshtein_distance(s1, s3) <= levenshtein_distance(
        s1, s2
    ) + levenshtein_distance(s2, s3)


@given(st.text(), st.text())
def test_ignore_ascii_case_folds_ascii_only(s1: str, s2: str) -> None:
    assert levenshtein_distance_ignore_ascii_case(s1, s2) == levenshtein_distance(
        fold_ascii(s1), fold_ascii(s2)
    )


# ---------------------------------------------------------------------------
# Local distance
# ---------------------------------------------------------------------------

@given(st.text())
def test_local_empty_source(t: str) -> None:
    assert local_levenshtein_distance("", t) == 0


@given(st.text(min_size=1))
def test_local_empty_target(s: str) -> None:
    assert local_levenshtein_distance(s, "") == len(s)


@given(st.text(min_size=1), st.text(), st.text())
def test_local_trivial_match(s: str, prefix: str, suffix: str) -> None:
    assert local_levenshtein_distance(s, prefix + s + suffix) == 0


@given(st.text(), st.text())
def test_local_bounds(s1: str, s2: str) -> None:
    dist = local_levenshtein_distance(s1, s2)
    assert 0 <= dist <= len(s1)
    assert dist <= levenshtein_distance(s1, s2)


@given(short_text, short_text)
def test_local_is_best_substring_distance(s1: str, s2: str) -> None:
    substrings = {s2[i:j] for i in range(len(s2) + 1) for j in range(i, len(s2) + 1)}
    assert local_levenshtein_distance(s1, s2) == min(
        full_matrix_distance(s1, sub) for sub in substrings
    )


@given(st.text(), st.text())
def test_local_ignore_ascii_case_folds_ascii_only(s1: str, s2: str) -> None:
    assert local_levenshtein_distance_ignore_ascii_case(
        s1, s2
    ) == local_levenshtein_distance(fold_ascii(s1), fold_ascii(s2))


# ---------------------------------------------------------------------------
# Metric modules
# ---------------------------------------------------------------------------

METRICS = [Levenshtein, LocalLevenshtein]


@given(st.text())
def test_metric_identity(s: str) -> None:
    for metric in METRICS:
        assert metric.distance(s, s) == 0
        assert metric.normalized_distance(s, s) == 0.0
        assert metric.normalized_similarity(s, s) == 1.0


@given(st.text(), st.text())
def test_metric_normalized_bounds(s1: str, s2: str) -> None:
    for metric in METRICS:
        assert 0.0 <= metric.normalized_distance(s1, s2) <= 1.0
        assert 0.0 <= metric.normalized_similarity(s1, s2) <= 1.0
        assert metric.similarity(s1, s2) >= 0
