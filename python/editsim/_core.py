"""Core distance and similarity kernels.

Everything in the package funnels through this module:

- ``damerau_levenshtein``: exact optimal-string-alignment distance
  (insertions, deletions, substitutions and adjacent transpositions).
- ``distance_estimate``: an order-blind lower bound on that distance,
  computed from sorted copies of the operands without a DP table.
- ``similarity`` / ``similarity_estimate``: distances normalized to [0, 1].
- ``similarity_bounded``: the threshold gate. The estimate is turned into an
  upper bound on similarity, and pairs that cannot reach ``min_similarity``
  are rejected before the quadratic table is ever built.

All functions are pure and hold no state between calls, so they can be called
from any number of threads on independent inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from editsim._utils import ModeLike, prepare_pair
from editsim.enums import ComparisonMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """A scored candidate returned by batch and index searches.

    Attributes:
        text: The candidate as it was supplied.
        score: Similarity of the query against the candidate (0.0 to 1.0).
        id: Position of the candidate in its input list or index.
    """

    text: str
    score: float
    id: int


# -----------------------------------------------------------------------------
# Exact distance
# -----------------------------------------------------------------------------


def _osa_distance(source: Sequence, target: Sequence) -> int:
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    # The recurrence is symmetric, so rows can always be sized by the shorter operand.
    if len(source) < len(target):
        source, target = target, source

    width = len(target) + 1
    two_back = [0] * width
    prev = list(range(width))
    cur = [0] * width

    for i in range(1, len(source) + 1):
        s_char = source[i - 1]
        cur[0] = i
        for j in range(1, width):
            t_char = target[j - 1]
            cost = 0 if s_char == t_char else 1
            best = min(cur[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost)
            if (
                i > 1
                and j > 1
                and s_char == target[j - 2]
                and source[i - 2] == t_char
            ):
                best = min(best, two_back[j - 2] + cost)
            cur[j] = best
        two_back, prev, cur = prev, cur, two_back

    return prev[-1]


def damerau_levenshtein(
    a: Sequence,
    b: Sequence,
    mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
) -> int:
    """
    Compute Damerau-Levenshtein distance (optimal string alignment variant).

    Counts insertions, deletions, substitutions and swaps of two adjacent
    characters, each as a single edit. A swapped pair may not be edited
    again, which is what distinguishes this from the unrestricted variant.

    Args:
        a: First sequence (str, bytes, or a sequence of comparable units)
        b: Second sequence, of the same kind as ``a``
        mode: Case handling (ComparisonMode, its string value, or a bool
            meaning "ignore case")

    Returns:
        The number of edits needed to turn ``a`` into ``b``.

    Raises:
        ValidationError: If an operand is not a sequence, or ``str`` is
            mixed with ``bytes``.

    Complexity:
        Time: O(m*n) where m, n are sequence lengths.
        Space: O(min(m, n)), three rolling rows.

    Example:
        >>> damerau_levenshtein("computer", "comupter")
        1
        >>> damerau_levenshtein("cars", "BaTS", mode="case_insensitive")
        2
    """
    source, target = prepare_pair(a, b, mode)
    return _osa_distance(source, target)


def damerau_levenshtein_ci(a: Sequence, b: Sequence) -> int:
    """Case-insensitive Damerau-Levenshtein distance. Equivalent to damerau_levenshtein(a, b, mode="case_insensitive")."""
    return damerau_levenshtein(a, b, ComparisonMode.CASE_INSENSITIVE)


# -----------------------------------------------------------------------------
# Distance estimate
# -----------------------------------------------------------------------------


def _estimate(source: Sequence, target: Sequence) -> float:
    if source == target:
        return 0.0

    left = sorted(source)
    right = sorted(target)
    i = j = 0
    mismatches = 0
    while i < len(left) and j < len(right):
        if left[i] == right[j]:
            i += 1
            j += 1
        elif left[i] < right[j]:
            i += 1
            mismatches += 1
        else:
            j += 1
            mismatches += 1
    mismatches += (len(left) - i) + (len(right) - j)

    # A substitution shows up once on each side of the walk, hence the halving.
    # Plain insertions and deletions end up undercounted, which keeps this a lower bound.
    return mismatches / 2.0


def distance_estimate(
    a: Sequence,
    b: Sequence,
    mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
) -> float:
    """
    Cheap lower bound on ``damerau_levenshtein(a, b)``.

    Compares the operands as multisets: half the size of their symmetric
    difference. Element order is ignored, so the result never exceeds the
    exact distance. Only useful for rejecting pairs early; never report it
    as a distance.

    Complexity:
        Time: O((m + n) log(m + n)) for the two sorts.

    Example:
        >>> distance_estimate("abc", "abbc")
        0.5
        >>> distance_estimate("abc", "cba")
        0.0
    """
    source, target = prepare_pair(a, b, mode)
    return _estimate(source, target)


# -----------------------------------------------------------------------------
# Similarity
# -----------------------------------------------------------------------------


def _score(source: Sequence, target: Sequence, distance: int) -> float:
    if source == target:
        return 1.0
    score = (len(target) - distance) / max(len(source), len(target))
    return score if score > 0 else 0.0


def _score_estimate(source: Sequence, target: Sequence) -> float:
    if source == target:
        return 1.0
    if not target:
        return 0.0
    score = (len(target) - _estimate(source, target)) / len(target)
    return score if score > 0 else 0.0


def similarity(
    a: Sequence,
    b: Sequence,
    mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
) -> float:
    """
    Compute how similar ``a`` is to ``b`` (0.0 to 1.0).

    The score is ``(len(b) - distance) / max(len(a), len(b))``, floored at
    0.0. Argument order matters: the numerator uses the length of ``b``.

    Example:
        >>> similarity("yaho", "yahoo")
        0.8
        >>> similarity("cars", "c")
        0.0
        >>> similarity("c", "cars")
        0.25
    """
    source, target = prepare_pair(a, b, mode)
    return _score(source, target, _osa_distance(source, target))


def similarity_ci(a: Sequence, b: Sequence) -> float:
    """Case-insensitive similarity. Equivalent to similarity(a, b, mode="case_insensitive")."""
    return similarity(a, b, ComparisonMode.CASE_INSENSITIVE)


def similarity_estimate(
    a: Sequence,
    b: Sequence,
    mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
) -> float:
    """
    Optimistic upper bound on ``similarity(a, b)``.

    Uses ``distance_estimate`` in place of the exact distance and divides by
    ``len(b)`` alone, so it is never lower than the exact score.

    Example:
        >>> similarity_estimate("abcde", "xbcde")
        0.8
        >>> similarity_estimate("abc", "cba")
        1.0
    """
    source, target = prepare_pair(a, b, mode)
    return _score_estimate(source, target)


def similarity_bounded(
    a: Sequence,
    b: Sequence,
    min_similarity: float,
    mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
) -> Optional[float]:
    """
    Compute similarity with explicit None return when below a threshold.

    The cheap estimate is checked first; when even that optimistic bound is
    below ``min_similarity`` the exact distance is never computed. A pair
    whose exact score reaches the threshold is never rejected.

    Args:
        a: Source sequence
        b: Target sequence
        min_similarity: Lowest acceptable score
        mode: Case handling applied to both operands before estimating

    Returns:
        The exact similarity if it is at least ``min_similarity``, None otherwise.

    Example:
        >>> similarity_bounded("yahoo", "bahoo", 0.8, mode="case_insensitive")
        0.8
        >>> similarity_bounded("yahoo", "bahoo", 0.9, mode="case_insensitive") is None
        True
    """
    source, target = prepare_pair(a, b, mode)

    if source == target:
        return 1.0 if min_similarity <= 1.0 else None

    bound = _score_estimate(source, target)
    if bound < min_similarity:
        logger.debug(
            "estimate %.4f below min_similarity %.4f, skipping exact distance",
            bound,
            min_similarity,
        )
        return None

    score = _score(source, target, _osa_distance(source, target))
    if score >= min_similarity:
        return score
    return None


def similarity_bounded_ci(
    a: Sequence, b: Sequence, min_similarity: float
) -> Optional[float]:
    """Case-insensitive similarity_bounded. Equivalent to similarity_bounded(a, b, min_similarity, mode="case_insensitive")."""
    return similarity_bounded(a, b, min_similarity, ComparisonMode.CASE_INSENSITIVE)


__all__ = [
    "MatchResult",
    "damerau_levenshtein",
    "damerau_levenshtein_ci",
    "distance_estimate",
    "similarity",
    "similarity_ci",
    "similarity_estimate",
    "similarity_bounded",
    "similarity_bounded_ci",
]
