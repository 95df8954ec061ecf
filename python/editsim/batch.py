"""Batch operations API for editsim.

List-based helpers for scoring one query against many candidates. All of them
are plain loops over the core functions in ``editsim._core``; ranking helpers
go through the threshold gate so candidates whose estimate already falls
short of ``min_similarity`` never pay for the exact distance.

The query is always the *source* and each candidate the *target* of the
comparison, so scores are normalized by the candidate's length.

Example usage:
    >>> import editsim.batch as batch

    # Score a query against all strings, in input order
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.text, r.score) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.2)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [(m.text, m.score) for m in matches]
    [('apple', 0.8), ('apply', 0.6)]

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [0.8, 0.6]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from editsim._core import MatchResult
from editsim._core import similarity as _similarity
from editsim._core import similarity_bounded as _similarity_bounded
from editsim._utils import (
    normalize_mode,
    validate_limit,
    validate_min_similarity,
)
from editsim.exceptions import ValidationError

if TYPE_CHECKING:
    from editsim._utils import ModeLike

logger = logging.getLogger(__name__)

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
    "distance_matrix",  # Deprecated alias for similarity_matrix
]


def similarity(
    strings: Sequence[str],
    query: str,
    mode: ModeLike = None,
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Results are returned in the same order as the input strings, with no
    threshold applied.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        mode: Case handling (ComparisonMode, its string value, or a bool).

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.
    """
    mode = normalize_mode(mode)
    return [
        MatchResult(text=candidate, score=_similarity(query, candidate, mode), id=idx)
        for idx, candidate in enumerate(strings)
    ]


def best_matches(
    strings: Sequence[str],
    query: str,
    limit: Optional[int] = 5,
    min_similarity: float = 0.0,
    mode: ModeLike = None,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Each candidate goes through the threshold gate, so candidates whose
    estimated similarity is already below ``min_similarity`` are dropped
    without computing the exact distance. Survivors are sorted by score
    descending; ties keep their input order.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        limit: Maximum number of results to return (default: 5). None
            returns every match.
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).
        mode: Case handling (ComparisonMode, its string value, or a bool).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If min_similarity is outside [0, 1] or limit is
            not a positive integer.

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", limit=2)
        >>> for m in matches:
        ...     print(f"{m.text}: {m.score:.2f}")
        apple: 0.80
        apply: 0.60
    """
    threshold = validate_min_similarity(min_similarity)
    limit = validate_limit(limit)
    mode = normalize_mode(mode)

    matches = []
    for idx, candidate in enumerate(strings):
        score = _similarity_bounded(query, candidate, threshold, mode)
        if score is not None:
            matches.append(MatchResult(text=candidate, score=score, id=idx))

    logger.debug(
        "best_matches: %d of %d candidates reached min_similarity %.3f",
        len(matches),
        len(strings),
        threshold,
    )

    matches.sort(key=lambda m: m.score, reverse=True)
    if limit is not None:
        matches = matches[:limit]
    return matches


def pairwise(
    left: Sequence[str],
    right: Sequence[str],
    mode: ModeLike = None,
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Computes ``similarity(left[i], right[i])`` for each position.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["hello", "world"], ["hallo", "word"])
        [0.8, 0.6]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    mode = normalize_mode(mode)
    return [_similarity(a, b, mode) for a, b in zip(left, right)]


def similarity_matrix(
    queries: Sequence[str],
    choices: Sequence[str],
    mode: ModeLike = None,
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    mode = normalize_mode(mode)
    return [[_similarity(q, c, mode) for c in choices] for q in queries]


def distance_matrix(
    queries: Sequence[str],
    choices: Sequence[str],
    mode: ModeLike = None,
) -> list[list[float]]:
    """Deprecated: Use similarity_matrix() instead.

    The matrix holds similarity scores (0.0-1.0), not distances.

    .. deprecated:: 0.2.0
        Use :func:`similarity_matrix` instead.
    """
    import warnings

    warnings.warn(
        "distance_matrix() is deprecated and will be removed in a future version. "
        "Use similarity_matrix() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return similarity_matrix(queries, choices, mode)
