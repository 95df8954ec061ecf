"""Polars Series operations for editsim.

High-level helpers for matching Polars Series against each other. Both go
through the threshold gate, so pairs whose estimate cannot reach
``min_similarity`` are dropped before any distance table is built.

Functions in This Module
------------------------
- ``match_series()``: All (query, target) pairs above a threshold
- ``best_match_series()``: The single best target for every query

Example Usage
-------------
>>> import polars as pl
>>> from editsim.polars_ext import best_match_series
>>>
>>> queries = pl.Series(["appel", "banan"])
>>> targets = pl.Series(["apple", "banana", "cherry"])
>>> best_match_series(queries, targets, min_similarity=0.7)

See Also
--------
- ``editsim.expr``: Polars expression namespace for column operations
- ``editsim.CandidateIndex``: Reusable index for repeated searches
"""

from typing import List, Sequence, Union

import polars as pl

from editsim import batch
from editsim._utils import ModeLike, normalize_mode, validate_min_similarity

_MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "score": pl.Float64,
}


def _as_list(values: Union["pl.Series", Sequence[str]]) -> List:
    if isinstance(values, pl.Series):
        return values.to_list()
    return list(values)


def match_series(
    query_series: "pl.Series",
    target_series: Union["pl.Series", Sequence[str]],
    min_similarity: float = 0.0,
    mode: ModeLike = None,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, returns every target whose similarity reaches the
    threshold. Null queries and null targets are skipped.

    Args:
        query_series: Series of query strings (sources)
        target_series: Series (or list) of target strings to match against
        min_similarity: Minimum similarity threshold (0.0 to 1.0)
        mode: Case handling (ComparisonMode, its string value, or a bool)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score,
        ordered by query and then by score descending

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, min_similarity=0.7)
    """
    threshold = validate_min_similarity(min_similarity)
    mode = normalize_mode(mode)

    targets = _as_list(target_series)
    # Positions of non-null targets, so ids map back to the original series
    positions = [idx for idx, t in enumerate(targets) if t is not None]
    candidates = [str(targets[idx]) for idx in positions]

    rows = []
    for query_idx, query in enumerate(_as_list(query_series)):
        if query is None:
            continue
        matches = batch.best_matches(
            candidates, str(query), limit=None, min_similarity=threshold, mode=mode
        )
        for match in matches:
            rows.append(
                {
                    "query_idx": query_idx,
                    "query": str(query),
                    "target_idx": positions[match.id],
                    "target": match.text,
                    "score": match.score,
                }
            )

    if not rows:
        return pl.DataFrame(schema=_MATCH_SCHEMA)
    return pl.DataFrame(rows, schema=_MATCH_SCHEMA)


def best_match_series(
    query_series: "pl.Series",
    choices: Union["pl.Series", Sequence[str]],
    min_similarity: float = 0.0,
    mode: ModeLike = None,
) -> "pl.DataFrame":
    """
    Find the best matching choice for every query.

    Every query keeps its row; when no choice reaches ``min_similarity``
    (or the query is null) the match columns are null.

    Args:
        query_series: Series of query strings
        choices: Series (or list) of candidate strings
        min_similarity: Minimum similarity threshold (0.0 to 1.0)
        mode: Case handling (ComparisonMode, its string value, or a bool)

    Returns:
        DataFrame with columns: query_idx, query, match, match_idx, score

    Example:
        >>> result = best_match_series(pl.Series(["appel"]), ["apple", "apply"])
        >>> result["match"].to_list()
        ['apple']
    """
    threshold = validate_min_similarity(min_similarity)
    mode = normalize_mode(mode)

    raw_choices = _as_list(choices)
    positions = [idx for idx, c in enumerate(raw_choices) if c is not None]
    candidates = [str(raw_choices[idx]) for idx in positions]

    rows = []
    for query_idx, query in enumerate(_as_list(query_series)):
        best = None
        if query is not None:
            found = batch.best_matches(
                candidates, str(query), limit=1, min_similarity=threshold, mode=mode
            )
            best = found[0] if found else None
        rows.append(
            {
                "query_idx": query_idx,
                "query": None if query is None else str(query),
                "match": best.text if best else None,
                "match_idx": positions[best.id] if best else None,
                "score": best.score if best else None,
            }
        )

    return pl.DataFrame(
        rows,
        schema={
            "query_idx": pl.Int64,
            "query": pl.Utf8,
            "match": pl.Utf8,
            "match_idx": pl.Int64,
            "score": pl.Float64,
        },
    )


__all__ = ["match_series", "best_match_series"]
