"""Polars expression namespace for edit-distance scoring.

This module registers an `.editsim` namespace on Polars expressions,
enabling chainable similarity operations directly in Polars expression
contexts. Each row is scored with ``map_elements``. Against a literal, null
rows stay null; in column-to-column comparisons a null field is compared as
an empty string.

Warning:
    For large candidate sets prefer ``CandidateIndex`` or
    ``polars_ext.best_match_series``, which prune through the threshold gate.

Example:
    >>> import polars as pl
    >>> import editsim  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").editsim.is_similar("John", min_similarity=0.75)
    ... )
"""

from typing import List, Optional, Union

import polars as pl

import editsim as es
from editsim._utils import ModeLike, normalize_mode, validate_min_similarity
from editsim.enums import NormalizationMode


def _text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("editsim")
class EditSimExprNamespace:
    """
    Edit-distance namespace for Polars expressions.

    Provides chainable methods for scoring a column against a literal or
    against another column. Access via `.editsim` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: func(_text(s), other),
                return_dtype=return_dtype,
            )
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=return_dtype,
        )

    def similarity(self, other: Union[str, pl.Expr], mode: ModeLike = None) -> pl.Expr:
        """
        Similarity of this column (source) to another value/column (target).

        Args:
            other: String literal or column expression to compare against
            mode: Case handling (ComparisonMode, its string value, or a bool)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(score=pl.col("name").editsim.similarity("John"))
            >>> df.with_columns(score=pl.col("name1").editsim.similarity(pl.col("name2")))
        """
        mode = normalize_mode(mode)
        return self._pairwise(other, lambda a, b: es.similarity(a, b, mode), pl.Float64)

    def distance(self, other: Union[str, pl.Expr], mode: ModeLike = None) -> pl.Expr:
        """
        Damerau-Levenshtein distance between this column and another value/column.

        Returns:
            Expression producing integer distances
        """
        mode = normalize_mode(mode)
        return self._pairwise(
            other, lambda a, b: es.damerau_levenshtein(a, b, mode), pl.Int64
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        mode: ModeLike = None,
    ) -> pl.Expr:
        """
        Check whether each row reaches ``min_similarity`` against the other value/column.

        Rows are checked through the threshold gate, so hopeless pairs never
        compute the exact distance.

        Returns:
            Boolean expression
        """
        mode = normalize_mode(mode)
        return self._pairwise(
            other,
            lambda a, b: es.similarity_bounded(a, b, min_similarity, mode) is not None,
            pl.Boolean,
        )

    def best_match(
        self,
        choices: List[str],
        min_similarity: float = 0.0,
        mode: ModeLike = None,
    ) -> pl.Expr:
        """
        Find the best matching choice for each row.

        Args:
            choices: Candidate strings
            min_similarity: Minimum similarity score (0.0 to 1.0)
            mode: Case handling (ComparisonMode, its string value, or a bool)

        Returns:
            Expression producing the best choice, or null when none reaches
            ``min_similarity``

        Example:
            >>> df.with_columns(
            ...     match=pl.col("query").editsim.best_match(["apple", "banana"], min_similarity=0.6)
            ... )
        """
        threshold = validate_min_similarity(min_similarity)
        mode = normalize_mode(mode)
        choices = list(choices)

        def find_best(value):
            found = es.find_best_matches(
                choices, value, limit=1, min_similarity=threshold, mode=mode
            )
            return found[0].text if found else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def normalize(
        self, mode: Optional[Union[str, NormalizationMode]] = NormalizationMode.LOWERCASE
    ) -> pl.Expr:
        """
        Normalize strings before comparison.

        Args:
            mode: NormalizationMode or its string value

        Example:
            >>> df.with_columns(clean=pl.col("name").editsim.normalize("strict"))
        """

        def normalize_value(value):
            if value is None:
                return None
            return es.normalize_string(str(value), mode)

        return self._expr.map_elements(normalize_value, return_dtype=pl.Utf8)
