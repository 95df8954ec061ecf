"""CandidateIndex for repeated fuzzy lookups against a fixed candidate set.

This module provides a reusable candidate set that can be built from Python
lists or Polars Series, searched many times through the threshold gate, and
persisted to disk.

Warning:
    This class is NOT thread-safe for concurrent ``add``/``add_all`` calls.
    Searching from several threads is fine once the index is no longer
    being modified.
"""

import pickle
from pathlib import Path
from typing import Iterable, List, Optional, Union

import polars as pl

from editsim import batch
from editsim._core import MatchResult
from editsim._utils import ModeLike, normalize_mode
from editsim.enums import ComparisonMode


class CandidateIndex:
    """
    A reusable set of candidates for ranked similarity searches.

    Every search scores the query (source) against each candidate (target)
    through ``similarity_bounded``, so candidates whose cheap estimate is
    already below ``min_similarity`` are skipped without building the
    distance table.

    Warning:
        This class is NOT thread-safe while items are being added. Create
        separate instances per thread if each thread builds its own index.

    Example:
        >>> import polars as pl
        >>> from editsim import CandidateIndex
        >>>
        >>> names = pl.Series(["Apple Inc", "Microsoft Corp", "Google LLC"])
        >>> index = CandidateIndex.from_series(names, mode="case_insensitive")
        >>> results = index.search("apple inc", min_similarity=0.6)
        >>>
        >>> # Save for later reuse
        >>> index.save("names_index.pkl")
        >>> index = CandidateIndex.load("names_index.pkl")
    """

    def __init__(
        self,
        items: Optional[Iterable[str]] = None,
        mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
    ):
        """
        Create a CandidateIndex from a list of strings.

        Args:
            items: Strings to index (may be empty and filled with ``add``)
            mode: Case handling applied to every search
        """
        self._items: List[str] = list(items) if items is not None else []
        self._mode = normalize_mode(mode)

    @property
    def mode(self) -> ComparisonMode:
        """Case handling applied to every search."""
        return self._mode

    @classmethod
    def from_series(
        cls,
        series: "pl.Series",
        mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
    ) -> "CandidateIndex":
        """
        Create a CandidateIndex from a Polars Series.

        Null values are indexed as empty strings so positions still line up
        with the Series.

        Example:
            >>> names = pl.Series(["Apple", "Microsoft", "Google"])
            >>> index = CandidateIndex.from_series(names)
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, mode=mode)

    @classmethod
    def from_dataframe(
        cls,
        df: "pl.DataFrame",
        column: str,
        mode: ModeLike = ComparisonMode.CASE_SENSITIVE,
    ) -> "CandidateIndex":
        """
        Create a CandidateIndex from a DataFrame column.

        Args:
            df: Polars DataFrame
            column: Column name to index
            mode: Case handling applied to every search
        """
        return cls.from_series(df[column], mode=mode)

    def add(self, item: str) -> int:
        """Add one candidate and return its id."""
        self._items.append(item)
        return len(self._items) - 1

    def add_all(self, items: Iterable[str]) -> None:
        """Add several candidates; ids continue from the current size."""
        self._items.extend(items)

    def search(
        self,
        query: str,
        min_similarity: float = 0.0,
        limit: Optional[int] = 10,
    ) -> List[MatchResult]:
        """
        Search the index for candidates similar to the query.

        Args:
            query: Query string to search for
            min_similarity: Minimum similarity score (0.0 to 1.0)
            limit: Maximum number of results to return (None for all)

        Returns:
            List of MatchResult objects, best first. ``id`` is the
            candidate's position in the index.
        """
        return batch.best_matches(
            self._items,
            query,
            limit=limit,
            min_similarity=min_similarity,
            mode=self._mode,
        )

    def search_series(
        self,
        queries: "pl.Series",
        min_similarity: float = 0.0,
        limit: int = 1,
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            min_similarity: Minimum similarity score (0.0 to 1.0)
            limit: Maximum matches per query (default: 1 for best match only)
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched candidate
            - match_idx: Position of the match in the index
            - score: Similarity score
        """
        rows = []

        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            for match in self.search(str(query), min_similarity=min_similarity, limit=limit):
                row = {
                    "query_idx": query_idx,
                    "match": match.text,
                    "match_idx": match.id,
                    "score": match.score,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        columns = ["query_idx", "query", "match", "match_idx", "score"]
        if not include_query:
            columns.remove("query")

        if not rows:
            schema = {
                "query_idx": pl.Int64,
                "query": pl.Utf8,
                "match": pl.Utf8,
                "match_idx": pl.Int64,
                "score": pl.Float64,
            }
            return pl.DataFrame(schema={c: schema[c] for c in columns})

        return pl.DataFrame(rows).select(columns)

    def batch_search(
        self,
        queries: List[str],
        min_similarity: float = 0.0,
        limit: Optional[int] = 1,
    ) -> List[List[MatchResult]]:
        """
        Search for multiple queries, returning results for each.

        Returns:
            List of lists, where each inner list contains MatchResult
            objects for the corresponding query
        """
        return [self.search(q, min_similarity=min_similarity, limit=limit) for q in queries]

    def get_items(self) -> List[str]:
        """Return the list of indexed items."""
        return self._items.copy()

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._items)

    def save(self, path: Union[str, Path]) -> None:
        """
        Save the index to a file.

        Args:
            path: File path to save to (typically .pkl extension)
        """
        data = {
            "items": self._items,
            "mode": self._mode.value,
        }
        with open(path, "wb") as f:
            pickle.dump(data, f)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "CandidateIndex":
        """
        Load an index from a file written by ``save``.

        Only load files you trust: the format is pickle.
        """
        with open(path, "rb") as f:
            data = pickle.load(f)

        return cls(items=data["items"], mode=data["mode"])

    def __repr__(self) -> str:
        return f"CandidateIndex(mode={self._mode.value!r}, size={len(self._items)})"
