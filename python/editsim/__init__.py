"""
editsim - Edit-distance similarity with threshold gating

Scores how similar two character sequences are using the optimal string
alignment variant of Damerau-Levenshtein distance, and rejects poor matches
early with a cheap, order-blind bound before the exact distance is computed.

Example usage:
    >>> import editsim as es

    # Exact distance (substitution, insertion, deletion, adjacent swap)
    >>> es.damerau_levenshtein("computer", "comupter")
    1

    # Similarity is asymmetric: normalized against the target's length
    >>> es.similarity("c", "cars"), es.similarity("cars", "c")
    (0.25, 0.0)

    # Threshold gate: None means "below min_similarity"
    >>> es.similarity_bounded("yahoo", "bahoo", 0.8, mode="case_insensitive")
    0.8
    >>> es.similarity_bounded("yahoo", "bahoo", 0.9, mode="case_insensitive") is None
    True

    # Rank candidates
    >>> [m.text for m in es.find_best_matches(["apple", "apply", "banana"], "appel", limit=2)]
    ['apple', 'apply']
"""

import logging
from importlib.metadata import version as _get_version

# Register the .editsim expression namespace
import editsim.expr  # noqa: F401
from editsim import batch, text
from editsim._core import (
    MatchResult,
    damerau_levenshtein,
    damerau_levenshtein_ci,
    distance_estimate,
    similarity,
    similarity_bounded,
    similarity_bounded_ci,
    similarity_ci,
    similarity_estimate,
)
from editsim.batch import best_matches as find_best_matches
from editsim.enums import ComparisonMode, NormalizationMode
from editsim.exceptions import EditSimError, ValidationError
from editsim.index import CandidateIndex
from editsim.polars_ext import best_match_series, match_series
from editsim.text import normalize_string

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("editsim")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "EditSimError",
    "ValidationError",
    # Result types
    "MatchResult",
    # Enums
    "ComparisonMode",
    "NormalizationMode",
    # Distance functions
    "damerau_levenshtein",
    "damerau_levenshtein_ci",
    "distance_estimate",
    "edit_distance",
    # Similarity functions
    "similarity",
    "similarity_ci",
    "similarity_estimate",
    "similarity_bounded",
    "similarity_bounded_ci",
    # Normalization
    "normalize_string",
    # Batch processing
    "find_best_matches",
    "batch",
    "text",
    # Index classes
    "CandidateIndex",
    # Polars integration
    "match_series",
    "best_match_series",
]


# Convenience aliases
edit_distance = damerau_levenshtein
