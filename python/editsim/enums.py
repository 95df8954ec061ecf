"""Enums for editsim API."""

from enum import Enum


class ComparisonMode(str, Enum):
    """Case handling applied to both operands before comparison.

    Folding happens before the distance estimate is taken, so the estimate
    and the exact distance always see the same sequences.

    Example:
        >>> from editsim import ComparisonMode, damerau_levenshtein
        >>> damerau_levenshtein("cars", "BaTS", mode=ComparisonMode.CASE_INSENSITIVE)
        2
    """

    CASE_SENSITIVE = "case_sensitive"
    """Compare code units as given"""

    CASE_INSENSITIVE = "case_insensitive"
    """Lowercase both operands before comparing"""


class NormalizationMode(str, Enum):
    """String normalization modes.

    Used by ``editsim.text.normalize_string`` to preprocess strings before
    they are handed to the comparison functions.

    Example:
        >>> from editsim import normalize_string, NormalizationMode
        >>> normalize_string("  Hello, World!  ", NormalizationMode.STRICT)
        'helloworld'
    """

    LOWERCASE = "lowercase"
    """Convert to lowercase only"""

    UNICODE_NFKD = "unicode_nfkd"
    """Apply Unicode NFKD normalization"""

    REMOVE_PUNCTUATION = "remove_punctuation"
    """Remove punctuation characters"""

    REMOVE_WHITESPACE = "remove_whitespace"
    """Remove all whitespace"""

    STRICT = "strict"
    """Apply all normalizations: lowercase + NFKD + remove punctuation + remove whitespace"""


__all__ = ["ComparisonMode", "NormalizationMode"]
