"""
Parameter validation tests for editsim.

Tests cover:
- Threshold and limit validation in the batch and index layers
- Operand type validation (None, non-iterables, str mixed with bytes)
- Comparison mode parsing
"""

import math

import pytest

import editsim as es
from editsim._utils import normalize_mode


class TestParameterValidation:
    """Tests for parameter boundary validation."""

    def test_min_similarity_above_one(self):
        """min_similarity > 1.0 should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.find_best_matches(["a"], "b", min_similarity=1.5)

    def test_min_similarity_negative(self):
        """Negative min_similarity should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.find_best_matches(["a"], "b", min_similarity=-0.1)

    def test_min_similarity_nan(self):
        """NaN min_similarity should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.find_best_matches(["a"], "b", min_similarity=float("nan"))

    def test_min_similarity_infinity(self):
        """Infinity min_similarity should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.find_best_matches(["a"], "b", min_similarity=math.inf)

    def test_limit_zero(self):
        """Zero limit should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.find_best_matches(["a"], "b", limit=0)

    def test_limit_bool(self):
        """Booleans are not accepted as a limit."""
        with pytest.raises(es.ValidationError):
            es.find_best_matches(["a"], "b", limit=True)

    def test_index_min_similarity_above_one(self):
        """Index search with min_similarity > 1.0 should raise ValidationError."""
        index = es.CandidateIndex(["hello"])
        with pytest.raises(es.ValidationError):
            index.search("hello", min_similarity=1.5)

    def test_pairwise_length_mismatch(self):
        """Mismatched list lengths should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.batch.pairwise(["a", "b"], ["x"])

    def test_validation_error_is_value_error(self):
        """ValidationError is catchable as both EditSimError and ValueError."""
        with pytest.raises(ValueError):
            es.batch.pairwise(["a"], [])
        assert issubclass(es.ValidationError, es.EditSimError)


class TestOperandValidation:
    """Tests for operand type validation."""

    def test_none_first(self):
        """None as first argument should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.damerau_levenshtein(None, "hello")  # type: ignore[arg-type]

    def test_none_second(self):
        """None as second argument should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.similarity("hello", None)  # type: ignore[arg-type]

    def test_integer_input(self):
        """A non-iterable should raise ValidationError."""
        with pytest.raises(es.ValidationError):
            es.damerau_levenshtein(123, "hello")  # type: ignore[arg-type]

    def test_str_and_bytes_mixed(self):
        """str and bytes operands cannot be compared."""
        with pytest.raises(es.ValidationError):
            es.damerau_levenshtein("abc", b"abc")
        with pytest.raises(es.ValidationError):
            es.similarity_bounded(b"abc", "abc", 0.5)
        with pytest.raises(es.ValidationError):
            es.distance_estimate("abc", b"abd")

    def test_empty_operands_are_valid(self):
        """Distance and similarity are total, including both empty."""
        assert es.damerau_levenshtein("", "") == 0
        assert es.similarity("", "") == 1.0
        assert es.damerau_levenshtein([], []) == 0


class TestComparisonMode:
    """Tests for mode parsing."""

    @pytest.mark.parametrize(
        "mode, expected",
        [
            (None, es.ComparisonMode.CASE_SENSITIVE),
            (False, es.ComparisonMode.CASE_SENSITIVE),
            (True, es.ComparisonMode.CASE_INSENSITIVE),
            ("case_sensitive", es.ComparisonMode.CASE_SENSITIVE),
            ("Case_Insensitive", es.ComparisonMode.CASE_INSENSITIVE),
            ("ci", es.ComparisonMode.CASE_INSENSITIVE),
            ("lowercase", es.ComparisonMode.CASE_INSENSITIVE),
            (es.ComparisonMode.CASE_INSENSITIVE, es.ComparisonMode.CASE_INSENSITIVE),
        ],
    )
    def test_normalize_mode(self, mode, expected):
        assert normalize_mode(mode) is expected

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown comparison mode"):
            es.similarity("a", "b", mode="sideways")

    def test_wrong_mode_type(self):
        with pytest.raises(TypeError):
            es.similarity("a", "b", mode=1.5)  # type: ignore[arg-type]

    def test_enum_is_str(self):
        assert es.ComparisonMode.CASE_INSENSITIVE == "case_insensitive"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
