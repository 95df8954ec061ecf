"""Tests for the exact edit distance: damerau_levenshtein and its variants.

This module tests the optimal string alignment distance, including the
case-insensitive variants and the non-string sequence kinds.
"""

import pytest

import editsim as es


class TestDamerauLevenshtein:
    """Tests for damerau_levenshtein distance."""

    def test_identical_strings(self):
        assert es.damerau_levenshtein("computer", "computer") == 0, "Identical strings should have distance 0"
        assert es.damerau_levenshtein("", "") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert es.damerau_levenshtein("hello", "") == 5, "Distance to empty string equals string length"
        assert es.damerau_levenshtein("", "hello") == 5, "Distance from empty string equals target length"

    def test_deletion(self):
        assert es.damerau_levenshtein("computer", "compter") == 1

    def test_substitution(self):
        assert es.damerau_levenshtein("computer", "camputer") == 1

    def test_insertion(self):
        assert es.damerau_levenshtein("computer", "computter") == 1

    def test_transposition(self):
        # Adjacent swap counts as one edit, not two substitutions
        assert es.damerau_levenshtein("computer", "comupter") == 1
        assert es.damerau_levenshtein("ab", "ba") == 1
        assert es.damerau_levenshtein("ca", "ac") == 1

    def test_combined_edits(self):
        # deletion + substitution + insertion
        assert es.damerau_levenshtein("computer", "camputte") == 3
        # transposition + insertion + deletion
        assert es.damerau_levenshtein("computer", "cmoputte") == 3
        # same pair with source and target swapped
        assert es.damerau_levenshtein("cmoputte", "computer") == 3

    def test_classic_examples(self):
        assert es.damerau_levenshtein("kitten", "sitting") == 3
        assert es.damerau_levenshtein("saturday", "sunday") == 3
        assert es.damerau_levenshtein("theater", "theatre") == 1

    def test_swapped_pair_is_not_edited_again(self):
        # Unrestricted Damerau-Levenshtein gives 2 here; the alignment variant gives 3
        assert es.damerau_levenshtein("ca", "abc") == 3

    def test_case_sensitive_by_default(self):
        assert es.damerau_levenshtein("cars", "BaTS") == 3
        assert es.damerau_levenshtein("cars", "BaTS", mode="case_sensitive") == 3
        assert es.damerau_levenshtein("cars", "BaTS", mode=False) == 3

    def test_unicode(self):
        assert es.damerau_levenshtein("café", "cafe") == 1, "Accent difference is 1 edit"
        assert es.damerau_levenshtein("日本語", "日本") == 1, "Removing one Japanese character is 1 edit"
        assert es.damerau_levenshtein("日本", "本日") == 1, "Swapped characters are 1 edit"

    def test_edit_distance_alias(self):
        assert es.edit_distance is es.damerau_levenshtein


class TestDamerauLevenshteinCi:
    """Tests for case-insensitive distance."""

    def test_case_insensitive(self):
        assert es.damerau_levenshtein("cars", "BaTS", mode=es.ComparisonMode.CASE_INSENSITIVE) == 2
        assert es.damerau_levenshtein_ci("cars", "BaTS") == 2

    def test_mode_spellings(self):
        for mode in ("case_insensitive", "CASE_INSENSITIVE", "ci", True):
            assert es.damerau_levenshtein("receive", "RECIEVE", mode=mode) == 1

    def test_fold_before_compare(self):
        assert es.damerau_levenshtein_ci("HeLLo", "hElLO") == 0

    def test_mixed_case_transposition(self):
        assert es.damerau_levenshtein("Cats", "cast", mode=False) == 2
        assert es.damerau_levenshtein_ci("Cats", "cast") == 1


class TestSequenceKinds:
    """Distance over bytes and generic sequences."""

    def test_bytes(self):
        assert es.damerau_levenshtein(b"computer", b"comupter") == 1
        assert es.damerau_levenshtein(b"cars", b"BaTS", mode="ci") == 2

    def test_bytearray(self):
        assert es.damerau_levenshtein(bytearray(b"abc"), b"abd") == 1

    def test_code_point_lists(self):
        source = [ord(c) for c in "computer"]
        target = [ord(c) for c in "cmoputte"]
        assert es.damerau_levenshtein(source, target) == 3

    def test_code_point_lists_fold_ascii_range(self):
        source = [ord(c) for c in "cars"]
        target = [ord(c) for c in "BaTS"]
        assert es.damerau_levenshtein(source, target, mode="ci") == 2

    def test_token_lists(self):
        assert es.damerau_levenshtein(["the", "quick", "fox"], ["quick", "the", "fox"]) == 1

    def test_list_and_tuple_compare_equal(self):
        assert es.damerau_levenshtein([1, 2, 3], (1, 2, 3)) == 0


class TestVeryLongStrings:
    """Long inputs stay within the rolling-row memory bound."""

    def test_long_disjoint_strings(self):
        long_a = "a" * 1000
        long_b = "b" * 1000
        assert es.damerau_levenshtein(long_a, long_b) == 1000

    def test_long_vs_short(self):
        assert es.damerau_levenshtein("a" * 2000, "a") == 1999
        assert es.damerau_levenshtein("a", "a" * 2000) == 1999


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
