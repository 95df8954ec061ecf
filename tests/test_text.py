"""Tests for the string helpers in editsim.text."""

import random

import pytest

from editsim import ValidationError, text


class TestStrip:
    """Tests for strip and strip_split."""

    def test_strip(self):
        assert text.strip("\t  clean me   \r\n") == "clean me"
        assert text.strip("\f\f") == ""
        assert text.strip("") == ""

    def test_strip_keeps_inner_whitespace(self):
        assert text.strip("  a \t b  ") == "a \t b"

    def test_strip_only_ascii_whitespace(self):
        # Vertical tab is not in the stripped set
        assert text.strip("\vx\v") == "\vx\v"

    def test_strip_split(self):
        line = "first>,<second>,<third\r\n"
        assert text.strip_split(line, ">,<") == ["first", "second", "third"]

    def test_strip_split_keeps_empty_fields(self):
        assert text.strip_split("\ta,b,,c\r\f", ",") == ["a", "b", "", "c"]

    def test_strip_split_regex_separator(self):
        assert text.strip_split(" 1; 2 ;3 ", r"\s*;\s*") == ["1", "2", "3"]

    def test_strip_split_no_separator(self):
        assert text.strip_split("  whole  ", ",") == ["whole"]


class TestSqueeze:
    """Tests for squeeze."""

    def test_default_space(self):
        assert text.squeeze("i need   a  squeeze!") == "i need a squeeze!"

    def test_other_character(self):
        assert text.squeeze("the cow says moooo", "o") == "the cow says mo"

    def test_code_point(self):
        assert text.squeeze("baboon moon", ord("o")) == "babon mon"

    def test_leading_and_trailing_runs(self):
        assert text.squeeze("   x   ") == " x "

    def test_nothing_to_squeeze(self):
        assert text.squeeze("abc") == "abc"
        assert text.squeeze("") == ""

    def test_invalid_char(self):
        with pytest.raises(ValidationError):
            text.squeeze("abc", "ab")
        with pytest.raises(ValidationError):
            text.squeeze("abc", "")


class TestRot13:
    """Tests for rot13."""

    def test_known_value(self):
        assert (
            text.rot13("The Quick Brown Fox Jumps Over The Lazy Dog.")
            == "Gur Dhvpx Oebja Sbk Whzcf Bire Gur Ynml Qbt."
        )

    def test_involution(self):
        message = "Hello, World! 123 é"
        assert text.rot13(text.rot13(message)) == message

    def test_non_letters_unchanged(self):
        assert text.rot13("123 !? é") == "123 !? é"

    def test_boundaries(self):
        assert text.rot13("AMNZamnz") == "NZAMnzam"


class TestIsInteger:
    """Tests for is_integer."""

    @pytest.mark.parametrize("value", ["0", "42", "0012", "9876543210"])
    def test_digits(self, value):
        assert text.is_integer(value)

    @pytest.mark.parametrize("value", ["", "-1", "+1", "1.0", "1e3", " 1", "abc", "٣"])
    def test_not_digits(self, value):
        assert not text.is_integer(value)


class TestRandomString:
    """Tests for random_string."""

    def test_length_and_alphabet(self):
        value = text.random_string(64)
        assert len(value) == 64
        assert set(value) <= set(text.ALPHANUMERIC)

    def test_seeded_is_reproducible(self):
        first = text.random_string(20, rng=random.Random(7))
        second = text.random_string(20, rng=random.Random(7))
        assert first == second

    @pytest.mark.parametrize("length", [0, -3, True, 2.5])
    def test_invalid_length(self, length):
        with pytest.raises(ValidationError):
            text.random_string(length)


class TestPredicates:
    """Tests for begins_with, ends_with and contains."""

    def test_begins_with(self):
        assert text.begins_with("foobar", "foo")
        assert text.begins_with("foobar", "")
        assert not text.begins_with("foobar", "bar")

    def test_ends_with(self):
        assert text.ends_with("foobar", "bar")
        assert not text.ends_with("foobar", "foo")
        assert not text.ends_with("ar", "bar")

    def test_contains(self):
        assert text.contains("foobar", "oba")
        assert text.contains("foobar", "")
        assert not text.contains("foobar", "baz")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
