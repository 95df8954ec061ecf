"""String helpers used around the comparison functions.

These are the single-pass, stateless scans callers typically run before or
after scoring: normalization, trimming, splitting on a delimiter, squeezing
runs of a character, prefix/suffix/substring checks, plus ROT13 and random
alphanumeric strings.

Example:
    >>> from editsim import text
    >>> text.strip_split("first>,<second>,<third\\r\\n", ">,<")
    ['first', 'second', 'third']
    >>> text.squeeze("the cow says moooo", "o")
    'the cow says mo'
"""

from __future__ import annotations

import random
import re
import string
import unicodedata
from typing import List, Optional, Union

from editsim.enums import NormalizationMode
from editsim.exceptions import ValidationError

# Whitespace recognized by strip(); str.strip() would also remove vertical tabs
# and Unicode spaces.
WHITESPACE = " \t\n\f\r"

ALPHANUMERIC = string.ascii_letters + string.digits

_PUNCTUATION_TABLE = str.maketrans("", "", string.punctuation)


def normalize_string(
    s: str, mode: Optional[Union[str, NormalizationMode]] = NormalizationMode.LOWERCASE
) -> str:
    """Normalize a string before comparison.

    Args:
        s: Input string
        mode: Normalization mode (NormalizationMode or its string value).
            ``None`` or ``"none"`` returns the string unchanged.

    Returns:
        The normalized string.

    Raises:
        ValueError: If the mode is not recognized.

    Example:
        >>> normalize_string("  Hello, World!  ", "strict")
        'helloworld'
        >>> normalize_string("R\\u00e9sum\\u00e9", "strict")
        'resume'
    """
    if mode is None or mode == "none":
        return s
    try:
        mode = NormalizationMode(mode.lower() if isinstance(mode, str) else mode)
    except ValueError:
        raise ValueError(
            f"Unknown normalization mode: '{mode}'. "
            f"Valid options: {sorted(m.value for m in NormalizationMode)}"
        ) from None

    if mode is NormalizationMode.LOWERCASE:
        return s.lower()
    if mode is NormalizationMode.UNICODE_NFKD:
        return unicodedata.normalize("NFKD", s)
    if mode is NormalizationMode.REMOVE_PUNCTUATION:
        return s.translate(_PUNCTUATION_TABLE)
    if mode is NormalizationMode.REMOVE_WHITESPACE:
        return "".join(s.split())

    # STRICT: combining marks left over from NFKD are dropped too
    decomposed = unicodedata.normalize("NFKD", s.lower())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return "".join(stripped.translate(_PUNCTUATION_TABLE).split())


def begins_with(s: str, prefix: str) -> bool:
    """Return True if ``s`` begins with ``prefix``."""
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    """Return True if ``s`` ends with ``suffix``."""
    return s.endswith(suffix)


def contains(s: str, substring: str) -> bool:
    """Return True if ``substring`` occurs anywhere in ``s``."""
    return substring in s


def strip(s: str) -> str:
    """Remove leading and trailing whitespace (space, tab, newline, form feed, CR).

    Example:
        >>> strip("\\t  clean me   \\r\\n")
        'clean me'
    """
    return s.strip(WHITESPACE)


def strip_split(s: str, separator: str) -> List[str]:
    """Strip ``s`` and split it on ``separator`` (a regular expression).

    Intended for parsing delimited lines such as CSV rows. Empty fields are kept.

    Example:
        >>> strip_split("\\ta,b,,c\\r\\f", ",")
        ['a', 'b', '', 'c']
    """
    return re.split(separator, strip(s))


def squeeze(s: str, char: Union[str, int] = " ") -> str:
    """Replace every run of ``char`` in ``s`` with a single ``char``.

    Args:
        s: Input string
        char: The character to squeeze, as a one-character string or a code point

    Example:
        >>> squeeze("i need   a  squeeze!")
        'i need a squeeze!'
        >>> squeeze("baboon moon", ord("o"))
        'babon mon'
    """
    if isinstance(char, int):
        char = chr(char)
    if len(char) != 1:
        raise ValidationError(f"char must be a single character, got {char!r}")

    out = []
    for c in s:
        if c == char and out and out[-1] == char:
            continue
        out.append(c)
    return "".join(out)


def _rot13_char(c: str) -> str:
    code = ord(c)
    if 65 <= code <= 77 or 97 <= code <= 109:
        return chr(code + 13)
    if 78 <= code <= 90 or 110 <= code <= 122:
        return chr(code - 13)
    return c


def rot13(s: str) -> str:
    """Apply the ROT13 substitution cipher to ASCII letters in ``s``.

    Example:
        >>> rot13("The Quick Brown Fox Jumps Over The Lazy Dog.")
        'Gur Dhvpx Oebja Sbk Whzcf Bire Gur Ynml Qbt.'
    """
    return "".join(_rot13_char(c) for c in s)


def is_integer(s: str) -> bool:
    """Return True if ``s`` is a non-empty run of ASCII digits.

    Signs, decimal points and non-ASCII digits are rejected.
    """
    return bool(s) and all("0" <= c <= "9" for c in s)


def random_string(length: int, rng: Optional[random.Random] = None) -> str:
    """Return a random alphanumeric string of ``length`` characters.

    Not suitable for secrets; pass a seeded ``random.Random`` for reproducible output.

    Raises:
        ValidationError: If length is not a positive integer.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValidationError(f"length must be a positive integer, got {length!r}")
    rng = rng or random
    return "".join(rng.choices(ALPHANUMERIC, k=length))


__all__ = [
    "normalize_string",
    "begins_with",
    "ends_with",
    "contains",
    "strip",
    "strip_split",
    "squeeze",
    "rot13",
    "is_integer",
    "random_string",
]
