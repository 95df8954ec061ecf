"""Internal utilities for editsim."""

import math
from typing import Any, Optional, Sequence, Tuple, Union

from editsim.enums import ComparisonMode
from editsim.exceptions import ValidationError

ModeLike = Union[str, bool, ComparisonMode, None]

# Accepted spellings (lowercase) beyond the enum values
_MODE_ALIASES = {
    "cs": ComparisonMode.CASE_SENSITIVE,
    "sensitive": ComparisonMode.CASE_SENSITIVE,
    "ci": ComparisonMode.CASE_INSENSITIVE,
    "insensitive": ComparisonMode.CASE_INSENSITIVE,
    "lowercase": ComparisonMode.CASE_INSENSITIVE,
}


def normalize_mode(mode: ModeLike) -> ComparisonMode:
    """Convert a mode argument to a ComparisonMode.

    Args:
        mode: A ComparisonMode, its string value (or a short alias such as
            ``"ci"``), a bool meaning "ignore case", or None for the default.

    Returns:
        The matching ComparisonMode.

    Raises:
        ValueError: If the mode name is not recognized.
        TypeError: If mode is not a string, bool or ComparisonMode.

    Example:
        >>> normalize_mode(True)
        <ComparisonMode.CASE_INSENSITIVE: 'case_insensitive'>
        >>> normalize_mode("case_sensitive")
        <ComparisonMode.CASE_SENSITIVE: 'case_sensitive'>
    """
    if mode is None:
        return ComparisonMode.CASE_SENSITIVE

    if isinstance(mode, ComparisonMode):
        return mode

    if isinstance(mode, bool):
        return ComparisonMode.CASE_INSENSITIVE if mode else ComparisonMode.CASE_SENSITIVE

    if isinstance(mode, str):
        mode_lower = mode.lower()
        enum_values = {m.value: m for m in ComparisonMode}
        if mode_lower in enum_values:
            return enum_values[mode_lower]
        if mode_lower in _MODE_ALIASES:
            return _MODE_ALIASES[mode_lower]
        raise ValueError(
            f"Unknown comparison mode: '{mode}'. "
            f"Valid options: {sorted(set(enum_values) | set(_MODE_ALIASES))}"
        )

    raise TypeError(
        f"mode must be str, bool or ComparisonMode enum, got {type(mode).__name__}"
    )


def fold_unit(unit: Any) -> Any:
    """Lowercase a single code unit.

    Strings are lowered; integers in the ASCII ``A``..``Z`` range are
    shifted to ``a``..``z``. Anything else is returned unchanged.
    """
    if isinstance(unit, str):
        return unit.lower()
    if isinstance(unit, int) and 65 <= unit <= 90:
        return unit + 32
    return unit


def fold_case(seq: Sequence) -> Sequence:
    """Lowercase a whole sequence, keeping its kind."""
    if isinstance(seq, (str, bytes)):
        return seq.lower()
    return tuple(fold_unit(unit) for unit in seq)


def coerce_sequence(seq: Any, name: str = "sequence") -> Sequence:
    """Return an immutable, indexable view of a comparison operand.

    ``str`` and ``bytes`` pass through, ``bytearray`` becomes ``bytes``
    and any other iterable is materialized as a tuple.

    Raises:
        ValidationError: If the operand is None or not iterable.
    """
    if isinstance(seq, (str, bytes)):
        return seq
    if isinstance(seq, bytearray):
        return bytes(seq)
    if seq is None:
        raise ValidationError(f"{name} must be a sequence, got None")
    try:
        return tuple(seq)
    except TypeError:
        raise ValidationError(
            f"{name} must be a sequence, got {type(seq).__name__}"
        ) from None


def prepare_pair(
    source: Any, target: Any, mode: ModeLike = None
) -> Tuple[Sequence, Sequence]:
    """Validate both operands and apply case folding when requested.

    Raises:
        ValidationError: If an operand is not a sequence, or one operand is
            ``str`` while the other is ``bytes``.
    """
    source = coerce_sequence(source, "source")
    target = coerce_sequence(target, "target")

    if (isinstance(source, str) and isinstance(target, bytes)) or (
        isinstance(source, bytes) and isinstance(target, str)
    ):
        raise ValidationError(
            "source and target must both be str or both be bytes, got "
            f"{type(source).__name__} and {type(target).__name__}"
        )

    if normalize_mode(mode) is ComparisonMode.CASE_INSENSITIVE:
        return fold_case(source), fold_case(target)
    return source, target


def validate_min_similarity(min_similarity: float) -> float:
    """Check that a similarity threshold is a finite number in [0, 1].

    Raises:
        ValidationError: If the threshold is NaN, infinite or out of range.
    """
    value = float(min_similarity)
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(f"min_similarity must be finite, got {min_similarity!r}")
    if not 0.0 <= value <= 1.0:
        raise ValidationError(
            f"min_similarity must be between 0.0 and 1.0, got {min_similarity!r}"
        )
    return value


def validate_limit(limit: Optional[int]) -> Optional[int]:
    """Check that a result limit is None or a positive integer."""
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError(f"limit must be a positive integer, got {limit!r}")
    return limit


__all__ = [
    "ModeLike",
    "normalize_mode",
    "fold_unit",
    "fold_case",
    "coerce_sequence",
    "prepare_pair",
    "validate_min_similarity",
    "validate_limit",
]
