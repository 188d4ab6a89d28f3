"""Boolean conversion helpers.

Conversions between bool, int and str with fixed truth tables, plus
aggregate operators over sequences of booleans. ``None`` stands in for an
absent value throughout: conversions named ``*_object`` may return it, the
others map it to a definite result.

Matching conversions compare against caller-supplied values in a fixed
order: the true value first, then the false value, then the none value.
When nothing matches they raise InvalidArgumentError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence

from textescape.diagnostics import (
    ErrorTemplate,
    InvalidArgumentError,
    NullArgumentError,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tests and negation
    "negate",
    "is_true",
    "is_not_true",
    "is_false",
    "is_not_false",
    "compare",
    # bool <-> bool
    "to_boolean",
    "to_boolean_default_if_none",
    # int -> bool
    "int_to_boolean",
    "int_to_boolean_object",
    "int_to_boolean_matching",
    "int_to_boolean_object_matching",
    # bool -> int
    "to_integer",
    "to_integer_object",
    "to_integer_matching",
    # str -> bool
    "str_to_boolean",
    "str_to_boolean_object",
    "str_to_boolean_matching",
    "str_to_boolean_object_matching",
    # bool -> str
    "to_string",
    "to_string_true_false",
    "to_string_on_off",
    "to_string_yes_no",
    # Aggregates
    "and_all",
    "or_any",
    "xor_all",
]

# Case-insensitive spellings accepted by str_to_boolean_object
_TRUE_STRINGS = frozenset(("true", "t", "yes", "y", "on", "1"))
_FALSE_STRINGS = frozenset(("false", "f", "no", "n", "off", "0"))


# ============================================================================
# TESTS AND NEGATION
# ============================================================================


def negate(value: bool | None) -> bool | None:
    """Negate a boolean, passing None through.

    Examples:
        negate(True)  -> False
        negate(False) -> True
        negate(None)  -> None
    """
    if value is None:
        return None
    return not value


def is_true(value: bool | None) -> bool:
    """True only for True; False and None give False."""
    return value is True


def is_not_true(value: bool | None) -> bool:
    """True for False and None."""
    return not is_true(value)


def is_false(value: bool | None) -> bool:
    """True only for False; True and None give False."""
    return value is False


def is_not_false(value: bool | None) -> bool:
    """True for True and None."""
    return not is_false(value)


def compare(x: bool, y: bool) -> int:
    """Compare two booleans with False ordered before True.

    Returns:
        0 if equal, 1 if x is True and y False, -1 otherwise
    """
    if x == y:
        return 0
    return 1 if x else -1


# ============================================================================
# BOOL -> BOOL
# ============================================================================


def to_boolean(value: bool | None) -> bool:
    """Convert to a plain bool, None counting as False."""
    return value is not None and bool(value)


def to_boolean_default_if_none(value: bool | None, value_if_none: bool) -> bool:
    """Convert to a plain bool, None giving value_if_none."""
    if value is None:
        return value_if_none
    return bool(value)


# ============================================================================
# INT -> BOOL
# ============================================================================


def int_to_boolean(value: int) -> bool:
    """Zero is False, every other integer is True."""
    return value != 0


def int_to_boolean_object(value: int | None) -> bool | None:
    """Zero is False, other integers True, None stays None."""
    if value is None:
        return None
    return value != 0


def int_to_boolean_matching(
    value: int | None,
    true_value: int | None,
    false_value: int | None,
) -> bool:
    """Convert an int to a bool by matching it against explicit values.

    Examples:
        int_to_boolean_matching(0, 0, 2) -> True
        int_to_boolean_matching(2, 1, 2) -> False
        int_to_boolean_matching(None, None, 0) -> True

    Args:
        value: Integer to convert, may be None
        true_value: Value that means True, may be None
        false_value: Value that means False, may be None

    Returns:
        True or False

    Raises:
        InvalidArgumentError: If value matches neither
    """
    if value == true_value:
        return True
    if value == false_value:
        return False
    raise InvalidArgumentError(ErrorTemplate.conversion_no_match("Integer", value))


def int_to_boolean_object_matching(
    value: int | None,
    true_value: int | None,
    false_value: int | None,
    none_value: int | None,
) -> bool | None:
    """Convert an int to True, False or None by matching explicit values.

    Examples:
        int_to_boolean_object_matching(0, 0, 2, 3) -> True
        int_to_boolean_object_matching(2, 1, 2, 3) -> False
        int_to_boolean_object_matching(3, 1, 2, 3) -> None

    Raises:
        InvalidArgumentError: If value matches none of the three
    """
    if value == true_value:
        return True
    if value == false_value:
        return False
    if value == none_value:
        return None
    raise InvalidArgumentError(ErrorTemplate.conversion_no_match("Integer", value))


# ============================================================================
# BOOL -> INT
# ============================================================================


def to_integer(value: bool) -> int:
    """1 for True, 0 for False."""
    return 1 if value else 0


def to_integer_object(value: bool | None) -> int | None:
    """1 for True, 0 for False, None for None."""
    if value is None:
        return None
    return 1 if value else 0


def to_integer_matching(
    value: bool | None,
    true_value: int,
    false_value: int,
    none_value: int | None = None,
) -> int | None:
    """Map a boolean onto caller-chosen integers.

    Examples:
        to_integer_matching(True, 1, 0)     -> 1
        to_integer_matching(None, 1, 0, 2)  -> 2
        to_integer_matching(None, 1, 0)     -> None
    """
    if value is None:
        return none_value
    return true_value if value else false_value


# ============================================================================
# STR -> BOOL
# ============================================================================


def str_to_boolean_object(text: str | None) -> bool | None:
    """Parse a string into True, False or None.

    ``true``, ``t``, ``yes``, ``y``, ``on`` and ``1`` (any case) give True;
    ``false``, ``f``, ``no``, ``n``, ``off`` and ``0`` give False. Anything
    else, including None and surrounding whitespace, gives None.

    Examples:
        str_to_boolean_object("TRUE")  -> True
        str_to_boolean_object("yes")   -> True
        str_to_boolean_object("off")   -> False
        str_to_boolean_object("ono")   -> None
        str_to_boolean_object(None)    -> None
    """
    if text is None or not text.isascii():
        return None
    folded = text.lower()
    if folded in _TRUE_STRINGS:
        return True
    if folded in _FALSE_STRINGS:
        return False
    return None


def str_to_boolean_object_matching(
    text: str | None,
    true_string: str | None,
    false_string: str | None,
    none_string: str | None,
) -> bool | None:
    """Convert a string to True, False or None by exact (case-sensitive) match.

    Raises:
        InvalidArgumentError: If text matches none of the three strings
    """
    if text == true_string:
        return True
    if text == false_string:
        return False
    if text == none_string:
        return None
    raise InvalidArgumentError(ErrorTemplate.conversion_no_match("String", text))


def str_to_boolean(text: str | None) -> bool:
    """Parse like str_to_boolean_object, treating None (no match) as False."""
    return str_to_boolean_object(text) is True


def str_to_boolean_matching(
    text: str | None,
    true_string: str | None,
    false_string: str | None,
) -> bool:
    """Convert a string to a bool by exact (case-sensitive) match.

    Raises:
        InvalidArgumentError: If text matches neither string
    """
    if text == true_string:
        return True
    if text == false_string:
        return False
    raise InvalidArgumentError(ErrorTemplate.conversion_no_match("String", text))


# ============================================================================
# BOOL -> STR
# ============================================================================


def to_string(
    value: bool | None,
    true_string: str | None,
    false_string: str | None,
    none_string: str | None = None,
) -> str | None:
    """Pick one of three strings depending on value.

    Examples:
        to_string(True, "true", "false", "null")  -> "true"
        to_string(None, "true", "false", "null")  -> "null"
    """
    if value is None:
        return none_string
    return true_string if value else false_string


def to_string_true_false(value: bool | None) -> str | None:
    """'true', 'false' or None."""
    return to_string(value, "true", "false")


def to_string_on_off(value: bool | None) -> str | None:
    """'on', 'off' or None."""
    return to_string(value, "on", "off")


def to_string_yes_no(value: bool | None) -> str | None:
    """'yes', 'no' or None."""
    return to_string(value, "yes", "no")


# ============================================================================
# AGGREGATES
# ============================================================================


def _checked(values: Sequence[bool | None] | None) -> list[bool]:
    if values is None:
        raise NullArgumentError(ErrorTemplate.boolean_array_none())
    if len(values) == 0:
        raise InvalidArgumentError(ErrorTemplate.boolean_array_empty())
    if any(v is None for v in values):
        raise InvalidArgumentError(ErrorTemplate.boolean_array_none_element())
    return [bool(v) for v in values]


def and_all(values: Sequence[bool | None] | None) -> bool:
    """Logical AND over every value.

    Examples:
        and_all([True, True])        -> True
        and_all([True, False, True]) -> False

    Raises:
        NullArgumentError: If values is None
        InvalidArgumentError: If values is empty or contains None
    """
    return all(_checked(values))


def or_any(values: Sequence[bool | None] | None) -> bool:
    """Logical OR over every value.

    Raises:
        NullArgumentError: If values is None
        InvalidArgumentError: If values is empty or contains None
    """
    return any(_checked(values))


def xor_all(values: Sequence[bool | None] | None) -> bool:
    """Chained XOR: True when an odd number of values are True.

    Examples:
        xor_all([True, True])        -> False
        xor_all([True, True, True])  -> True

    Raises:
        NullArgumentError: If values is None
        InvalidArgumentError: If values is empty or contains None
    """
    result = False
    for value in _checked(values):
        result ^= value
    return result
