"""Argument validation helpers.

Each helper checks one precondition and raises a typed error when it does
not hold. Every helper takes an optional printf-style ``message`` and
``*values``; the message is only formatted (``message % values``) on
failure, so passing values is cheap on the happy path. Without a message
a default describing the failed check is used and values are ignored. A
message whose placeholders do not fit its values is used as written.

Example:
    >>> def set_ratio(ratio: float) -> None:
    ...     inclusive_between(0.0, 1.0, ratio, "ratio must be in [0, 1], got %s", ratio)

Error types:
    NullArgumentError - Required value was None (also a TypeError)
    InvalidArgumentError - Value present but unacceptable (also a ValueError)
    InvalidIndexError - Index out of range (also an IndexError)
    InvalidStateError - State check failed (also a RuntimeError)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence, Sized
from typing import Any, TypeVar

from textescape.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    InvalidArgumentError,
    InvalidIndexError,
    InvalidStateError,
    NullArgumentError,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "is_true",
    "not_null",
    "not_empty",
    "not_blank",
    "no_null_elements",
    "valid_index",
    "valid_state",
    "matches_pattern",
    "not_nan",
    "finite",
    "inclusive_between",
    "exclusive_between",
    "is_instance_of",
    "is_assignable_from",
]

T = TypeVar("T")
S = TypeVar("S", bound=Sized)
It = TypeVar("It", bound=Iterable[Any])

logger = logging.getLogger(__name__)

# ============================================================================
# DEFAULT MESSAGES
# ============================================================================

_IS_TRUE = "The validated expression is false"
_IS_NULL = "The validated object is null"
_NOT_BLANK = "The validated character sequence is blank"
_VALID_STATE = "The validated state is false"
_MATCHES_PATTERN = "The string %s does not match the pattern %s"
_NOT_NAN = "The validated value is not a number"
_FINITE = "The value is invalid: %f"
_INCLUSIVE_BETWEEN = "The value %s is not in the specified inclusive range of %s to %s"
_EXCLUSIVE_BETWEEN = "The value %s is not in the specified exclusive range of %s to %s"
_IS_INSTANCE_OF = "Expected type: %s, actual: %s"
_IS_ASSIGNABLE = "Cannot assign a %s to a %s"

# Kind-specific defaults, keyed by _kind_of()
_NOT_EMPTY = {
    "array": "The validated array is empty",
    "character sequence": "The validated character sequence is empty",
    "collection": "The validated collection is empty",
    "map": "The validated map is empty",
}
_NOT_EMPTY_CODES = {
    "array": DiagnosticCode.ARRAY_EMPTY,
    "character sequence": DiagnosticCode.CHAR_SEQUENCE_EMPTY,
    "collection": DiagnosticCode.COLLECTION_EMPTY,
    "map": DiagnosticCode.MAP_EMPTY,
}
_NO_NULL_ELEMENTS = {
    "array": "The validated array contains null element at index: %d",
    "collection": "The validated collection contains null element at index: %d",
}
_VALID_INDEX = {
    "array": "The validated array index is invalid: %d",
    "character sequence": "The validated character sequence index is invalid: %d",
    "collection": "The validated collection index is invalid: %d",
}


def _kind_of(value: object) -> str:
    """Name the container kind used to pick a default message."""
    match value:
        case str() | bytes() | bytearray():
            return "character sequence"
        case Mapping():
            return "map"
        case Sequence():
            return "array"
        case _:
            return "collection"


def _format(message: str, values: tuple[Any, ...]) -> str:
    """Apply values to message, keeping the message as written if they do not fit."""
    if not values:
        return message
    try:
        return message % values
    except (TypeError, ValueError) as e:
        logger.debug("Validation message %r not formatted with %r: %s", message, values, e)
        return message


def _failure(
    code: DiagnosticCode, message: str | None, values: tuple[Any, ...], default: str = ""
) -> Diagnostic:
    # Caller values belong to the caller's message, never to a default
    if not message:
        return ErrorTemplate.validation_failed(code, default)
    return ErrorTemplate.validation_failed(code, _format(message, values))


def _type_name(type_: type | None) -> str:
    return "None" if type_ is None else type_.__qualname__


# ============================================================================
# VALIDATORS
# ============================================================================


def is_true(expression: bool, message: str | None = None, *values: Any) -> None:
    """Validate that an expression is true.

    Example:
        is_true(i > 0, "The value must be greater than zero: %d", i)

    Raises:
        InvalidArgumentError: If expression is false
    """
    if not expression:
        raise InvalidArgumentError(
            _failure(DiagnosticCode.EXPRESSION_FALSE, message, values, _IS_TRUE)
        )


def not_null(obj: T | None, message: str | None = None, *values: Any) -> T:
    """Validate that obj is not None and return it.

    Raises:
        NullArgumentError: If obj is None
    """
    if obj is None:
        raise NullArgumentError(_failure(DiagnosticCode.VALUE_IS_NONE, message, values, _IS_NULL))
    return obj


def not_empty(value: S | None, message: str | None = None, *values: Any) -> S:
    """Validate that a string, sequence, collection or mapping is neither None nor empty.

    The default message names the kind of container: strings are
    "character sequence", mappings "map", other sequences "array" and any
    other sized container "collection".

    Returns:
        The validated value

    Raises:
        NullArgumentError: If value is None
        InvalidArgumentError: If value is empty
    """
    if value is None:
        raise NullArgumentError(_failure(DiagnosticCode.VALUE_IS_NONE, message, values, _IS_NULL))
    if len(value) == 0:
        kind = _kind_of(value)
        raise InvalidArgumentError(
            _failure(_NOT_EMPTY_CODES[kind], message, values, _NOT_EMPTY[kind])
        )
    return value


def not_blank(text: str | None, message: str | None = None, *values: Any) -> str:
    """Validate that text is neither None, empty, nor whitespace only.

    Raises:
        NullArgumentError: If text is None
        InvalidArgumentError: If text is empty or whitespace
    """
    if text is None:
        raise NullArgumentError(_failure(DiagnosticCode.VALUE_IS_NONE, message, values, _IS_NULL))
    if not text or text.isspace():
        raise InvalidArgumentError(
            _failure(DiagnosticCode.CHAR_SEQUENCE_BLANK, message, values, _NOT_BLANK)
        )
    return text


def no_null_elements(
    iterable: It | None, message: str | None = None, *values: Any
) -> It:
    """Validate that no element of iterable is None.

    The index of the first None element is appended to ``values`` before the
    message is formatted, so a custom message can reference it last. A
    message whose placeholders do not fit the values is used as written.

    Raises:
        NullArgumentError: If iterable itself is None
        InvalidArgumentError: If an element is None
    """
    if iterable is None:
        raise NullArgumentError(_failure(DiagnosticCode.VALUE_IS_NONE, _IS_NULL, ()))
    for index, element in enumerate(iterable):
        if element is None:
            if not message:
                kind = "array" if isinstance(iterable, Sequence) else "collection"
                message, values = _NO_NULL_ELEMENTS[kind], ()
            raise InvalidArgumentError(
                _failure(DiagnosticCode.NONE_ELEMENT, message, (*values, index))
            )
    return iterable


def valid_index(seq: S | None, index: int, message: str | None = None, *values: Any) -> S:
    """Validate that index is within [0, len(seq)).

    Negative indexes are rejected even though Python would accept them.

    Raises:
        NullArgumentError: If seq is None
        InvalidIndexError: If index is out of range
    """
    if seq is None:
        raise NullArgumentError(_failure(DiagnosticCode.VALUE_IS_NONE, _IS_NULL, ()))
    if index < 0 or index >= len(seq):
        if not message:
            kind = _kind_of(seq)
            message, values = _VALID_INDEX.get(kind, _VALID_INDEX["collection"]), (index,)
        raise InvalidIndexError(_failure(DiagnosticCode.INDEX_INVALID, message, values))
    return seq


def valid_state(expression: bool, message: str | None = None, *values: Any) -> None:
    """Validate object state, as opposed to an argument.

    Raises:
        InvalidStateError: If expression is false
    """
    if not expression:
        raise InvalidStateError(
            _failure(DiagnosticCode.STATE_INVALID, message, values, _VALID_STATE)
        )


def matches_pattern(
    text: str, pattern: str | re.Pattern[str], message: str | None = None, *values: Any
) -> None:
    """Validate that the whole of text matches pattern.

    Raises:
        InvalidArgumentError: If text does not fully match
    """
    if re.fullmatch(pattern, text) is None:
        if not message:
            shown = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
            message, values = _MATCHES_PATTERN, (text, shown)
        raise InvalidArgumentError(_failure(DiagnosticCode.PATTERN_MISMATCH, message, values))


def not_nan(value: float, message: str | None = None, *values: Any) -> None:
    """Validate that value is not NaN.

    Raises:
        InvalidArgumentError: If value is NaN
    """
    if math.isnan(value):
        raise InvalidArgumentError(
            _failure(DiagnosticCode.NOT_A_NUMBER, message, values, _NOT_NAN)
        )


def finite(value: float, message: str | None = None, *values: Any) -> None:
    """Validate that value is neither NaN nor infinite.

    Raises:
        InvalidArgumentError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        if not message:
            message, values = _FINITE, (value,)
        raise InvalidArgumentError(_failure(DiagnosticCode.NOT_FINITE, message, values))


def inclusive_between(
    start: Any, end: Any, value: Any, message: str | None = None, *values: Any
) -> None:
    """Validate that start <= value <= end.

    Works for any mutually comparable values (numbers, strings, dates).

    Raises:
        InvalidArgumentError: If value is outside the range
    """
    if value < start or value > end:
        if not message:
            message, values = _INCLUSIVE_BETWEEN, (value, start, end)
        raise InvalidArgumentError(
            _failure(DiagnosticCode.NOT_IN_INCLUSIVE_RANGE, message, values)
        )


def exclusive_between(
    start: Any, end: Any, value: Any, message: str | None = None, *values: Any
) -> None:
    """Validate that start < value < end.

    Raises:
        InvalidArgumentError: If value is outside the range or on a bound
    """
    if value <= start or value >= end:
        if not message:
            message, values = _EXCLUSIVE_BETWEEN, (value, start, end)
        raise InvalidArgumentError(
            _failure(DiagnosticCode.NOT_IN_EXCLUSIVE_RANGE, message, values)
        )


def is_instance_of(type_: type, obj: object, message: str | None = None, *values: Any) -> None:
    """Validate that obj is an instance of type_.

    Raises:
        InvalidArgumentError: If it is not
    """
    if not isinstance(obj, type_):
        if not message:
            actual = None if obj is None else type(obj)
            message, values = _IS_INSTANCE_OF, (_type_name(type_), _type_name(actual))
        raise InvalidArgumentError(_failure(DiagnosticCode.NOT_AN_INSTANCE, message, values))


def is_assignable_from(
    super_type: type, type_: type | None, message: str | None = None, *values: Any
) -> None:
    """Validate that type_ is super_type or a subclass of it.

    Raises:
        InvalidArgumentError: If type_ is None or not a subclass
    """
    if type_ is None or not issubclass(type_, super_type):
        if not message:
            message, values = _IS_ASSIGNABLE, (_type_name(type_), _type_name(super_type))
        raise InvalidArgumentError(_failure(DiagnosticCode.NOT_ASSIGNABLE, message, values))
