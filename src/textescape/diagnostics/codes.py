"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization shared by diagnostics and exceptions.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        ESCAPE: Malformed escape sequence in translator input
        TRANSLATOR: Translator used outside its contract
        ARGUMENT: Argument validation failure
        CONVERSION: Boolean conversion found no matching value
        CONFIGURATION: Translator constructed with invalid settings
    """

    ESCAPE = "escape"
    TRANSLATOR = "translator"
    ARGUMENT = "argument"
    CONVERSION = "conversion"
    CONFIGURATION = "configuration"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Escape errors (malformed input to unescapers)
        2000-2999: Translator errors (contract violations)
        3000-3999: Argument validation errors
        4000-4999: Boolean conversion errors
        5000-5999: Configuration errors
    """

    # Escape errors (1000-1999)
    UNICODE_ESCAPE_INVALID = 1001
    UNICODE_ESCAPE_TRUNCATED = 1002
    ENTITY_SEMICOLON_MISSING = 1003

    # Translator errors (2000-2999)
    TRANSLATOR_INDEX_INVALID = 2001
    WRITER_REQUIRED = 2002

    # Argument validation errors (3000-3999)
    EXPRESSION_FALSE = 3001
    VALUE_IS_NONE = 3002
    ARRAY_EMPTY = 3003
    CHAR_SEQUENCE_EMPTY = 3004
    COLLECTION_EMPTY = 3005
    MAP_EMPTY = 3006
    CHAR_SEQUENCE_BLANK = 3007
    NONE_ELEMENT = 3008
    INDEX_INVALID = 3009
    STATE_INVALID = 3010
    PATTERN_MISMATCH = 3011
    NOT_A_NUMBER = 3012
    NOT_FINITE = 3013
    NOT_IN_INCLUSIVE_RANGE = 3014
    NOT_IN_EXCLUSIVE_RANGE = 3015
    NOT_AN_INSTANCE = 3016
    NOT_ASSIGNABLE = 3017

    # Boolean conversion errors (4000-4999)
    CONVERSION_NO_MATCH = 4001
    BOOLEAN_ARRAY_NONE = 4002
    BOOLEAN_ARRAY_EMPTY = 4003
    BOOLEAN_ARRAY_NONE_ELEMENT = 4004

    # Configuration errors (5000-5999)
    ESCAPE_RANGE_INVALID = 5001
    LOOKUP_KEY_EMPTY = 5002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        return _CATEGORY_BY_THOUSAND[self.value // 1000]


_CATEGORY_BY_THOUSAND: dict[int, ErrorCategory] = {
    1: ErrorCategory.ESCAPE,
    2: ErrorCategory.TRANSLATOR,
    3: ErrorCategory.ARGUMENT,
    4: ErrorCategory.CONVERSION,
    5: ErrorCategory.CONFIGURATION,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Index into the translated input where the problem starts
        excerpt: Offending slice of the input (escaped when formatted)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None
    excerpt: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If position is negative.
        """
        if self.position is not None and self.position < 0:
            msg = f"Diagnostic.position must be >= 0, got {self.position}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping in the echoed excerpt.

        Example output:
            error[UNICODE_ESCAPE_INVALID]: Unable to parse unicode value: 'zz12'
              --> index 4: \\uzz12
              = help: A unicode escape needs exactly four hexadecimal digits

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
