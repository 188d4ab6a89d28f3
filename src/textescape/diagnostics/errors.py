"""textescape exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic for rich error information.
Each concrete error also derives from the matching built-in exception, so
callers that only know ``ValueError`` or ``TypeError`` still catch them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidArgumentError",
    "InvalidIndexError",
    "InvalidStateError",
    "MalformedEscapeError",
    "NullArgumentError",
    "TextEscapeError",
]


class TextEscapeError(Exception):
    """Base exception for all textescape errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextEscapeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message(self) -> str:
        """Plain error message without diagnostic decoration."""
        return str(self.args[0]) if self.args else ""


class InvalidArgumentError(TextEscapeError, ValueError):
    """Argument failed a precondition check.

    Raised by the validation helpers, by boolean conversions that find no
    matching value, and by translators constructed with bad settings.
    """


class NullArgumentError(TextEscapeError, TypeError):
    """Required argument was None.

    Kept distinct from InvalidArgumentError so callers can tell a missing
    value from a present but unacceptable one.
    """


class InvalidIndexError(TextEscapeError, IndexError):
    """Index outside the bounds of the validated sequence."""


class InvalidStateError(TextEscapeError, RuntimeError):
    """Operation invoked in a state its contract forbids.

    Examples:
    - valid_state() called with a false expression
    - CsvEscaper asked to translate from a position other than 0
    """


class MalformedEscapeError(TextEscapeError, ValueError):
    """Escape sequence started but could not be completed.

    Distinct from "no match": an unescaper that does not recognise its
    prefix returns 0, while one that recognises the prefix and then finds
    garbage raises this error. It propagates out of translate().

    Example:
        >>> unescape_java("\\\\u00")  # doctest: +SKIP
        MalformedEscapeError: Less than 4 hex digits in unicode value: '\\u00' ...
    """
