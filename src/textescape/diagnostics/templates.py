"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All default error messages are created here. NO f-strings in exception
    constructors! Validation helpers that accept a caller-supplied message
    route it through ``validation_failed`` so every raised error carries a
    Diagnostic with the right code.
    """

    # ------------------------------------------------------------------
    # Escape errors
    # ------------------------------------------------------------------

    @staticmethod
    def unicode_escape_invalid(digits: str, position: int) -> Diagnostic:
        """Unicode escape with non-hexadecimal digits.

        Args:
            digits: The four characters that should have been hex digits
            position: Index of the backslash that started the escape

        Returns:
            Diagnostic for UNICODE_ESCAPE_INVALID
        """
        msg = f"Unable to parse unicode value: '{digits}'"
        return Diagnostic(
            code=DiagnosticCode.UNICODE_ESCAPE_INVALID,
            message=msg,
            hint="A unicode escape needs exactly four hexadecimal digits",
            position=position,
            excerpt=digits,
        )

    @staticmethod
    def unicode_escape_truncated(sequence: str, position: int) -> Diagnostic:
        """Unicode escape cut off by end of input.

        Args:
            sequence: The escape text from the backslash to end of input
            position: Index of the backslash that started the escape

        Returns:
            Diagnostic for UNICODE_ESCAPE_TRUNCATED
        """
        msg = f"Less than 4 hex digits in unicode value: '{sequence}' due to end of CharSequence"
        return Diagnostic(
            code=DiagnosticCode.UNICODE_ESCAPE_TRUNCATED,
            message=msg,
            hint="Complete the escape or escape the backslash itself",
            position=position,
            excerpt=sequence,
        )

    @staticmethod
    def entity_semicolon_missing(position: int) -> Diagnostic:
        """Numeric entity without terminating semicolon.

        Args:
            position: Index of the '&' that started the entity

        Returns:
            Diagnostic for ENTITY_SEMICOLON_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.ENTITY_SEMICOLON_MISSING,
            message="Semi-colon required at end of numeric entity",
            hint="Add ';' or construct the unescaper with SemicolonMode.OPTIONAL",
            position=position,
        )

    # ------------------------------------------------------------------
    # Translator errors
    # ------------------------------------------------------------------

    @staticmethod
    def translator_index_invalid(translator: str, index: int) -> Diagnostic:
        """Whole-value translator invoked past position 0.

        Args:
            translator: Class name of the translator
            index: Index it was invoked at

        Returns:
            Diagnostic for TRANSLATOR_INDEX_INVALID
        """
        msg = f"{translator} should never reach the [1] index, got [{index}]"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATOR_INDEX_INVALID,
            message=msg,
            hint="CSV translators handle the whole value in one call; use them standalone",
            position=index,
        )

    @staticmethod
    def writer_required() -> Diagnostic:
        """translate_to() called without a writer.

        Returns:
            Diagnostic for WRITER_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.WRITER_REQUIRED,
            message="The Writer must not be null",
            hint="Pass any object with a write(str) method, e.g. io.StringIO()",
        )

    # ------------------------------------------------------------------
    # Validation errors
    # ------------------------------------------------------------------

    @staticmethod
    def validation_failed(code: DiagnosticCode, message: str) -> Diagnostic:
        """Validation helper failure with an already formatted message.

        Args:
            code: Diagnostic code identifying the failed check
            message: Caller-supplied or default message, formatted

        Returns:
            Diagnostic for the given code
        """
        return Diagnostic(code=code, message=message)

    # ------------------------------------------------------------------
    # Boolean conversion errors
    # ------------------------------------------------------------------

    @staticmethod
    def conversion_no_match(kind: str, value: object) -> Diagnostic:
        """Matching conversion found neither the true nor the false value.

        Args:
            kind: What was being matched ("Integer" or "String")
            value: The unmatched input

        Returns:
            Diagnostic for CONVERSION_NO_MATCH
        """
        msg = f"The {kind} did not match any specified value: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_NO_MATCH,
            message=msg,
            hint="Pass a value equal to the true, false or none value",
        )

    @staticmethod
    def boolean_array_none() -> Diagnostic:
        """Boolean aggregate called with None.

        Returns:
            Diagnostic for BOOLEAN_ARRAY_NONE
        """
        return Diagnostic(
            code=DiagnosticCode.BOOLEAN_ARRAY_NONE,
            message="The Array must not be null",
        )

    @staticmethod
    def boolean_array_empty() -> Diagnostic:
        """Boolean aggregate called with no values.

        Returns:
            Diagnostic for BOOLEAN_ARRAY_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.BOOLEAN_ARRAY_EMPTY,
            message="Array is empty",
        )

    @staticmethod
    def boolean_array_none_element() -> Diagnostic:
        """Boolean aggregate called with a None element.

        Returns:
            Diagnostic for BOOLEAN_ARRAY_NONE_ELEMENT
        """
        return Diagnostic(
            code=DiagnosticCode.BOOLEAN_ARRAY_NONE_ELEMENT,
            message="The array must not contain any null elements",
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def escape_range_invalid(low: int, high: int) -> Diagnostic:
        """EscapeRange with negative or inverted bounds.

        Args:
            low: Lower bound as given
            high: Upper bound as given

        Returns:
            Diagnostic for ESCAPE_RANGE_INVALID
        """
        msg = f"Invalid escape range [{low}, {high}]"
        return Diagnostic(
            code=DiagnosticCode.ESCAPE_RANGE_INVALID,
            message=msg,
            hint="Bounds must satisfy 0 <= low <= high",
        )

    @staticmethod
    def lookup_key_empty() -> Diagnostic:
        """LookupTranslator table with an empty key.

        Returns:
            Diagnostic for LOOKUP_KEY_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.LOOKUP_KEY_EMPTY,
            message="Lookup keys must not be empty",
            hint="An empty key would match at every position without consuming input",
        )
