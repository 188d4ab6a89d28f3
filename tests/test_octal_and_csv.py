"""Tests for OctalUnescaper and the whole-value CSV translators."""

from __future__ import annotations

import pytest

from textescape.diagnostics import DiagnosticCode, InvalidStateError
from textescape.translate import CsvEscaper, CsvUnescaper, OctalUnescaper

# ============================================================================
# OCTAL
# ============================================================================


class TestOctalUnescaper:
    """Test octal escape parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("\\101", "A"),
            ("\\0", "\x00"),
            ("\\12", "\n"),
            ("\\377", "\xff"),
            ("a\\1b", "a\x01b"),
            ("\\0101", "\x08" + "1"),
        ],
    )
    def test_decodes(self, text: str, expected: str) -> None:
        """One to three octal digits decode to a code point."""
        assert OctalUnescaper().translate(text) == expected

    def test_third_digit_only_after_zero_to_three(self) -> None:
        """\\400 is \\40 followed by a literal 0."""
        assert OctalUnescaper().translate("\\400") == " 0"

    def test_non_octal_digit_ignored(self) -> None:
        """8 and 9 are not octal digits."""
        assert OctalUnescaper().translate("\\8") == "\\8"

    def test_lone_backslash(self) -> None:
        """A trailing backslash is copied."""
        assert OctalUnescaper().translate("a\\") == "a\\"

    @pytest.mark.parametrize(("text", "consumed"), [("\\7", 2), ("\\77", 3), ("\\377", 4)])
    def test_consumed(self, text: str, consumed: int) -> None:
        """Consumed count is the backslash plus the digits taken."""
        assert OctalUnescaper().translate_at(text, 0, []) == consumed


# ============================================================================
# CSV
# ============================================================================


class TestCsvEscaper:
    """Test CSV quoting."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abc", "abc"),
            ("", ""),
            ("a,b", '"a,b"'),
            ('a"b', '"a""b"'),
            ("a\nb", '"a\nb"'),
            ("a\rb", '"a\rb"'),
            ('"', '""""'),
            ("it's", "it's"),
        ],
    )
    def test_escape(self, text: str, expected: str) -> None:
        """Values are quoted only when they contain , \" CR or LF."""
        assert CsvEscaper().translate(text) == expected

    def test_consumes_whole_value(self) -> None:
        """The single call reports the whole input consumed."""
        out: list[str] = []
        assert CsvEscaper().translate_at("a,b", 0, out) == 3
        assert out == ['"a,b"']

    def test_index_other_than_zero_rejected(self) -> None:
        """CsvEscaper only works at position 0."""
        with pytest.raises(InvalidStateError, match="CsvEscaper should never reach") as exc_info:
            CsvEscaper().translate_at("abc", 1, [])
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TRANSLATOR_INDEX_INVALID

    def test_index_error_is_runtime_error(self) -> None:
        """InvalidStateError is catchable as RuntimeError."""
        with pytest.raises(RuntimeError):
            CsvUnescaper().translate_at("abc", 2, [])


class TestCsvUnescaper:
    """Test CSV unquoting."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('"a""b"', 'a"b'),
            ('"a,b"', "a,b"),
            ('"a\nb"', "a\nb"),
            ('""""', '"'),
            ("abc", "abc"),
            ("", ""),
        ],
    )
    def test_unescape(self, text: str, expected: str) -> None:
        """Quoted values that needed quoting are unquoted."""
        assert CsvUnescaper().translate(text) == expected

    def test_quoted_plain_value_kept(self) -> None:
        """Quotes around content that never needed them are kept."""
        assert CsvUnescaper().translate('"abc"') == '"abc"'

    def test_unbalanced_quotes_kept(self) -> None:
        """Only a value both starting and ending with a quote is unquoted."""
        assert CsvUnescaper().translate('"a,b') == '"a,b'
        assert CsvUnescaper().translate('a,b"') == 'a,b"'

    def test_lone_quote_kept(self) -> None:
        """A single quote character is not a quoted value."""
        assert CsvUnescaper().translate('"') == '"'

    def test_index_other_than_zero_rejected(self) -> None:
        """CsvUnescaper only works at position 0."""
        with pytest.raises(InvalidStateError, match="CsvUnescaper should never reach"):
            CsvUnescaper().translate_at('"a,b"', 3, [])


class TestWholeValueTranslator:
    """Test the shared whole-value base."""

    def test_base_is_abstract(self) -> None:
        """A whole-value translator must define translate_value."""
        from textescape.translate.csv_value import _WholeValueTranslator

        with pytest.raises(TypeError, match="abstract"):
            _WholeValueTranslator()  # type: ignore[abstract]
