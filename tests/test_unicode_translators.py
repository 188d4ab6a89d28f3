"""Tests for backslash-u escaping, unescaping and unpaired surrogate removal."""

from __future__ import annotations

import dataclasses

import pytest

from textescape.constants import MAX_CODE_POINT
from textescape.diagnostics import DiagnosticCode, InvalidArgumentError, MalformedEscapeError
from textescape.translate import (
    EscapeRange,
    JavaUnicodeEscaper,
    UnicodeEscaper,
    UnicodeUnescaper,
    UnicodeUnpairedSurrogateRemover,
)

GRINNING_FACE = chr(0x1F600)
EXPLICIT_PAIR = chr(0xD83D) + chr(0xDE00)

# ============================================================================
# ESCAPE RANGE
# ============================================================================


class TestEscapeRange:
    """Test EscapeRange selection and validation."""

    def test_default_escapes_everything(self) -> None:
        """Default range covers every code point."""
        r = EscapeRange()
        assert r.contains_escape(0)
        assert r.contains_escape(MAX_CODE_POINT)

    def test_between_is_inclusive(self) -> None:
        """between=True escapes inside [low, high] including the bounds."""
        r = EscapeRange(10, 20, between=True)
        assert r.contains_escape(10)
        assert r.contains_escape(20)
        assert not r.contains_escape(9)
        assert not r.contains_escape(21)

    def test_outside_of_excludes_bounds(self) -> None:
        """between=False escapes only strictly outside [low, high]."""
        r = EscapeRange(10, 20, between=False)
        assert not r.contains_escape(10)
        assert not r.contains_escape(20)
        assert r.contains_escape(9)
        assert r.contains_escape(21)

    def test_negative_low_rejected(self) -> None:
        """Negative lower bound is invalid."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            EscapeRange(-1, 10)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.ESCAPE_RANGE_INVALID

    def test_inverted_bounds_rejected(self) -> None:
        """high < low is invalid."""
        with pytest.raises(InvalidArgumentError, match=r"\[20, 10\]"):
            EscapeRange(20, 10)

    def test_single_point_range_allowed(self) -> None:
        """low == high is a valid one-code-point range."""
        assert EscapeRange(5, 5).contains_escape(5)

    def test_frozen(self) -> None:
        """EscapeRange is immutable."""
        r = EscapeRange(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.low = 0  # type: ignore[misc]


# ============================================================================
# UNICODE ESCAPER
# ============================================================================


class TestUnicodeEscaper:
    """Test UnicodeEscaper and its factories."""

    def test_default_escapes_everything(self) -> None:
        """No-argument constructor escapes every code point."""
        assert UnicodeEscaper().translate("Az") == "\\u0041\\u007A"

    def test_four_digits_zero_padded(self) -> None:
        """BMP code points use exactly four upper-case hex digits."""
        assert UnicodeEscaper().translate("\x00\xe9") == "\\u0000\\u00E9"

    def test_between(self) -> None:
        """between escapes only the inclusive range."""
        assert UnicodeEscaper.between(0x41, 0x42).translate("ABC") == "\\u0041\\u0042C"

    def test_outside_of(self) -> None:
        """outside_of leaves the inclusive range alone."""
        escaper = UnicodeEscaper.outside_of(32, 0x7F)
        assert escaper.translate("a\x00\xe9~") == "a\\u0000\\u00E9~"

    def test_above(self) -> None:
        """above escapes strictly greater code points."""
        escaper = UnicodeEscaper.above(0x7F)
        assert escaper.translate("\x7f\x80") == "\x7f\\u0080"

    def test_below(self) -> None:
        """below escapes strictly smaller code points."""
        escaper = UnicodeEscaper.below(0x20)
        assert escaper.translate("\x1f ") == "\\u001F "

    def test_astral_single_escape(self) -> None:
        """Plain UnicodeEscaper writes the full hex value above U+FFFF."""
        assert UnicodeEscaper().translate(GRINNING_FACE) == "\\u1F600"

    def test_factories_return_subclass(self) -> None:
        """Factories build the class they are called on."""
        assert type(JavaUnicodeEscaper.outside_of(32, 0x7F)) is JavaUnicodeEscaper
        assert type(UnicodeEscaper.above(0x7F)) is UnicodeEscaper

    def test_escape_range_exposed(self) -> None:
        """The configured range is available for inspection."""
        escaper = UnicodeEscaper.outside_of(32, 0x7F)
        assert escaper.escape_range == EscapeRange(32, 0x7F, between=False)

    def test_repr(self) -> None:
        """repr shows factory and bounds."""
        assert repr(JavaUnicodeEscaper.outside_of(32, 0x7F)) == (
            "JavaUnicodeEscaper.outside_of(0x20, 0x7f)"
        )


class TestJavaUnicodeEscaper:
    """Test the surrogate pair form for astral code points."""

    def test_astral_as_surrogate_pair(self) -> None:
        """Code points above U+FFFF become two escapes."""
        assert JavaUnicodeEscaper().translate(GRINNING_FACE) == "\\uD83D\\uDE00"

    def test_explicit_pair_same_as_astral(self) -> None:
        """An explicit surrogate pair escapes like the astral character."""
        assert JavaUnicodeEscaper().translate(EXPLICIT_PAIR) == "\\uD83D\\uDE00"

    def test_highest_code_point(self) -> None:
        """U+10FFFF maps to the last surrogate pair."""
        assert JavaUnicodeEscaper().translate(chr(MAX_CODE_POINT)) == "\\uDBFF\\uDFFF"

    def test_bmp_unchanged_from_parent(self) -> None:
        """BMP code points use the ordinary four-digit form."""
        assert JavaUnicodeEscaper().translate("\xe9") == "\\u00E9"


# ============================================================================
# UNICODE UNESCAPER
# ============================================================================


class TestUnicodeUnescaper:
    """Test UnicodeUnescaper parsing."""

    def test_basic(self) -> None:
        """Four hex digits decode to the code point."""
        assert UnicodeUnescaper().translate("\\u0041") == "A"

    def test_lower_case_hex(self) -> None:
        """Hex digits are case-insensitive."""
        assert UnicodeUnescaper().translate("\\u00e9") == "\xe9"

    def test_multiple_u(self) -> None:
        """Any number of 'u' characters is accepted."""
        assert UnicodeUnescaper().translate("\\uuuu0041") == "A"

    def test_plus_sign(self) -> None:
        """An optional '+' before the digits is accepted."""
        assert UnicodeUnescaper().translate("\\u+0041") == "A"

    def test_consumed_length(self) -> None:
        """translate_at reports backslash + u + four digits."""
        out: list[str] = []
        assert UnicodeUnescaper().translate_at("\\u0041", 0, out) == 6
        assert out == ["A"]

    def test_surrounding_text_kept(self) -> None:
        """Text around the escape is copied."""
        assert UnicodeUnescaper().translate("x\\u0041y") == "xAy"

    def test_not_an_escape(self) -> None:
        """Backslash without 'u' is left alone."""
        assert UnicodeUnescaper().translate("\\x41") == "\\x41"

    def test_trailing_backslash(self) -> None:
        """A backslash at end of input is not an escape."""
        assert UnicodeUnescaper().translate("a\\") == "a\\"

    def test_surrogate_pair_combined(self) -> None:
        """High + low surrogate escapes decode to one astral character."""
        assert UnicodeUnescaper().translate("\\uD83D\\uDE00") == GRINNING_FACE

    def test_surrogate_pair_consumed_length(self) -> None:
        """Both escapes of a pair are consumed together."""
        out: list[str] = []
        assert UnicodeUnescaper().translate_at("\\uD83D\\uDE00", 0, out) == 12
        assert out == [GRINNING_FACE]

    def test_lone_high_surrogate(self) -> None:
        """A high surrogate escape without a partner decodes alone."""
        assert UnicodeUnescaper().translate("\\uD83D") == chr(0xD83D)

    def test_high_surrogate_then_ordinary_escape(self) -> None:
        """A high surrogate followed by a non-surrogate escape is not combined."""
        assert UnicodeUnescaper().translate("\\uD83D\\u0041") == chr(0xD83D) + "A"

    def test_truncated_raises(self) -> None:
        """Fewer than four characters after the prefix is malformed."""
        with pytest.raises(MalformedEscapeError, match="Less than 4 hex digits") as exc_info:
            UnicodeUnescaper().translate("\\u00")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNICODE_ESCAPE_TRUNCATED

    def test_truncated_after_u_run(self) -> None:
        """A run of u characters at end of input is malformed."""
        with pytest.raises(MalformedEscapeError):
            UnicodeUnescaper().translate("\\uuu")

    def test_invalid_hex_raises(self) -> None:
        """Non-hex digits are malformed."""
        with pytest.raises(MalformedEscapeError, match="Unable to parse unicode value") as exc_info:
            UnicodeUnescaper().translate("\\uzz12")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNICODE_ESCAPE_INVALID

    def test_python_int_prefixes_rejected(self) -> None:
        """Digits int() would tolerate (0x, underscores, spaces) are still malformed."""
        for bad in ("\\u0x12", "\\u1_23", "\\u 123"):
            with pytest.raises(MalformedEscapeError):
                UnicodeUnescaper().translate(bad)

    def test_error_position(self) -> None:
        """Diagnostic points at the backslash that started the escape."""
        with pytest.raises(MalformedEscapeError) as exc_info:
            UnicodeUnescaper().translate("ab\\u00")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.position == 2

    def test_malformed_is_value_error(self) -> None:
        """MalformedEscapeError is catchable as ValueError."""
        with pytest.raises(ValueError):
            UnicodeUnescaper().translate("\\u12")


# ============================================================================
# UNPAIRED SURROGATE REMOVER
# ============================================================================


class TestUnicodeUnpairedSurrogateRemover:
    """Test removal of lone surrogates."""

    def test_lone_high_removed(self) -> None:
        """A lone high surrogate is dropped."""
        assert UnicodeUnpairedSurrogateRemover().translate("a" + chr(0xD800) + "b") == "ab"

    def test_lone_low_removed(self) -> None:
        """A lone low surrogate is dropped."""
        assert UnicodeUnpairedSurrogateRemover().translate(chr(0xDFFF) + "b") == "b"

    def test_explicit_pair_kept(self) -> None:
        """A valid pair is one astral code point and is kept."""
        assert UnicodeUnpairedSurrogateRemover().translate(EXPLICIT_PAIR) == EXPLICIT_PAIR

    def test_reversed_pair_removed(self) -> None:
        """Low followed by high is two unpaired surrogates."""
        assert UnicodeUnpairedSurrogateRemover().translate(chr(0xDE00) + chr(0xD83D)) == ""

    def test_ordinary_text_unchanged(self) -> None:
        """Non-surrogate text passes through."""
        text = "plain " + GRINNING_FACE
        assert UnicodeUnpairedSurrogateRemover().translate(text) == text
