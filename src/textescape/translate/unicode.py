"""Backslash-u escaping and unescaping.

UnicodeEscaper writes ``\\uXXXX`` for code points in its range.
JavaUnicodeEscaper differs only above U+FFFF, where it writes the UTF-16
surrogate pair as two escapes the way Java and JavaScript sources spell them.
UnicodeUnescaper reads them back, recombining such pairs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from textescape.constants import (
    MAX_HIGH_SURROGATE,
    MAX_LOW_SURROGATE,
    MIN_HIGH_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SUPPLEMENTARY_CODE_POINT,
)
from textescape.diagnostics import ErrorTemplate, MalformedEscapeError

from .base import CodePointTranslator, Translator, hex_upper
from .ranges import RangeEscaper

__all__ = [
    "JavaUnicodeEscaper",
    "UnicodeEscaper",
    "UnicodeUnescaper",
    "UnicodeUnpairedSurrogateRemover",
]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_BACKSLASH_U = "\\u"


class UnicodeEscaper(RangeEscaper):
    """Escape code points in range as backslash-u hex sequences.

    Code points up to U+FFFF get exactly four upper-case hex digits.
    Larger ones go through ``to_utf16_escape``, which writes the full
    hex value after a single backslash-u.
    """

    __slots__ = ()

    def write_escape(self, code_point: int, out: list[str]) -> None:
        if code_point > 0xFFFF:
            out.append(self.to_utf16_escape(code_point))
        else:
            out.append(_BACKSLASH_U + format(code_point, "04X"))

    def to_utf16_escape(self, code_point: int) -> str:
        return _BACKSLASH_U + hex_upper(code_point)


class JavaUnicodeEscaper(UnicodeEscaper):
    """UnicodeEscaper that splits astral code points into a surrogate pair."""

    __slots__ = ()

    def to_utf16_escape(self, code_point: int) -> str:
        offset = code_point - MIN_SUPPLEMENTARY_CODE_POINT
        high = MIN_HIGH_SURROGATE + (offset >> 10)
        low = MIN_LOW_SURROGATE + (offset & 0x3FF)
        return _BACKSLASH_U + hex_upper(high) + _BACKSLASH_U + hex_upper(low)


class UnicodeUnescaper(Translator):
    """Unescape backslash-u sequences.

    Accepts any number of ``u`` characters and an optional ``+`` before the
    four hex digits. A high surrogate escape directly followed by a low
    surrogate escape decodes to the single code point they encode.

    Raises:
        MalformedEscapeError: If fewer than four characters follow the
            prefix, or they are not all hexadecimal digits
    """

    __slots__ = ()

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        parsed = self._parse(text, index)
        if parsed is None:
            return 0
        value, consumed = parsed

        if MIN_HIGH_SURROGATE <= value <= MAX_HIGH_SURROGATE:
            trailing = self._parse(text, index + consumed)
            if trailing is not None and MIN_LOW_SURROGATE <= trailing[0] <= MAX_LOW_SURROGATE:
                combined = ((value - MIN_HIGH_SURROGATE) << 10) | (trailing[0] - MIN_LOW_SURROGATE)
                out.append(chr(MIN_SUPPLEMENTARY_CODE_POINT + combined))
                return consumed + trailing[1]

        out.append(chr(value))
        return consumed

    @staticmethod
    def _parse(text: str, index: int) -> tuple[int, int] | None:
        """Parse one escape at index into (value, consumed), None if absent."""
        length = len(text)
        if index + 1 >= length or text[index] != "\\" or text[index + 1] != "u":
            return None

        i = 2
        while index + i < length and text[index + i] == "u":
            i += 1
        if index + i < length and text[index + i] == "+":
            i += 1

        if index + i + 4 > length:
            raise MalformedEscapeError(ErrorTemplate.unicode_escape_truncated(text[index:], index))

        digits = text[index + i : index + i + 4]
        if not _HEX_DIGITS.issuperset(digits):
            raise MalformedEscapeError(ErrorTemplate.unicode_escape_invalid(digits, index))
        return int(digits, 16), i + 4

    def __repr__(self) -> str:
        return "UnicodeUnescaper()"


class UnicodeUnpairedSurrogateRemover(CodePointTranslator):
    """Drop surrogate code points that are not part of a valid pair."""

    __slots__ = ()

    def translate_code_point(self, code_point: int, out: list[str]) -> bool:
        # Paired surrogates arrive here already combined above U+FFFF
        return MIN_HIGH_SURROGATE <= code_point <= MAX_LOW_SURROGATE

    def __repr__(self) -> str:
        return "UnicodeUnpairedSurrogateRemover()"
