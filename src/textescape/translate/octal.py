"""Octal escapes as found in Java and C string literals.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from .base import Translator

__all__ = ["OctalUnescaper"]

_OCTAL_DIGITS = frozenset("01234567")
_ZERO_TO_THREE = frozenset("0123")


class OctalUnescaper(Translator):
    """Unescape a backslash followed by one to three octal digits.

    A third digit is only taken when the first is 0-3, so the largest
    value is ``\\377`` (255); ``\\400`` reads as ``\\40`` then ``0``.
    """

    __slots__ = ()

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        remaining = len(text) - index - 1
        if text[index] != "\\" or remaining <= 0 or text[index + 1] not in _OCTAL_DIGITS:
            return 0

        digits = text[index + 1]
        if remaining > 1 and text[index + 2] in _OCTAL_DIGITS:
            digits += text[index + 2]
            if remaining > 2 and digits[0] in _ZERO_TO_THREE and text[index + 3] in _OCTAL_DIGITS:
                digits += text[index + 3]

        out.append(chr(int(digits, 8)))
        return 1 + len(digits)

    def __repr__(self) -> str:
        return "OctalUnescaper()"
