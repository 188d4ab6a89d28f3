"""Numeric character references: ``&#NNN;`` and ``&#xHH;``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from textescape.constants import MAX_CODE_POINT
from textescape.diagnostics import ErrorTemplate, MalformedEscapeError
from textescape.enums import SemicolonMode

from .base import Translator
from .ranges import RangeEscaper

__all__ = [
    "NumericEntityEscaper",
    "NumericEntityUnescaper",
]

logger = logging.getLogger(__name__)

# Scanned for both bases; a decimal entity with letters is rejected on parse
_ENTITY_DIGITS = frozenset("0123456789abcdefABCDEF")


class NumericEntityEscaper(RangeEscaper):
    """Escape code points in range as decimal numeric entities.

    Example:
        >>> NumericEntityEscaper.between(0x7F, 0x9F).translate("a" + chr(0x80))
        'a&#128;'
    """

    __slots__ = ()

    def write_escape(self, code_point: int, out: list[str]) -> None:
        out.append(f"&#{code_point};")


class NumericEntityUnescaper(Translator):
    """Unescape decimal and hexadecimal numeric entities.

    The semicolon policy comes from ``SemicolonMode`` options; with no
    options the semicolon is required. Entities that do not parse, or name
    a value beyond U+10FFFF, are left in the output unchanged.
    """

    __slots__ = ("_options",)

    def __init__(self, *options: SemicolonMode) -> None:
        self._options: frozenset[SemicolonMode] = (
            frozenset(options) if options else frozenset((SemicolonMode.REQUIRED,))
        )

    def is_set(self, option: SemicolonMode) -> bool:
        return option in self._options

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        length = len(text)
        # Need at least one character after "&#"
        if text[index] != "&" or index >= length - 2 or text[index + 1] != "#":
            return 0

        start = index + 2
        is_hex = text[start] in "xX"
        if is_hex:
            start += 1
            if start == length:
                return 0

        end = start
        while end < length and text[end] in _ENTITY_DIGITS:
            end += 1

        semicolon = end != length and text[end] == ";"
        if not semicolon:
            if self.is_set(SemicolonMode.REQUIRED):
                return 0
            if self.is_set(SemicolonMode.ERROR_IF_MISSING):
                raise MalformedEscapeError(ErrorTemplate.entity_semicolon_missing(index))

        digits = text[start:end]
        try:
            value = int(digits, 16 if is_hex else 10)
        except ValueError:
            return 0
        if value > MAX_CODE_POINT:
            logger.debug("Numeric entity at index %d out of range: %s", index, digits)
            return 0

        out.append(chr(value))
        return 2 + (end - start) + (1 if is_hex else 0) + (1 if semicolon else 0)

    def __repr__(self) -> str:
        options = ", ".join(f"SemicolonMode.{o.name}" for o in sorted(self._options))
        return f"NumericEntityUnescaper({options})"
