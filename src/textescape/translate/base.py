"""Translator base classes and the main translation loop.

A translator looks at the input starting at one index and either writes a
replacement for some of it and reports how many code points it consumed, or
returns 0 to say "not mine". ``Translator.translate`` drives that contract
over the whole string, copying unclaimed code points through unchanged.

Counts are in code points. A Python string normally stores one code point per
index, but it can also carry an explicit UTF-16 surrogate pair (two indices,
e.g. text decoded with ``errors="surrogatepass"``). The loop treats such a
pair as one code point and never splits it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from textescape.constants import (
    MAX_HIGH_SURROGATE,
    MAX_LOW_SURROGATE,
    MIN_HIGH_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SUPPLEMENTARY_CODE_POINT,
)
from textescape.diagnostics import ErrorTemplate, NullArgumentError

__all__ = [
    "AggregateTranslator",
    "CodePointTranslator",
    "TextWriter",
    "Translator",
    "code_point_at",
    "hex_upper",
]

logger = logging.getLogger(__name__)


class TextWriter(Protocol):
    """Anything translate_to() can write into (io.StringIO, open text files)."""

    def write(self, s: str, /) -> object:
        ...  # pragma: no cover  # Protocol stub - not executable


def code_point_at(text: str, index: int) -> tuple[int, int]:
    """Decode the code point starting at index.

    Args:
        text: Input string
        index: Position of the first (or only) index of the code point

    Returns:
        (code_point, width) where width is 2 for an explicit surrogate pair
        and 1 otherwise. Lone surrogates decode to themselves.
    """
    high = ord(text[index])
    if MIN_HIGH_SURROGATE <= high <= MAX_HIGH_SURROGATE and index + 1 < len(text):
        low = ord(text[index + 1])
        if MIN_LOW_SURROGATE <= low <= MAX_LOW_SURROGATE:
            combined = ((high - MIN_HIGH_SURROGATE) << 10) | (low - MIN_LOW_SURROGATE)
            return MIN_SUPPLEMENTARY_CODE_POINT + combined, 2
    return high, 1


def hex_upper(code_point: int) -> str:
    """Upper-case hexadecimal digits of code_point, no prefix, no padding."""
    return format(code_point, "X")


class Translator(ABC):
    """Base class for all escaping and unescaping translators.

    Subclasses implement ``translate_at``. Instances are immutable after
    construction and safe to share between threads.
    """

    __slots__ = ()

    @abstractmethod
    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        """Translate the content of text starting at index.

        Args:
            text: Input being translated
            index: Current position in text
            out: Output buffer to append replacement text to

        Returns:
            Number of code points consumed; 0 when nothing matched
        """

    def translate(self, text: str | None) -> str | None:
        """Translate a whole string.

        Args:
            text: Input to translate, may be None

        Returns:
            Translated string, or None when text is None
        """
        if text is None:
            return None
        out: list[str] = []
        self._translate_into(text, out)
        return "".join(out)

    def translate_to(self, text: str | None, writer: TextWriter | None) -> None:
        """Translate a whole string onto a writer.

        Args:
            text: Input to translate; None writes nothing
            writer: Object with a write(str) method

        Raises:
            NullArgumentError: If writer is None
        """
        if writer is None:
            raise NullArgumentError(ErrorTemplate.writer_required())
        if text is None:
            return
        out: list[str] = []
        self._translate_into(text, out)
        writer.write("".join(out))

    def with_(self, *translators: Translator | None) -> AggregateTranslator:
        """Merge this translator with others, this one tried first.

        Args:
            *translators: Translators to try after this one

        Returns:
            New AggregateTranslator; self is unchanged
        """
        return AggregateTranslator(self, *translators)

    def _translate_into(self, text: str, out: list[str]) -> None:
        pos = 0
        length = len(text)
        while pos < length:
            consumed = self.translate_at(text, pos, out)
            if consumed == 0:
                _, width = code_point_at(text, pos)
                out.append(text[pos : pos + width])
                pos += width
                continue
            # Translators count code points; step over pairs whole
            for _ in range(consumed):
                pos += code_point_at(text, pos)[1] if pos < length else 1


class CodePointTranslator(Translator):
    """Translator that decides one code point at a time.

    ``translate_at`` decodes the code point at the index (combining an
    explicit surrogate pair) and hands it to ``translate_code_point``.
    """

    __slots__ = ()

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        code_point, _ = code_point_at(text, index)
        return 1 if self.translate_code_point(code_point, out) else 0

    @abstractmethod
    def translate_code_point(self, code_point: int, out: list[str]) -> bool:
        """Translate a single code point.

        Args:
            code_point: Code point to translate
            out: Output buffer

        Returns:
            True if the code point was translated (and consumed)
        """


class AggregateTranslator(Translator):
    """Ordered composition of translators.

    Each child is tried in order at every position; the first one that
    consumes anything wins, even if a later child would match more.
    None entries are skipped so optional translators can be passed inline.
    """

    __slots__ = ("_translators",)

    def __init__(self, *translators: Translator | None) -> None:
        self._translators: tuple[Translator, ...] = tuple(t for t in translators if t is not None)
        logger.debug("AggregateTranslator built from %d translators", len(self._translators))

    @property
    def translators(self) -> tuple[Translator, ...]:
        """Child translators in the order they are tried."""
        return self._translators

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        for translator in self._translators:
            consumed = translator.translate_at(text, index, out)
            if consumed != 0:
                return consumed
        return 0

    def __repr__(self) -> str:
        return f"AggregateTranslator({', '.join(map(repr, self._translators))})"
