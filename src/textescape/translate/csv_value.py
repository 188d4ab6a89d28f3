"""Whole-value CSV quoting (RFC 4180 style).

Both translators handle the entire input in a single call at index 0 and
report it all consumed. They are meant to be used standalone, not inside
an AggregateTranslator where they could be asked about a later position.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import abstractmethod

from textescape.constants import CSV_QUOTE, CSV_SEARCH_CHARS
from textescape.diagnostics import ErrorTemplate, InvalidStateError

from .base import Translator

__all__ = [
    "CsvEscaper",
    "CsvUnescaper",
]

_DOUBLED_QUOTE = CSV_QUOTE + CSV_QUOTE


def _needs_quoting(text: str) -> bool:
    return not CSV_SEARCH_CHARS.isdisjoint(text)


class _WholeValueTranslator(Translator):
    __slots__ = ()

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        if index != 0:
            raise InvalidStateError(
                ErrorTemplate.translator_index_invalid(type(self).__name__, index)
            )
        out.append(self.translate_value(text))
        return len(text)

    @abstractmethod
    def translate_value(self, text: str) -> str:
        """Translate the whole value."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CsvEscaper(_WholeValueTranslator):
    """Quote a value if it contains a delimiter, quote, CR or LF.

    Embedded quotes are doubled:

        >>> CsvEscaper().translate('say "hi", then go')
        '"say ""hi"", then go"'
    """

    __slots__ = ()

    def translate_value(self, text: str) -> str:
        if not _needs_quoting(text):
            return text
        return CSV_QUOTE + text.replace(CSV_QUOTE, _DOUBLED_QUOTE) + CSV_QUOTE


class CsvUnescaper(_WholeValueTranslator):
    """Undo CsvEscaper.

    A value is only unquoted when it is wrapped in quotes and the content
    between them actually needed quoting; ``"abc"`` comes back as written.
    """

    __slots__ = ()

    def translate_value(self, text: str) -> str:
        # A lone quote is both prefix and suffix but wraps nothing
        if len(text) < 2 or text[0] != CSV_QUOTE or text[-1] != CSV_QUOTE:
            return text
        inner = text[1:-1]
        if not _needs_quoting(inner):
            return text
        return inner.replace(_DOUBLED_QUOTE, CSV_QUOTE)
