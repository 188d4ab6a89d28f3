"""Composable text translators.

Building blocks behind the escape flavours in ``textescape.escape``. Combine
them to build custom flavours:

    >>> from textescape.escape import ESCAPE_JAVA
    >>> from textescape.translate import LookupTranslator
    >>> custom = ESCAPE_JAVA.with_(LookupTranslator({"$": "\\\\$"}))

Public API:
    Translator - Abstract base; translate(), translate_to(), with_()
    CodePointTranslator - Base for per-code-point translators
    AggregateTranslator - Ordered first-match-wins composition
    LookupTranslator - Longest-prefix table lookup
    UnicodeEscaper, JavaUnicodeEscaper, UnicodeUnescaper
    NumericEntityEscaper, NumericEntityUnescaper
    OctalUnescaper
    CsvEscaper, CsvUnescaper
    UnicodeUnpairedSurrogateRemover
    EscapeRange - Which code points a range escaper rewrites

Python 3.13+. Zero external dependencies.
"""

from . import entities
from .base import AggregateTranslator, CodePointTranslator, TextWriter, Translator
from .csv_value import CsvEscaper, CsvUnescaper
from .lookup import LookupTranslator
from .numeric import NumericEntityEscaper, NumericEntityUnescaper
from .octal import OctalUnescaper
from .ranges import EscapeRange, RangeEscaper
from .unicode import (
    JavaUnicodeEscaper,
    UnicodeEscaper,
    UnicodeUnescaper,
    UnicodeUnpairedSurrogateRemover,
)

__all__ = [
    "AggregateTranslator",
    "CodePointTranslator",
    "CsvEscaper",
    "CsvUnescaper",
    "EscapeRange",
    "JavaUnicodeEscaper",
    "LookupTranslator",
    "NumericEntityEscaper",
    "NumericEntityUnescaper",
    "OctalUnescaper",
    "RangeEscaper",
    "TextWriter",
    "Translator",
    "UnicodeEscaper",
    "UnicodeUnescaper",
    "UnicodeUnpairedSurrogateRemover",
    "entities",
]
