"""Escape and unescape strings for Java, EcmaScript, JSON, XML, HTML and CSV.

Each flavour is a module-level translator built once at import time, plus a
function wrapping its ``translate()``. All functions pass None through.

Example:
    >>> escape_java('He didn\\'t say, "Stop!"')
    'He didn\\'t say, \\\\"Stop!\\\\"'
    >>> unescape_html4("&lt;caf&eacute;&gt;")
    '<café>'

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from textescape.constants import (
    C1_CONTROL_RANGES,
    PRINTABLE_ASCII_HIGH,
    PRINTABLE_ASCII_LOW,
    XML10_REMOVED_CODE_POINTS,
    XML11_ESCAPED_CONTROL_RANGES,
)
from textescape.deprecation import deprecated

from .translate import entities
from .translate.base import AggregateTranslator, Translator
from .translate.csv_value import CsvEscaper, CsvUnescaper
from .translate.lookup import LookupTranslator
from .translate.numeric import NumericEntityEscaper, NumericEntityUnescaper
from .translate.octal import OctalUnescaper
from .translate.unicode import (
    JavaUnicodeEscaper,
    UnicodeUnescaper,
    UnicodeUnpairedSurrogateRemover,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Escaping translators
    "ESCAPE_JAVA",
    "ESCAPE_ECMASCRIPT",
    "ESCAPE_JSON",
    "ESCAPE_XML",
    "ESCAPE_XML10",
    "ESCAPE_XML11",
    "ESCAPE_HTML3",
    "ESCAPE_HTML4",
    "ESCAPE_CSV",
    # Unescaping translators
    "UNESCAPE_JAVA",
    "UNESCAPE_ECMASCRIPT",
    "UNESCAPE_JSON",
    "UNESCAPE_HTML3",
    "UNESCAPE_HTML4",
    "UNESCAPE_XML",
    "UNESCAPE_CSV",
    # Functions
    "escape_java",
    "escape_ecmascript",
    "escape_json",
    "escape_xml",
    "escape_xml10",
    "escape_xml11",
    "escape_html3",
    "escape_html4",
    "escape_csv",
    "unescape_java",
    "unescape_ecmascript",
    "unescape_json",
    "unescape_html3",
    "unescape_html4",
    "unescape_xml",
    "unescape_csv",
]

# ============================================================================
# ESCAPING TRANSLATORS
# ============================================================================

_JAVA_CTRL_CHARS = LookupTranslator(entities.JAVA_CTRL_CHARS_ESCAPE)
_NON_PRINTABLE_ASCII = JavaUnicodeEscaper.outside_of(PRINTABLE_ASCII_LOW, PRINTABLE_ASCII_HIGH)
_C1_CONTROLS = tuple(NumericEntityEscaper.between(low, high) for low, high in C1_CONTROL_RANGES)

ESCAPE_JAVA: Translator = (
    LookupTranslator({'"': '\\"', "\\": "\\\\"})
    .with_(_JAVA_CTRL_CHARS)
    .with_(_NON_PRINTABLE_ASCII)
)
"""Java string literal escaping. Single quotes and '/' are left alone."""

ESCAPE_ECMASCRIPT: Translator = AggregateTranslator(
    LookupTranslator({"'": "\\'", '"': '\\"', "\\": "\\\\", "/": "\\/"}),
    _JAVA_CTRL_CHARS,
    _NON_PRINTABLE_ASCII,
)
"""EcmaScript escaping: Java rules plus escaped ' and '/'."""

ESCAPE_JSON: Translator = AggregateTranslator(
    LookupTranslator({'"': '\\"', "\\": "\\\\", "/": "\\/"}),
    _JAVA_CTRL_CHARS,
    _NON_PRINTABLE_ASCII,
)
"""JSON escaping: like EcmaScript, but ' is not escaped."""

ESCAPE_XML: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_ESCAPE),
    LookupTranslator(entities.APOS_ESCAPE),
)
"""Five basic XML entities only. Prefer ESCAPE_XML10 or ESCAPE_XML11."""

ESCAPE_XML10: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_ESCAPE),
    LookupTranslator(entities.APOS_ESCAPE),
    LookupTranslator({chr(cp): "" for cp in XML10_REMOVED_CODE_POINTS}),
    *_C1_CONTROLS,
    UnicodeUnpairedSurrogateRemover(),
)
"""XML 1.0 escaping. Characters XML 1.0 cannot carry are removed."""

ESCAPE_XML11: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_ESCAPE),
    LookupTranslator(entities.APOS_ESCAPE),
    LookupTranslator(
        {"\x00": "", "\x0b": "&#11;", "\x0c": "&#12;", chr(0xFFFE): "", chr(0xFFFF): ""}
    ),
    *(NumericEntityEscaper.between(low, high) for low, high in XML11_ESCAPED_CONTROL_RANGES),
    *_C1_CONTROLS,
    UnicodeUnpairedSurrogateRemover(),
)
"""XML 1.1 escaping. Restricted control characters become character references."""

ESCAPE_HTML3: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_ESCAPE),
    LookupTranslator(entities.ISO8859_1_ESCAPE),
)
"""HTML 3.0: basic entities plus ISO-8859-1 named entities."""

ESCAPE_HTML4: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_ESCAPE),
    LookupTranslator(entities.ISO8859_1_ESCAPE),
    LookupTranslator(entities.HTML40_EXTENDED_ESCAPE),
)
"""HTML 4.0: every named entity of the HTML 4 table."""

ESCAPE_CSV: Translator = CsvEscaper()
"""Whole-value CSV quoting."""

# ============================================================================
# UNESCAPING TRANSLATORS
# ============================================================================

UNESCAPE_JAVA: Translator = AggregateTranslator(
    OctalUnescaper(),
    UnicodeUnescaper(),
    LookupTranslator(entities.JAVA_CTRL_CHARS_UNESCAPE),
    LookupTranslator({"\\\\": "\\", '\\"': '"', "\\'": "'", "\\": ""}),
)
"""Java literal unescaping. A trailing lone backslash is dropped."""

UNESCAPE_ECMASCRIPT: Translator = UNESCAPE_JAVA
UNESCAPE_JSON: Translator = UNESCAPE_JAVA

UNESCAPE_HTML3: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_UNESCAPE),
    LookupTranslator(entities.ISO8859_1_UNESCAPE),
    NumericEntityUnescaper(),
)

UNESCAPE_HTML4: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_UNESCAPE),
    LookupTranslator(entities.ISO8859_1_UNESCAPE),
    LookupTranslator(entities.HTML40_EXTENDED_UNESCAPE),
    NumericEntityUnescaper(),
)

UNESCAPE_XML: Translator = AggregateTranslator(
    LookupTranslator(entities.BASIC_UNESCAPE),
    LookupTranslator(entities.APOS_UNESCAPE),
    NumericEntityUnescaper(),
)

UNESCAPE_CSV: Translator = CsvUnescaper()

# ============================================================================
# ESCAPING FUNCTIONS
# ============================================================================


def escape_java(text: str | None) -> str | None:
    """Escape characters using Java string rules.

    Quotes, backslashes and control characters are escaped; anything
    outside printable ASCII becomes a backslash-u escape (a surrogate pair
    of them above U+FFFF). A tab becomes backslash-t, a newline
    backslash-n, and so on.

    Args:
        text: String to escape, may be None

    Returns:
        Escaped string, or None for None input
    """
    return ESCAPE_JAVA.translate(text)


def escape_ecmascript(text: str | None) -> str | None:
    """Escape characters using EcmaScript string rules.

    Like escape_java, but single quotes and forward slashes are escaped too,
    so the result is safe inside either quote style and inside a script tag.
    """
    return ESCAPE_ECMASCRIPT.translate(text)


def escape_json(text: str | None) -> str | None:
    """Escape characters using JSON string rules ('/' escaped, ' left alone)."""
    return ESCAPE_JSON.translate(text)


@deprecated("escape_xml10", removal_version="2.0.0")
def escape_xml(text: str | None) -> str | None:
    """Escape the five basic XML entities.

    Control characters and unpaired surrogates are passed through, which can
    produce a document XML parsers reject.
    """
    return ESCAPE_XML.translate(text)


def escape_xml10(text: str | None) -> str | None:
    """Escape for XML 1.0.

    Basic entities and &apos; are escaped, C1 controls (except NEL) become
    numeric entities, and characters XML 1.0 forbids are removed. Note that
    only U+0009, U+000A and U+000D survive out of the C0 range.

    Args:
        text: String to escape, may be None

    Returns:
        Escaped string, or None for None input
    """
    return ESCAPE_XML10.translate(text)


def escape_xml11(text: str | None) -> str | None:
    """Escape for XML 1.1.

    Restricted C0 and C1 controls become numeric entities; U+0000, U+FFFE,
    U+FFFF and unpaired surrogates are removed.
    """
    return ESCAPE_XML11.translate(text)


def escape_html3(text: str | None) -> str | None:
    """Escape using HTML 3.0 named entities (basic + ISO-8859-1)."""
    return ESCAPE_HTML3.translate(text)


def escape_html4(text: str | None) -> str | None:
    """Escape using HTML 4.0 named entities.

    Example:
        >>> escape_html4('"bread" & "butter"')
        '&quot;bread&quot; &amp; &quot;butter&quot;'
    """
    return ESCAPE_HTML4.translate(text)


def escape_csv(text: str | None) -> str | None:
    """Quote a CSV value when it contains a comma, quote, CR or LF.

    Embedded quotes are doubled. Values without special characters are
    returned unchanged.
    """
    return ESCAPE_CSV.translate(text)


# ============================================================================
# UNESCAPING FUNCTIONS
# ============================================================================


def unescape_java(text: str | None) -> str | None:
    """Unescape Java string literal escapes.

    Handles octal escapes, backslash-u escapes (recombining surrogate pairs),
    the control-character escapes and escaped quotes and backslashes.

    Raises:
        MalformedEscapeError: If a backslash-u escape is truncated or not hex
    """
    return UNESCAPE_JAVA.translate(text)


def unescape_ecmascript(text: str | None) -> str | None:
    """Unescape EcmaScript string escapes (same rules as unescape_java)."""
    return UNESCAPE_ECMASCRIPT.translate(text)


def unescape_json(text: str | None) -> str | None:
    """Unescape JSON string escapes (same rules as unescape_java)."""
    return UNESCAPE_JSON.translate(text)


def unescape_html3(text: str | None) -> str | None:
    """Unescape HTML 3.0 named entities and numeric entities."""
    return UNESCAPE_HTML3.translate(text)


def unescape_html4(text: str | None) -> str | None:
    """Unescape HTML 4.0 named entities and numeric entities.

    Unknown entities are left as written; numeric entities need their
    terminating semicolon.
    """
    return UNESCAPE_HTML4.translate(text)


def unescape_xml(text: str | None) -> str | None:
    """Unescape the five XML entities and numeric entities."""
    return UNESCAPE_XML.translate(text)


def unescape_csv(text: str | None) -> str | None:
    """Undo escape_csv.

    Quotes are only removed when the quoted content contains a comma, quote,
    CR or LF; doubled quotes inside are collapsed.
    """
    return UNESCAPE_CSV.translate(text)
