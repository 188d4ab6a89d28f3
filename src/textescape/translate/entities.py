"""Entity tables for the built-in escape flavours.

Each ``*_ESCAPE`` table maps a character to its escaped form and each
``*_UNESCAPE`` table is its inverse. Tables are read-only mappings built
once at import time.

The HTML named entities come from the standard library's HTML 4 table
(``html.entities.codepoint2name``), split into the three groups the HTML
flavours layer on top of each other.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from html.entities import codepoint2name
from types import MappingProxyType

__all__ = [
    "APOS_ESCAPE",
    "APOS_UNESCAPE",
    "BASIC_ESCAPE",
    "BASIC_UNESCAPE",
    "HTML40_EXTENDED_ESCAPE",
    "HTML40_EXTENDED_UNESCAPE",
    "ISO8859_1_ESCAPE",
    "ISO8859_1_UNESCAPE",
    "JAVA_CTRL_CHARS_ESCAPE",
    "JAVA_CTRL_CHARS_UNESCAPE",
    "invert",
]

_BASIC_CODE_POINTS = frozenset((ord('"'), ord("&"), ord("<"), ord(">")))


def invert(table: Mapping[str, str]) -> Mapping[str, str]:
    """Swap keys and values of an entity table.

    Args:
        table: Escape table to invert

    Returns:
        Read-only unescape table
    """
    return MappingProxyType({escaped: plain for plain, escaped in table.items()})


def _named(selector: range | frozenset[int]) -> Mapping[str, str]:
    return MappingProxyType(
        {chr(cp): f"&{name};" for cp, name in sorted(codepoint2name.items()) if cp in selector}
    )


# &quot; &amp; &lt; &gt;
BASIC_ESCAPE: Mapping[str, str] = _named(_BASIC_CODE_POINTS)
BASIC_UNESCAPE: Mapping[str, str] = invert(BASIC_ESCAPE)

# &apos; is XML (and XHTML), not HTML 4
APOS_ESCAPE: Mapping[str, str] = MappingProxyType({"'": "&apos;"})
APOS_UNESCAPE: Mapping[str, str] = invert(APOS_ESCAPE)

# Latin-1 supplement, U+00A0 (&nbsp;) through U+00FF (&yuml;)
ISO8859_1_ESCAPE: Mapping[str, str] = _named(range(0xA0, 0x100))
ISO8859_1_UNESCAPE: Mapping[str, str] = invert(ISO8859_1_ESCAPE)

# HTML 4.0 symbols, Greek letters and special characters beyond Latin-1
HTML40_EXTENDED_ESCAPE: Mapping[str, str] = _named(range(0x100, 0x10000))
HTML40_EXTENDED_UNESCAPE: Mapping[str, str] = invert(HTML40_EXTENDED_ESCAPE)

JAVA_CTRL_CHARS_ESCAPE: Mapping[str, str] = MappingProxyType(
    {
        "\b": "\\b",
        "\n": "\\n",
        "\t": "\\t",
        "\f": "\\f",
        "\r": "\\r",
    }
)
JAVA_CTRL_CHARS_UNESCAPE: Mapping[str, str] = invert(JAVA_CTRL_CHARS_ESCAPE)
