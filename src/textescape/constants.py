"""Shared constants for textescape.

This module provides centralized configuration constants used across the
translator framework and the escape facade. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Code point limits: Unicode and surrogate boundaries
- Escape windows: Ranges left alone or escaped by the built-in flavours
- CSV: Delimiter, quote, and trigger characters for CSV quoting

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code point limits
    "MAX_CODE_POINT",
    "MIN_HIGH_SURROGATE",
    "MAX_HIGH_SURROGATE",
    "MIN_LOW_SURROGATE",
    "MAX_LOW_SURROGATE",
    "MIN_SUPPLEMENTARY_CODE_POINT",
    # Escape windows
    "PRINTABLE_ASCII_LOW",
    "PRINTABLE_ASCII_HIGH",
    "C1_CONTROL_RANGES",
    "XML10_REMOVED_CODE_POINTS",
    "XML11_ESCAPED_CONTROL_RANGES",
    # CSV
    "CSV_DELIMITER",
    "CSV_QUOTE",
    "CSV_SEARCH_CHARS",
]

# ============================================================================
# CODE POINT LIMITS
# ============================================================================

# Highest Unicode scalar value. Python's chr() rejects anything above it.
MAX_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate blocks. Python strings may hold these as lone code points
# (e.g. after decoding with errors="surrogatepass").
MIN_HIGH_SURROGATE: int = 0xD800
MAX_HIGH_SURROGATE: int = 0xDBFF
MIN_LOW_SURROGATE: int = 0xDC00
MAX_LOW_SURROGATE: int = 0xDFFF

# First code point outside the Basic Multilingual Plane.
MIN_SUPPLEMENTARY_CODE_POINT: int = 0x10000

# ============================================================================
# ESCAPE WINDOWS
# ============================================================================

# Java, EcmaScript and JSON leave printable ASCII alone and escape everything
# outside [32, 0x7F] as a backslash-u sequence.
PRINTABLE_ASCII_LOW: int = 32
PRINTABLE_ASCII_HIGH: int = 0x7F

# C1 controls (minus NEL, U+0085) are numerically escaped by both XML flavours.
C1_CONTROL_RANGES: tuple[tuple[int, int], ...] = ((0x7F, 0x84), (0x86, 0x9F))

# Characters XML 1.0 cannot represent at all, even as a character reference.
XML10_REMOVED_CODE_POINTS: tuple[int, ...] = (
    *range(0x00, 0x09),
    0x0B,
    0x0C,
    *range(0x0E, 0x20),
    0xFFFE,
    0xFFFF,
)

# C0 controls that XML 1.1 allows only as character references.
XML11_ESCAPED_CONTROL_RANGES: tuple[tuple[int, int], ...] = ((0x01, 0x08), (0x0E, 0x1F))

# ============================================================================
# CSV
# ============================================================================

CSV_DELIMITER: str = ","
CSV_QUOTE: str = '"'

# A CSV value containing any of these must be quoted.
CSV_SEARCH_CHARS: frozenset[str] = frozenset((CSV_DELIMITER, CSV_QUOTE, "\r", "\n"))
