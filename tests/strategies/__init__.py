"""Hypothesis strategies for textescape property-based testing.

Usage:
    from tests.strategies import unicode_text, xml10_safe_text
    from tests.strategies.text import java_special_text, csv_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - java_special_text, markup_special_text, csv_values
"""

from .text import (
    CSV_SPECIALS,
    JAVA_SPECIALS,
    MARKUP_SPECIALS,
    astral_chars,
    control_chars,
    csv_values,
    java_special_text,
    latin1_chars,
    markup_special_text,
    printable_ascii_text,
    unicode_chars,
    unicode_text,
    xml10_safe_text,
    xml11_safe_text,
)

__all__ = [
    "CSV_SPECIALS",
    "JAVA_SPECIALS",
    "MARKUP_SPECIALS",
    "astral_chars",
    "control_chars",
    "csv_values",
    "java_special_text",
    "latin1_chars",
    "markup_special_text",
    "printable_ascii_text",
    "unicode_chars",
    "unicode_text",
    "xml10_safe_text",
    "xml11_safe_text",
]
