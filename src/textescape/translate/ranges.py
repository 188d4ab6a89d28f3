"""Code point ranges for the range-driven escapers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Self

from textescape.constants import MAX_CODE_POINT
from textescape.diagnostics import ErrorTemplate, InvalidArgumentError

from .base import CodePointTranslator

__all__ = [
    "EscapeRange",
    "RangeEscaper",
]


@dataclass(frozen=True, slots=True)
class EscapeRange:
    """Which code points a range-driven escaper rewrites.

    Attributes:
        low: Lower bound, inclusive
        high: Upper bound, inclusive
        between: True escapes code points inside [low, high];
            False escapes everything outside it

    Raises:
        InvalidArgumentError: If low is negative or high < low
    """

    low: int = 0
    high: int = MAX_CODE_POINT
    between: bool = True

    def __post_init__(self) -> None:
        if self.low < 0 or self.high < self.low:
            raise InvalidArgumentError(ErrorTemplate.escape_range_invalid(self.low, self.high))

    def contains_escape(self, code_point: int) -> bool:
        """Return True if code_point must be escaped."""
        inside = self.low <= code_point <= self.high
        return inside if self.between else not inside


class RangeEscaper(CodePointTranslator):
    """CodePointTranslator that escapes code points selected by an EscapeRange.

    The no-argument constructor escapes every code point. Subclasses provide
    the escape syntax through ``write_escape``.
    """

    __slots__ = ("_range",)

    def __init__(self, low: int = 0, high: int = MAX_CODE_POINT, between: bool = True) -> None:
        self._range = EscapeRange(low, high, between)

    @classmethod
    def between(cls, low: int, high: int) -> Self:
        """Escape code points in [low, high]."""
        return cls(low, high, True)

    @classmethod
    def outside_of(cls, low: int, high: int) -> Self:
        """Escape code points below low or above high."""
        return cls(low, high, False)

    @classmethod
    def above(cls, code_point: int) -> Self:
        """Escape code points greater than code_point."""
        return cls.outside_of(0, code_point)

    @classmethod
    def below(cls, code_point: int) -> Self:
        """Escape code points less than code_point."""
        return cls.outside_of(code_point, MAX_CODE_POINT)

    @property
    def escape_range(self) -> EscapeRange:
        return self._range

    def translate_code_point(self, code_point: int, out: list[str]) -> bool:
        if not self._range.contains_escape(code_point):
            return False
        self.write_escape(code_point, out)
        return True

    @abstractmethod
    def write_escape(self, code_point: int, out: list[str]) -> None:
        """Append the escaped form of code_point to out."""

    def __repr__(self) -> str:
        r = self._range
        kind = "between" if r.between else "outside_of"
        return f"{type(self).__name__}.{kind}({r.low:#x}, {r.high:#x})"
