"""Table-driven translator with longest-prefix matching.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from textescape.diagnostics import ErrorTemplate, InvalidArgumentError

from .base import Translator

__all__ = ["LookupTranslator"]


class LookupTranslator(Translator):
    """Translate by looking up substrings in a replacement table.

    At each position the longest key that matches wins. Candidate lookups are
    skipped entirely when no key starts with the current character.

    Example:
        >>> LookupTranslator({"&": "&amp;", "<": "&lt;"}).translate("a<b")
        'a&lt;b'
    """

    __slots__ = ("_longest", "_lookup", "_prefixes", "_shortest")

    def __init__(self, table: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        """Build the translator.

        Args:
            table: Mapping of from -> to, or an iterable of (from, to) pairs.
                Later pairs override earlier ones with the same key.

        Raises:
            InvalidArgumentError: If any key is empty
        """
        pairs = table.items() if isinstance(table, Mapping) else table
        lookup: dict[str, str] = {}
        for source, replacement in pairs:
            if not source:
                raise InvalidArgumentError(ErrorTemplate.lookup_key_empty())
            lookup[source] = replacement

        self._lookup = lookup
        self._prefixes = frozenset(key[0] for key in lookup)
        self._shortest = min((len(key) for key in lookup), default=0)
        self._longest = max((len(key) for key in lookup), default=0)

    @property
    def table(self) -> Mapping[str, str]:
        """Read-only view of the replacement table."""
        return MappingProxyType(self._lookup)

    def translate_at(self, text: str, index: int, out: list[str]) -> int:
        if text[index] not in self._prefixes:
            return 0
        longest = min(self._longest, len(text) - index)
        for size in range(longest, self._shortest - 1, -1):
            replacement = self._lookup.get(text[index : index + size])
            if replacement is not None:
                out.append(replacement)
                return size
        return 0

    def __repr__(self) -> str:
        return f"LookupTranslator({len(self._lookup)} entries)"
