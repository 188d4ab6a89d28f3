"""Enumerations for textescape type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SemicolonMode(StrEnum):
    """How NumericEntityUnescaper treats a numeric entity without a trailing ';'.

    StrEnum provides automatic string conversion: str(SemicolonMode.REQUIRED) == "required"
    """

    REQUIRED = "required"
    """Entity without ';' is not an entity: &#65 stays as written"""

    OPTIONAL = "optional"
    """Entity without ';' is still decoded: &#65 becomes A"""

    ERROR_IF_MISSING = "error_if_missing"
    """Entity without ';' raises MalformedEscapeError"""


__all__ = [
    "SemicolonMode",
]
