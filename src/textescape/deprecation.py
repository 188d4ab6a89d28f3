"""Deprecation of escape functions superseded by a better-specified flavour.

A deprecated function keeps working until its removal version; every call
warns with the removal version and the function to call instead.

Python 3.13+.
"""

import functools
import warnings
from collections.abc import Callable
from typing import ParamSpec, TypeVar

__all__ = [
    "deprecated",
    "warn_deprecated",
]

P = ParamSpec("P")
R = TypeVar("R")


def warn_deprecated(
    name: str, replacement: str, *, removal_version: str, stacklevel: int = 2
) -> None:
    """Warn that function ``name`` is replaced by ``replacement``.

    With the default stacklevel the warning points at whoever called the
    function that calls warn_deprecated.

    Example:
        >>> warn_deprecated("escape_xml", "escape_xml10", removal_version="2.0.0")
        # DeprecationWarning: escape_xml() is deprecated and will be removed in
        # version 2.0.0. Use escape_xml10() instead.
    """
    warnings.warn(
        f"{name}() is deprecated and will be removed in version {removal_version}. "
        f"Use {replacement}() instead.",
        DeprecationWarning,
        stacklevel=stacklevel + 1,
    )


def deprecated(
    replacement: str, *, removal_version: str
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark an escape function as replaced by ``replacement``.

    The warning is attributed to the caller of the wrapped function, and the
    docstring gains a ``.. deprecated::`` note.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warn_deprecated(
                func.__name__, replacement, removal_version=removal_version, stacklevel=2
            )
            return func(*args, **kwargs)

        note = (
            f".. deprecated::\n    Will be removed in version {removal_version}."
            f"\n    Use :func:`{replacement}` instead."
        )
        wrapper.__doc__ = f"{func.__doc__}\n\n{note}" if func.__doc__ else note
        return wrapper

    return decorator
