"""Diagnostic system for textescape errors.

Provides structured error diagnostics with codes, positions, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    InvalidArgumentError,
    InvalidIndexError,
    InvalidStateError,
    MalformedEscapeError,
    NullArgumentError,
    TextEscapeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidIndexError",
    "InvalidStateError",
    "MalformedEscapeError",
    "NullArgumentError",
    "OutputFormat",
    "TextEscapeError",
]
