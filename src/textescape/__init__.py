"""textescape - String escaping translators, boolean conversions and argument validation.

Escapes and unescapes text for Java, EcmaScript, JSON, XML 1.0/1.1, HTML 3/4
and CSV using small composable translators that walk the input once.

Public API:
    escape_java, escape_ecmascript, escape_json - String literal escaping
    escape_xml10, escape_xml11, escape_html3, escape_html4 - Markup escaping
    escape_csv - Whole-value CSV quoting
    unescape_java, unescape_ecmascript, unescape_json, unescape_html3,
    unescape_html4, unescape_xml, unescape_csv - The inverses

Exceptions:
    TextEscapeError - Base exception class
    MalformedEscapeError - Escape sequence started but could not be completed
    InvalidArgumentError - Argument failed a precondition
    NullArgumentError - Required argument was None
    InvalidIndexError - Index out of range
    InvalidStateError - Operation invoked in a forbidden state

Submodules:
    textescape.translate - Translator building blocks and entity tables
    textescape.escape - Pre-built translator chains (ESCAPE_JAVA, UNESCAPE_HTML4, ...)
    textescape.booleans - Boolean conversion helpers
    textescape.validate - Argument validation helpers
    textescape.diagnostics - Error codes, diagnostics and formatting
"""

from .diagnostics import (
    InvalidArgumentError,
    InvalidIndexError,
    InvalidStateError,
    MalformedEscapeError,
    NullArgumentError,
    TextEscapeError,
)
from .escape import (
    escape_csv,
    escape_ecmascript,
    escape_html3,
    escape_html4,
    escape_java,
    escape_json,
    escape_xml,
    escape_xml10,
    escape_xml11,
    unescape_csv,
    unescape_ecmascript,
    unescape_html3,
    unescape_html4,
    unescape_java,
    unescape_json,
    unescape_xml,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("textescape")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidArgumentError",
    "InvalidIndexError",
    "InvalidStateError",
    "MalformedEscapeError",
    "NullArgumentError",
    "TextEscapeError",
    "__version__",
    "escape_csv",
    "escape_ecmascript",
    "escape_html3",
    "escape_html4",
    "escape_java",
    "escape_json",
    "escape_xml",
    "escape_xml10",
    "escape_xml11",
    "unescape_csv",
    "unescape_ecmascript",
    "unescape_html3",
    "unescape_html4",
    "unescape_java",
    "unescape_json",
    "unescape_xml",
]
