"""Quickstart example for textescape.

This example demonstrates escaping and unescaping text for the built-in
flavours, composing a custom translator, and the boolean and validation
helpers.

Note: Unescapers raise MalformedEscapeError for escapes that start but cannot
be completed. Catch it wherever the input is untrusted.
"""

import io

from textescape import (
    MalformedEscapeError,
    escape_csv,
    escape_html4,
    escape_java,
    escape_json,
    escape_xml10,
    unescape_csv,
    unescape_html4,
    unescape_java,
)
from textescape import booleans, validate
from textescape.enums import SemicolonMode
from textescape.escape import ESCAPE_JAVA, ESCAPE_XML10
from textescape.translate import LookupTranslator, NumericEntityUnescaper

# Example 1: String literals
print("=" * 50)
print("Example 1: Java and JSON String Literals")
print("=" * 50)

print(escape_java('He didn\'t say, "Stop!"'))
# Output: He didn't say, \"Stop!\"

print(escape_java("caf\xe9\t" + chr(0x1F600)))
# Output: caf\u00E9\t\uD83D\uDE00

print(escape_json("</script>"))
# Output: <\/script>

print(unescape_java("caf\\u00E9\\n"))
# Output: café (followed by a newline)

# Example 2: Markup
print("\n" + "=" * 50)
print("Example 2: HTML and XML")
print("=" * 50)

print(escape_html4('"bread" & "butter"'))
# Output: &quot;bread&quot; &amp; &quot;butter&quot;

print(unescape_html4("&lt;caf&eacute;&gt; &#8364;5"))
# Output: <café> €5

print(escape_xml10("a\x00b<c>\x80"))
# Output: ab&lt;c&gt;&#128;

# Example 3: CSV
print("\n" + "=" * 50)
print("Example 3: CSV Values")
print("=" * 50)

field = escape_csv('say "hi", then go')
print(field)
# Output: "say ""hi"", then go"

print(unescape_csv(field))
# Output: say "hi", then go

# Example 4: Custom translators
print("\n" + "=" * 50)
print("Example 4: Custom Translators")
print("=" * 50)

# Shell-style: Java rules plus an escaped dollar sign
shell_escaper = ESCAPE_JAVA.with_(LookupTranslator({"$": "\\$"}))
print(shell_escaper.translate('echo "$HOME"'))
# Output: echo \"\$HOME\"

lenient = NumericEntityUnescaper(SemicolonMode.OPTIONAL)
print(lenient.translate("&#72&#105!"))
# Output: Hi!

buffer = io.StringIO()
ESCAPE_XML10.translate_to("<note>", buffer)
print(buffer.getvalue())
# Output: &lt;note&gt;

# Example 5: Malformed input
print("\n" + "=" * 50)
print("Example 5: Malformed Escapes")
print("=" * 50)

try:
    unescape_java("broken \\u00")
except MalformedEscapeError as e:
    assert e.diagnostic is not None
    print(e.diagnostic.format_error())
# Output:
# error[UNICODE_ESCAPE_TRUNCATED]: Less than 4 hex digits in unicode value: '\u00' ...
#   --> index 7: \\u00
#   = help: Complete the escape or escape the backslash itself

# Example 6: Booleans and validation
print("\n" + "=" * 50)
print("Example 6: Booleans and Validation")
print("=" * 50)

print(booleans.str_to_boolean_object("YES"), booleans.str_to_boolean_object("maybe"))
# Output: True None

print(booleans.to_string_on_off(True), booleans.xor_all([True, True, True]))
# Output: on True

try:
    validate.inclusive_between(0, 10, 11, "retry count must be 0-10, got %d", 11)
except ValueError as e:
    print(e)
# Output: retry count must be 0-10, got 11

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
