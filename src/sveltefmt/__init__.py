"""sveltefmt: a deterministic formatter for Svelte component templates.

Formats markup, control-flow blocks and directives into one canonical
layout. Embedded ``<script>``/``<style>`` content and template expressions
are passed to pluggable sub-formatters; without one they are kept exactly
as written.

Quickstart:
    >>> import sveltefmt
    >>> sveltefmt.format("<p>foo {bar} baz</p>")
    '<p>foo {bar} baz</p>\\n'

With embedded formatters:
    >>> from sveltefmt import Formatter
    >>> formatter = Formatter(print_width=100)
    >>> formatter.add_formatter("css", format_css)
    >>> formatter.format(source)

Architecture:
Source → preprocess → Parser → NodePrinter → Doc → renderer → text

Guarantees:
- ``format(format(s)) == format(s)``
- Text that touches an interpolation never gains or loses whitespace
- Parse errors abort formatting; nothing partial is returned
"""

from sveltefmt.exceptions import (
    EmbedError,
    ErrorCode,
    FormatError,
    ParseError,
    UnknownNodeError,
)
from sveltefmt.formatter import Formatter, format
from sveltefmt.options import FormatOptions
from sveltefmt.registry import FormatterRegistry

__version__ = "0.1.0"

__all__ = [
    "EmbedError",
    "ErrorCode",
    "FormatError",
    "FormatOptions",
    "Formatter",
    "FormatterRegistry",
    "ParseError",
    "UnknownNodeError",
    "__version__",
    "format",
]
