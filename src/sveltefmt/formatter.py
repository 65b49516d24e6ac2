"""Formatting pipeline.

Source → preprocess → Parser → NodePrinter → renderer → text

1. **preprocess**: top-level ``<style>`` and ``<script>`` regions are cut
   out, their content encoded into a synthetic attribute, and the rewritten
   tags placed with scripts first and styles last
2. **Parser**: builds the immutable syntax tree
3. **NodePrinter**: turns the tree into a Doc, handing embedded content to
   the registered sub-formatters
4. **renderer**: lays the Doc out within ``print_width``

The result ends with exactly one newline, except that input with no
content formats to the empty string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from sveltefmt.doc import print_doc_to_string
from sveltefmt.embed import Embedder
from sveltefmt.extract import preprocess
from sveltefmt.options import EmbedErrorPolicy, FormatOptions
from sveltefmt.parser import parse
from sveltefmt.printer import NodePrinter
from sveltefmt.registry import FormatterRegistry, SubFormatter

logger = logging.getLogger(__name__)


@dataclass
class Formatter:
    """Formatting configuration and entry point.

    Holds the options and the registry of embedded-language formatters.
    ``format()`` keeps no state between calls, so one Formatter can be
    shared freely.

    Example:
        >>> formatter = Formatter(print_width=100)
        >>> formatter.formatters["css"] = my_css_formatter
        >>> formatter.format("<p>hi</p>")
        '<p>hi</p>\\n'

    Attributes:
        print_width: Line width the renderer tries to stay within
        tab_width: Spaces per indentation level
        use_tabs: Indent with tabs
        embed_errors: "fallback" keeps a region's original content when its
            formatter raises; "raise" propagates an EmbedError
        formatters: Sub-formatters keyed by language ("js", "ts", "css", "expression", ...)
    """

    print_width: int = 80
    tab_width: int = 2
    use_tabs: bool = False
    embed_errors: EmbedErrorPolicy = "fallback"
    formatters: FormatterRegistry = field(default_factory=FormatterRegistry)

    def __post_init__(self) -> None:
        if not isinstance(self.formatters, FormatterRegistry):
            self.formatters = FormatterRegistry(self.formatters)
        # FormatOptions rejects invalid values
        _ = self.options

    @property
    def options(self) -> FormatOptions:
        return FormatOptions(
            print_width=self.print_width,
            tab_width=self.tab_width,
            use_tabs=self.use_tabs,
            embed_errors=self.embed_errors,
        )

    def add_formatter(self, language: str, func: SubFormatter) -> None:
        """Register the formatter used for ``language`` regions."""
        self.formatters[language] = func

    def format(self, source: str, filename: str | None = None) -> str:
        """Format component source.

        Args:
            source: Component source text
            filename: Shown in parse error messages

        Raises:
            ParseError: The source could not be parsed; nothing is printed
            UnknownNodeError: The tree held a node kind with no print rule
            EmbedError: A sub-formatter failed and ``embed_errors="raise"``
        """
        options = self.options
        prepared = preprocess(source)
        root = parse(prepared, filename=filename)
        logger.debug(
            "parsed %s: %d markup nodes, script=%s, module=%s, style=%s",
            filename or "<component>",
            len(root.html.children),
            root.instance is not None,
            root.module is not None,
            root.css is not None,
        )

        printer = NodePrinter(options, Embedder(self.formatters.copy(), options))
        doc = printer.print_root(root)
        text = print_doc_to_string(
            doc,
            print_width=options.print_width,
            tab_width=options.tab_width,
            use_tabs=options.use_tabs,
        )
        text = text.rstrip("\n")
        return text + "\n" if text else ""


def format(
    source: str,
    *,
    formatters: Mapping[str, SubFormatter] | None = None,
    filename: str | None = None,
    **options: object,
) -> str:
    """Format component source with a one-off :class:`Formatter`.

    Example:
        >>> format("<div><span>a</span></div>")
        '<div>\\n  <span>a</span>\\n</div>\\n'
    """
    formatter = Formatter(formatters=FormatterRegistry(formatters), **options)  # type: ignore[arg-type]
    return formatter.format(source, filename=filename)
