"""Embedded-language dispatch.

Script, style and expression content is handed to sub-formatters looked up
by language. A region's content is recovered from the synthetic attribute
written by :func:`sveltefmt.extract.preprocess`, so what the sub-formatter
sees is the exact original text, not whatever the markup parser made of it.

Language keys:
    - ``<script>``: the ``lang`` attribute, ``"ts"`` for
      ``type="text/typescript"``, otherwise ``"js"``
    - ``<style>``: the ``lang`` attribute, otherwise ``"css"``
    - expressions: ``"expression"``

Sub-formatter output is re-indented one level inside the tag. Without a
registered sub-formatter the original content is emitted unchanged between
the tags.
"""

from __future__ import annotations

import logging
import textwrap
from collections.abc import Mapping
from typing import TYPE_CHECKING

from sveltefmt.doc import concat, hardline, indent, join
from sveltefmt.exceptions import EmbedError
from sveltefmt.extract import CONTENT_ATTRIBUTE, decode_content
from sveltefmt.nodes import Attribute, Identifier, Script, Text

if TYPE_CHECKING:
    from sveltefmt.doc import Doc
    from sveltefmt.nodes import Expr, Node, Style
    from sveltefmt.options import FormatOptions
    from sveltefmt.registry import SubFormatter

logger = logging.getLogger(__name__)

EXPRESSION_LANGUAGE = "expression"


def static_attribute(attributes: tuple[Attribute, ...] | list[Attribute], name: str) -> str | None:
    """Return the literal text of attribute ``name``, or None.

    Attributes whose value contains an interpolation have no static text.
    """
    for attribute in attributes:
        if attribute.name != name:
            continue
        if attribute.value is True:
            return ""
        if all(isinstance(chunk, Text) for chunk in attribute.value):
            return "".join(chunk.data for chunk in attribute.value)  # type: ignore[attr-defined]
        return None
    return None


def region_language(node: Script | Style) -> str:
    lang = static_attribute(node.attributes, "lang")
    if lang:
        return lang
    if isinstance(node, Script):
        if static_attribute(node.attributes, "type") == "text/typescript":
            return "ts"
        return "js"
    return "css"


def region_content(node: Script | Style) -> str:
    """Original content of a region, preferring the encoded payload."""
    encoded = static_attribute(node.attributes, CONTENT_ATTRIBUTE)
    if encoded is None:
        return node.content
    return decode_content(encoded)


def body_lines(content: str) -> list[str]:
    """Split sub-formatter output into lines relative to their common indentation.

    Leading and trailing blank lines are dropped; blank lines inside the
    body are kept as empty strings.
    """
    lines = textwrap.dedent(content).splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return [line if line.strip() else "" for line in lines]


class Embedder:
    """Prints embedded regions and expressions through sub-formatters.

    Args:
        formatters: Sub-formatters keyed by language.
        options: Formatting options; ``options.embed_errors`` selects what
            happens when a sub-formatter raises.

    Example:
        >>> embedder = Embedder({"css": lambda src, opts: src.strip()}, FormatOptions())
    """

    __slots__ = ("_formatters", "_options")

    def __init__(self, formatters: Mapping[str, SubFormatter], options: FormatOptions):
        self._formatters = dict(formatters)
        self._options = options

    def print_region(self, tag_name: str, node: Script | Style, attributes: Doc) -> Doc:
        """Print ``<tag{attributes}>`` + body + ``</tag>`` for a script or style region.

        Sub-formatter output is re-indented one level under the tag. Without a
        formatter, or when it fails under the fallback policy, the decoded
        content is emitted unchanged.
        """
        language = region_language(node)
        content = region_content(node)
        formatted = self._run(language, content, node)

        open_tag = concat(["<", tag_name, attributes, ">"])
        close_tag = concat(["</", tag_name, ">"])
        if formatted is None:
            # verbatim, indentation included
            return concat([open_tag, content, close_tag])

        lines = body_lines(formatted)
        if not lines:
            return concat([open_tag, close_tag])
        return concat(
            [
                open_tag,
                indent(concat([hardline, join(hardline, lines)])),
                hardline,
                close_tag,
            ]
        )

    def print_expression(self, expression: Expr) -> Doc:
        if isinstance(expression, Identifier):
            return expression.name
        source = expression.source.strip()  # type: ignore[attr-defined]
        formatted = self._run(EXPRESSION_LANGUAGE, source, expression)
        if formatted is None:
            return source
        return formatted.strip()

    def _run(self, language: str, content: str, node: Node) -> str | None:
        """Call the sub-formatter for ``language``; None means keep the original."""
        formatter = self._formatters.get(language)
        if formatter is None:
            return None
        try:
            return formatter(content, self._options)
        except Exception as exc:
            if self._options.embed_errors == "raise":
                raise EmbedError(language, node.start, node.end, str(exc)) from exc
            logger.warning(
                "%s formatter failed at offsets %d-%d, keeping original content: %s",
                language,
                node.start,
                node.end,
                exc,
            )
            return None
