"""Parser core: source navigation and the Parser entry point.

The parser is a hand-written recursive-descent scanner over the component
source. It is split into mixins by concern, in the same way the printer is:

- :class:`ScannerMixin` (this module): position tracking, matching, errors
- :class:`ExpressionParsingMixin`: delimiting embedded script expressions
- :class:`AttributeParsingMixin`: attributes, spreads and directives
- :class:`ElementParsingMixin`: tags, comments, text, script/style regions
- :class:`BlockParsingMixin`: ``{...}`` tags and control-flow blocks
"""

from __future__ import annotations

import re

from sveltefmt.exceptions import ErrorCode, ParseError
from sveltefmt.nodes import Fragment, Node, Root, Script, Style
from sveltefmt.parser.attributes import AttributeParsingMixin
from sveltefmt.parser.blocks import BlockParsingMixin
from sveltefmt.parser.elements import ElementParsingMixin
from sveltefmt.parser.expressions import ExpressionParsingMixin
from sveltefmt.parser.scanner import ScannerMixin


class Parser(
    ElementParsingMixin,
    AttributeParsingMixin,
    BlockParsingMixin,
    ExpressionParsingMixin,
    ScannerMixin,
):
    """Parse component source into a :class:`~sveltefmt.nodes.Root`.

    Top-level ``<script>`` and ``<style>`` regions are lifted out of the
    markup into the root's ``instance``/``module``/``css`` slots; everything
    else becomes the root's ``html`` fragment.

    Example:
            >>> root = Parser("<p>Hello {name}!</p>").parse()
            >>> [type(n).__name__ for n in root.html.children[0].children]
            ['Text', 'MustacheTag', 'Text']

    """

    def __init__(self, source: str, filename: str | None = None):
        self._source = source
        self._filename = filename
        self._pos = 0
        # element nesting depth; script/style regions are only lifted at depth 0
        self._depth = 0
        self._in_head = False
        self._instance: Script | None = None
        self._module: Script | None = None
        self._css: Style | None = None

    def parse(self) -> Root:
        """Parse the whole source.

        Raises:
            ParseError: If the source is not a valid component.
        """
        children = self._parse_children()
        if not self._eof():
            raise self._unexpected_terminator()

        html = Fragment(
            start=children[0].start if children else 0,
            end=children[-1].end if children else 0,
            children=tuple(children),
        )
        return Root(
            start=0,
            end=len(self._source),
            html=html,
            instance=self._instance,
            module=self._module,
            css=self._css,
        )

    def _unexpected_terminator(self) -> ParseError:
        """Error for a closing tag or block branch with nothing open to match it."""
        match = _TERMINATOR.match(self._source, self._pos)
        found = match.group(0) if match else self._source[self._pos : self._pos + 1]
        if found.startswith("</"):
            return self._error(
                f"Unexpected closing tag {found}",
                code=ErrorCode.UNEXPECTED_CLOSING_TAG,
                end=self._pos + len(found),
            )
        return self._error(
            f"Unexpected block tag {found}",
            code=ErrorCode.UNEXPECTED_TOKEN,
            end=self._pos + len(found),
            suggestion="Block branches and closers must follow a matching {#if}, {#each} or {#await}",
        )


_TERMINATOR = re.compile(r"</[^>]*>|\{[:/][^}]*\}")


def parse(source: str, filename: str | None = None) -> Root:
    """Parse component ``source`` into a syntax tree."""
    return Parser(source, filename).parse()


__all__ = ["Node", "Parser", "parse"]
