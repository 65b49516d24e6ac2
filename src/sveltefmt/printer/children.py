"""Children grouping for the node printer.

Provides mixin for laying out a sequence of sibling nodes. Siblings are
classified as inline (Text, MustacheTag) or block (everything else).
Consecutive inline siblings form a run that is printed as a single Fill,
so text that touches an interpolation never gains or loses whitespace.
Block siblings each go on their own line.

Whitespace-only runs between block siblings collapse to nothing unless
the whitespace holds a blank line, which is kept as one empty line.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import groupby
from typing import TYPE_CHECKING

from sveltefmt.doc import Fill, Line, break_parent, concat, dedent, fill, hardline, join, softline
from sveltefmt.nodes import MustacheTag, Text
from sveltefmt.utils.constants import BLANK_LINE_THRESHOLD, WHITESPACE

if TYPE_CHECKING:
    from sveltefmt.doc import Doc
    from sveltefmt.nodes import Node


def is_inline(node: Node) -> bool:
    return isinstance(node, (Text, MustacheTag))


def is_empty(node: Node) -> bool:
    """Whitespace-only text."""
    return isinstance(node, Text) and not node.data.strip(WHITESPACE)


def has_blank_line(whitespace: str) -> bool:
    return whitespace.count("\n") >= BLANK_LINE_THRESHOLD


def fill_parts(doc: Doc) -> tuple[Doc, ...]:
    """View a printed inline child as alternating content/separator parts."""
    if isinstance(doc, Fill):
        return tuple(doc.parts)
    if isinstance(doc, Line):
        return ("", doc, "")
    return (doc,)


def merge_parts(left: tuple[Doc, ...], right: tuple[Doc, ...]) -> tuple[Doc, ...]:
    """Append ``right`` to ``left``, joining the touching content parts."""
    if not left:
        return right
    if not right:
        return left
    return (*left[:-1], concat([left[-1], right[0]]), *right[1:])


def trim_parts(parts: tuple[Doc, ...]) -> tuple[Doc, ...]:
    """Drop empty-content/separator pairs at both edges of a run."""
    while len(parts) >= 3 and parts[0] == "" and isinstance(parts[1], Line):
        parts = parts[2:]
    while len(parts) >= 3 and parts[-1] == "" and isinstance(parts[-2], Line):
        parts = parts[:-2]
    return parts


class ChildrenPrintingMixin:
    """Mixin for printing sibling sequences.

    Required Host Attributes:
        - print: method (NodePrinter)
    """

    if TYPE_CHECKING:

        def print(self, node: Node) -> Doc: ...

    def _print_children(self, children: Sequence[Node], surrounding_lines: bool = True) -> Doc:
        """Print siblings joined by hard lines.

        With ``surrounding_lines`` the result is framed by a soft line and a
        dedented soft line, which is how element and block bodies sit inside
        their ``indent``. A body that prints nothing gets no frame, so an
        empty branch never leaves a blank line behind.
        """
        body = join(hardline, tuple(self._child_pieces(children)))
        if not surrounding_lines or body == "":
            return body
        return concat([softline, body, dedent(softline)])

    def _child_pieces(self, children: Sequence[Node]) -> Iterator[Doc]:
        for inline, siblings in groupby(children, key=is_inline):
            if inline:
                piece = self._inline_run(tuple(siblings))
                if piece is not None:
                    yield piece
            else:
                for sibling in siblings:
                    yield concat([break_parent, self.print(sibling)])

    def _inline_run(self, run: tuple[Node, ...]) -> Doc | None:
        """One Fill for a run of inline siblings; None when it prints nothing."""
        if all(is_empty(node) for node in run):
            # text nodes are merged by the parser, so this is a single separator
            keep = any(has_blank_line(node.data) for node in run)  # type: ignore[attr-defined]
            return "" if keep else None

        parts: tuple[Doc, ...] = ()
        for node in run:
            parts = merge_parts(parts, fill_parts(self.print(node)))
        return fill(trim_parts(parts))
