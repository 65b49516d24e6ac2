"""Node printer core.

Turns a parsed :class:`~sveltefmt.nodes.Root` into a Doc. Node kinds are
dispatched through a dict keyed by class name; each handler lives in one of
the mixins and recurses through :meth:`NodePrinter.print`.

Design Principles:
1. **Closed dispatch**: every node kind has a handler; anything else raises
   :class:`~sveltefmt.exceptions.UnknownNodeError`
2. **No mutation**: context a child needs (an embedded region's tag name,
   whether an else branch may chain) is passed as an argument
3. **Embedded content**: scripts, styles and expressions go through the
   :class:`~sveltefmt.embed.Embedder`

Example:
    >>> from sveltefmt.doc import print_doc_to_string
    >>> from sveltefmt.embed import Embedder
    >>> from sveltefmt.options import FormatOptions
    >>> from sveltefmt.parser import parse
    >>> options = FormatOptions()
    >>> printer = NodePrinter(options, Embedder({}, options))
    >>> print_doc_to_string(printer.print_root(parse("<p>foo {bar} baz</p>")))
    '<p>foo {bar} baz</p>\\n'
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from sveltefmt.doc import Line, concat, fill, group, hardline, join, line
from sveltefmt.exceptions import UnknownNodeError
from sveltefmt.extract import CONTENT_ATTRIBUTE
from sveltefmt.nodes import Attribute
from sveltefmt.printer.blocks import BlockPrintingMixin
from sveltefmt.printer.children import ChildrenPrintingMixin, has_blank_line, is_empty
from sveltefmt.printer.directives import DirectivePrintingMixin
from sveltefmt.printer.elements import ElementPrintingMixin

if TYPE_CHECKING:
    from sveltefmt.doc import Doc
    from sveltefmt.embed import Embedder
    from sveltefmt.nodes import (
        Comment,
        DebugTag,
        Expr,
        Fragment,
        MustacheTag,
        Node,
        RawMustacheTag,
        Root,
        Script,
        Style,
        Text,
    )
    from sveltefmt.options import FormatOptions

_WORD_SEPARATOR = re.compile(r"[\t\n\f\r ]+")


class NodePrinter(
    ElementPrintingMixin,
    DirectivePrintingMixin,
    BlockPrintingMixin,
    ChildrenPrintingMixin,
):
    """Print syntax-tree nodes to Docs.

    Uses mixins for different node categories:
    - ElementPrintingMixin: element-like tags and attributes
    - DirectivePrintingMixin: on:, bind:, class:, let:, use:, animate:, transitions, ref:
    - BlockPrintingMixin: if/else, each and await blocks
    - ChildrenPrintingMixin: inline runs and block siblings
    """

    __slots__ = ("_embedder", "_node_dispatch", "_options")

    def __init__(self, options: FormatOptions, embedder: Embedder):
        self._options = options
        self._embedder = embedder

    def print_root(self, root: Root) -> Doc:
        """Print scripts, markup and style in canonical order.

        Order: module script, legacy script, instance script, markup, style.
        Parts are separated by a hard line and the document ends with one.
        """
        parts: list[Doc] = []
        for script in (root.module, root.js, root.instance):
            if script is not None:
                parts.append(self._print_region("script", script))

        markup = self.print(root.html)
        ends_with_markup = markup != ""
        if ends_with_markup:
            parts.append(markup)

        if root.css is not None:
            parts.append(self._print_region("style", root.css))
            ends_with_markup = False

        if not parts:
            return ""
        body = join(hardline, parts)
        # the markup fragment already ends with a hard line
        return group(body if ends_with_markup else concat([body, hardline]))

    def print(self, node: Node) -> Doc:
        """Print one node; raises UnknownNodeError for kinds without a handler."""
        handler = self._get_node_dispatch().get(type(node).__name__)
        if handler is None:
            raise UnknownNodeError(node)
        return handler(node)

    def _get_node_dispatch(self) -> dict[str, Callable[[Any], Doc]]:
        """Get node type dispatch table (cached on first call)."""
        try:
            return self._node_dispatch
        except AttributeError:
            pass
        self._node_dispatch: dict[str, Callable[[Any], Doc]] = {
            # Markup
            "Fragment": self._print_fragment,
            "Text": self._print_text,
            "Comment": self._print_comment,
            "Element": self._print_element,
            "InlineComponent": self._print_element,
            "Slot": self._print_element,
            "Window": self._print_element,
            "Head": self._print_element,
            "Body": self._print_element,
            "Options": self._print_element,
            "Title": self._print_element,
            # Tags
            "MustacheTag": self._print_mustache_tag,
            "RawMustacheTag": self._print_raw_mustache_tag,
            "DebugTag": self._print_debug_tag,
            # Blocks
            "IfBlock": self._print_if_block,
            "ElseBlock": self._print_else_block,
            "EachBlock": self._print_each_block,
            "AwaitBlock": self._print_await_block,
            "PendingBlock": self._print_branch,
            "ThenBlock": self._print_branch,
            "CatchBlock": self._print_branch,
            # Attributes and directives
            "Attribute": self._print_attribute,
            "AttributeShorthand": self._print_attribute_shorthand,
            "Spread": self._print_spread,
            "EventHandler": self._print_event_handler,
            "Binding": self._print_binding,
            "Class": self._print_class,
            "Let": self._print_let,
            "Action": self._print_action,
            "Animation": self._print_animation,
            "Transition": self._print_transition,
            "Ref": self._print_ref,
            # Expressions
            "Expression": self._print_expression,
            "Identifier": self._print_expression,
            # Embedded regions outside their root slots
            "Script": lambda node: self._print_region("script", node),
            "Style": lambda node: self._print_region("style", node),
        }
        return self._node_dispatch

    # ─────────────────────────────────────────────────────────────────────────
    # Markup
    # ─────────────────────────────────────────────────────────────────────────

    def _print_fragment(self, node: Fragment) -> Doc:
        if all(is_empty(child) for child in node.children):
            return ""
        return concat([self._print_children(node.children, surrounding_lines=False), hardline])

    def _print_text(self, node: Text) -> Doc:
        """Whitespace becomes one separator; words become a Fill."""
        if is_empty(node):
            return Line(keep_if_lonely=has_blank_line(node.data))
        parts: list[Doc] = []
        for i, word in enumerate(_WORD_SEPARATOR.split(node.data)):
            if i:
                parts.append(line)
            parts.append(word)
        return fill(parts)

    def _print_comment(self, node: Comment) -> Doc:
        return group(concat(["<!--", node.data, "-->"]))

    # ─────────────────────────────────────────────────────────────────────────
    # Tags
    # ─────────────────────────────────────────────────────────────────────────

    def _print_mustache_tag(self, node: MustacheTag) -> Doc:
        return concat(["{", self._print_expression(node.expression), "}"])

    def _print_raw_mustache_tag(self, node: RawMustacheTag) -> Doc:
        return concat(["{@html ", self._print_expression(node.expression), "}"])

    def _print_debug_tag(self, node: DebugTag) -> Doc:
        if not node.identifiers:
            return "{@debug}"
        names = [self._print_expression(identifier) for identifier in node.identifiers]
        return concat(["{@debug ", join(", ", names), "}"])

    # ─────────────────────────────────────────────────────────────────────────
    # Embedded content
    # ─────────────────────────────────────────────────────────────────────────

    def _print_expression(self, node: Expr) -> Doc:
        return self._embedder.print_expression(node)

    def _print_region(self, tag_name: str, node: Script | Style) -> Doc:
        attributes = [
            self.print(attribute)
            for attribute in node.attributes
            if not (isinstance(attribute, Attribute) and attribute.name == CONTENT_ATTRIBUTE)
        ]
        return self._embedder.print_region(tag_name, node, self._print_attribute_list(attributes))
