"""Element and attribute printing for the node printer.

Provides mixin for element-like tags (elements, components, slots and the
``svelte:*`` meta elements) and plain attributes.

Tag layout::

    <name{attributes}>children</name>

The attributes sit in their own indented group, so they stay on the tag
line when they fit and go one per line when they don't. The children are
indented under the tag and break onto their own lines as soon as any of
them is a block.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sveltefmt.doc import concat, dedent, group, indent, line, softline
from sveltefmt.nodes import AttributeShorthand, Element, Identifier, InlineComponent, MustacheTag, Text
from sveltefmt.printer.children import is_empty
from sveltefmt.utils.constants import RAW_TEXT_ELEMENTS, VOID_ELEMENTS

if TYPE_CHECKING:
    from sveltefmt.doc import Doc
    from sveltefmt.nodes import Attribute, BaseElement, Expr, Node, Spread


class ElementPrintingMixin:
    """Mixin for printing element-like tags and attributes.

    Required Host Attributes:
        - print: method (NodePrinter)
        - _print_expression: method (NodePrinter)
        - _print_children: method (ChildrenPrintingMixin)
    """

    if TYPE_CHECKING:

        def print(self, node: Node) -> Doc: ...
        def _print_expression(self, node: Expr) -> Doc: ...
        def _print_children(
            self, children: Sequence[Node], surrounding_lines: bool = True
        ) -> Doc: ...

    def _print_element(self, node: BaseElement) -> Doc:
        """Print any element-like tag.

        A tag self-closes when it has no non-whitespace children and it is
        either not a plain element or a plain element with a void name.
        """
        if isinstance(node, Element) and node.name.lower() in RAW_TEXT_ELEMENTS:
            return self._print_raw_text_element(node)

        has_children = any(not is_empty(child) for child in node.children)
        is_void = not has_children and (
            not isinstance(node, Element) or node.name in VOID_ELEMENTS
        )

        attributes: list[Doc] = []
        if isinstance(node, InlineComponent) and node.expression is not None:
            attributes.append(
                concat([line, "this={", self._print_expression(node.expression), "}"])
            )
        attributes.extend(self.print(attribute) for attribute in node.attributes)

        return group(
            concat(
                [
                    "<",
                    node.name,
                    self._print_attribute_list(attributes),
                    " />" if is_void else ">",
                    indent(self._print_children(node.children)) if has_children else "",
                    "" if is_void else concat(["</", node.name, ">"]),
                ]
            )
        )

    def _print_raw_text_element(self, node: Element) -> Doc:
        """Nested <script>/<style>: attributes are printed, the body is kept as written."""
        attributes = [self.print(attribute) for attribute in node.attributes]
        body = "".join(child.data for child in node.children if isinstance(child, Text))
        return group(
            concat(
                [
                    "<",
                    node.name,
                    self._print_attribute_list(attributes),
                    ">",
                    body,
                    "</",
                    node.name,
                    ">",
                ]
            )
        )

    def _print_attribute_list(self, attributes: Sequence[Doc]) -> Doc:
        """Attribute docs (each starting with a line) wrapped as one group."""
        return indent(group(concat([*attributes, dedent(softline)])))

    def _print_attribute(self, node: Attribute) -> Doc:
        if _is_shorthand(node):
            return concat([line, "{", node.name, "}"])
        if node.value is True:
            return concat([line, node.name])
        value = [self._print_attribute_value(chunk) for chunk in node.value]
        return concat([line, node.name, '="', *value, '"'])

    def _print_attribute_value(self, chunk: Node) -> Doc:
        if isinstance(chunk, Text):
            return chunk.data.replace('"', "&quot;")
        return self.print(chunk)

    def _print_attribute_shorthand(self, node: AttributeShorthand) -> Doc:
        return concat(["{", self._print_expression(node.expression), "}"])

    def _print_spread(self, node: Spread) -> Doc:
        return concat([line, "{...", self._print_expression(node.expression), "}"])


def _is_shorthand(node: Attribute) -> bool:
    """``name={name}`` and ``{name}`` both print as ``{name}``."""
    if node.value is True or len(node.value) != 1:
        return False
    (chunk,) = node.value
    if isinstance(chunk, AttributeShorthand):
        return True
    if isinstance(chunk, MustacheTag):
        expression = chunk.expression
        return isinstance(expression, Identifier) and expression.name == node.name
    return False
