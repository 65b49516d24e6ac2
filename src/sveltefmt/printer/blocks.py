"""Control-flow block printing for the node printer.

Provides mixin for ``{#if}``, ``{#each}`` and ``{#await}`` blocks and their
branches. Each block is one group: it stays on a single line when all of
its branches are inline and fit, and puts every branch body on its own
indented lines otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sveltefmt.doc import concat, group, indent
from sveltefmt.nodes import IfBlock
from sveltefmt.printer.children import is_empty

if TYPE_CHECKING:
    from sveltefmt.doc import Doc
    from sveltefmt.nodes import (
        AwaitBlock,
        CatchBlock,
        EachBlock,
        ElseBlock,
        Expr,
        Node,
        PendingBlock,
        ThenBlock,
    )


class BlockPrintingMixin:
    """Mixin for printing control-flow blocks.

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

    def _print_if_block(self, node: IfBlock) -> Doc:
        parts: list[Doc] = [
            "{#if ",
            self._print_expression(node.expression),
            "}",
            indent(self._print_children(node.children)),
        ]
        if node.else_ is not None:
            parts.append(self._print_else_block(node.else_, chained=True))
        parts.append("{/if}")
        return group(concat(parts))

    def _print_else_block(self, node: ElseBlock, chained: bool = False) -> Doc:
        """Print an else branch.

        With ``chained`` (the branch belongs to an if block), an else whose
        only content is another if block prints as ``{:else if ...}`` and
        that block's own branches continue the chain.
        """
        nested = _lone_if_block(node) if chained else None
        if nested is None:
            return group(concat(["{:else}", indent(self._print_children(node.children))]))

        parts: list[Doc] = [
            "{:else if ",
            self._print_expression(nested.expression),
            "}",
            indent(self._print_children(nested.children)),
        ]
        if nested.else_ is not None:
            parts.append(self._print_else_block(nested.else_, chained=True))
        return group(concat(parts))

    def _print_each_block(self, node: EachBlock) -> Doc:
        parts: list[Doc] = [
            "{#each ",
            self._print_expression(node.expression),
            " as ",
            self._print_expression(node.context),
        ]
        if node.index is not None:
            parts.extend([", ", node.index])
        if node.key is not None:
            parts.extend([" (", self._print_expression(node.key), ")"])
        parts.extend(["}", indent(self._print_children(node.children))])
        if node.else_ is not None:
            parts.append(self._print_else_block(node.else_))
        parts.append("{/each}")
        return group(concat(parts))

    def _print_await_block(self, node: AwaitBlock) -> Doc:
        value = concat([" ", self._print_expression(node.value)]) if node.value else ""
        error = concat([" ", self._print_expression(node.error)]) if node.error else ""
        return group(
            concat(
                [
                    group(concat(["{#await ", self._print_expression(node.expression), "}"])),
                    indent(self.print(node.pending)),
                    group(concat(["{:then", value, "}"])),
                    indent(self.print(node.then)),
                    group(concat(["{:catch", error, "}"])),
                    indent(self.print(node.catch)),
                    "{/await}",
                ]
            )
        )

    def _print_branch(self, node: PendingBlock | ThenBlock | CatchBlock) -> Doc:
        return self._print_children(node.children)


def _lone_if_block(node: ElseBlock) -> IfBlock | None:
    """The single if block an else branch consists of, ignoring whitespace."""
    content = [child for child in node.children if not is_empty(child)]
    if len(content) == 1 and isinstance(content[0], IfBlock):
        return content[0]
    return None
