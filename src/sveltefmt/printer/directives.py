"""Directive printing for the node printer.

Provides mixin for the prefixed directives. Each prints as
``prefix:name`` followed by ``="{expression}"`` unless it can be left out:

- ``bind:`` and ``class:`` drop an expression that is the directive's own
  name (``bind:value={value}`` prints ``bind:value``)
- ``let:`` also drops a missing expression
- ``on:``, ``use:``, ``animate:`` and transitions print the expression
  whenever there is one, since ``use:tooltip`` and ``use:tooltip={tooltip}``
  mean different things
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sveltefmt.doc import concat, join, line
from sveltefmt.nodes import Identifier

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sveltefmt.doc import Doc
    from sveltefmt.nodes import (
        Action,
        Animation,
        Binding,
        Class,
        Directive,
        EventHandler,
        Expr,
        Let,
        Ref,
        Transition,
    )


class DirectivePrintingMixin:
    """Mixin for printing directives.

    Required Host Attributes:
        - _print_expression: method (NodePrinter)
    """

    if TYPE_CHECKING:

        def _print_expression(self, node: Expr) -> Doc: ...

    def _print_directive(
        self,
        prefix: str,
        node: Directive,
        modifiers: Sequence[str] = (),
        collapse: bool = False,
    ) -> Doc:
        parts: list[Doc] = [line, prefix, ":", node.name]
        if modifiers:
            parts.extend(["|", join("|", modifiers)])
        expression = node.expression
        if expression is not None and not (collapse and _names_itself(node)):
            parts.extend(['="{', self._print_expression(expression), '}"'])
        return concat(parts)

    def _print_event_handler(self, node: EventHandler) -> Doc:
        return self._print_directive("on", node, node.modifiers)

    def _print_binding(self, node: Binding) -> Doc:
        return self._print_directive("bind", node, collapse=True)

    def _print_class(self, node: Class) -> Doc:
        return self._print_directive("class", node, collapse=True)

    def _print_let(self, node: Let) -> Doc:
        return self._print_directive("let", node, collapse=True)

    def _print_action(self, node: Action) -> Doc:
        return self._print_directive("use", node)

    def _print_animation(self, node: Animation) -> Doc:
        return self._print_directive("animate", node)

    def _print_transition(self, node: Transition) -> Doc:
        if node.intro and node.outro:
            prefix = "transition"
        elif node.intro:
            prefix = "in"
        else:
            prefix = "out"
        return self._print_directive(prefix, node, node.modifiers)

    def _print_ref(self, node: Ref) -> Doc:
        return concat([line, "ref:", node.name])


def _names_itself(node: Directive) -> bool:
    expression = node.expression
    return isinstance(expression, Identifier) and expression.name == node.name
