"""Interpolation tags: {expr}, {@html expr}, {@debug a, b}."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sveltefmt.nodes.base import Node
from sveltefmt.nodes.expressions import Expr, Identifier


@dataclass(frozen=True, slots=True)
class MustacheTag(Node):
    """Interpolation: {expr}"""

    expression: Expr


@dataclass(frozen=True, slots=True)
class RawMustacheTag(Node):
    """Unescaped HTML interpolation: {@html expr}"""

    expression: Expr


@dataclass(frozen=True, slots=True)
class DebugTag(Node):
    """Debugger statement: {@debug user, items}"""

    identifiers: Sequence[Identifier]
