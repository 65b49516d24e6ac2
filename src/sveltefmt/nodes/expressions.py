"""Expression nodes.

Script expressions are not parsed further: the tree keeps the raw source
slice and only distinguishes bare identifiers, which drive the shorthand
rules for attributes and directives.
"""

from __future__ import annotations

from dataclasses import dataclass

from sveltefmt.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Expr(Node):
    """Base class for expressions."""


@dataclass(frozen=True, slots=True)
class Expression(Expr):
    """Arbitrary script expression kept as source text: {a + b}"""

    source: str


@dataclass(frozen=True, slots=True)
class Identifier(Expr):
    """Bare identifier: {name}"""

    name: str
