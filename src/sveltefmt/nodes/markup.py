"""Markup nodes: fragments, text, comments and element-like tags."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sveltefmt.nodes.base import Node
from sveltefmt.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Ordered sequence of markup children."""

    children: Sequence[Node]


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Raw text between tags, kept exactly as written (entities included)."""

    data: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """HTML comment: <!-- data -->"""

    data: str


@dataclass(frozen=True, slots=True)
class BaseElement(Node):
    """Shared shape of every tag-like node: <name attributes>children</name>"""

    name: str
    attributes: Sequence[Node]
    children: Sequence[Node]


@dataclass(frozen=True, slots=True)
class Element(BaseElement):
    """Plain HTML/SVG element: <div class="x">...</div>"""


@dataclass(frozen=True, slots=True)
class InlineComponent(BaseElement):
    """Component instance: <Widget />, <svelte:self />, <svelte:component this={c} />"""

    expression: Expr | None = None


@dataclass(frozen=True, slots=True)
class Slot(BaseElement):
    """Slot outlet: <slot name="x">fallback</slot>"""


@dataclass(frozen=True, slots=True)
class Window(BaseElement):
    """<svelte:window on:resize={handler} />"""


@dataclass(frozen=True, slots=True)
class Head(BaseElement):
    """<svelte:head>...</svelte:head>"""


@dataclass(frozen=True, slots=True)
class Body(BaseElement):
    """<svelte:body on:click={handler} />"""


@dataclass(frozen=True, slots=True)
class Options(BaseElement):
    """<svelte:options tag="x-widget" />"""


@dataclass(frozen=True, slots=True)
class Title(BaseElement):
    """<title> inside <svelte:head>"""
