"""Attribute and directive nodes found inside an opening tag."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sveltefmt.nodes.base import Node
from sveltefmt.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class AttributeShorthand(Node):
    """Value of a shorthand attribute: the ``{name}`` in <input {name}>"""

    expression: Expr


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """Plain attribute: name, name="text {expr}", name={expr} or {name}

    ``value`` is ``True`` for a bare boolean attribute, otherwise a sequence
    of Text, MustacheTag and AttributeShorthand fragments.
    """

    name: str
    value: Sequence[Node] | bool


@dataclass(frozen=True, slots=True)
class Spread(Node):
    """Spread attributes: {...props}"""

    expression: Expr


@dataclass(frozen=True, slots=True)
class Directive(Node):
    """Base for prefixed directives: prefix:name={expression}"""

    name: str
    expression: Expr | None


@dataclass(frozen=True, slots=True)
class EventHandler(Directive):
    """on:click|preventDefault={handler}"""

    modifiers: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class Binding(Directive):
    """bind:value={name}"""


@dataclass(frozen=True, slots=True)
class Class(Directive):
    """class:active={cond}"""


@dataclass(frozen=True, slots=True)
class Let(Directive):
    """let:item={alias} (shorthand ``let:item`` has no expression)"""


@dataclass(frozen=True, slots=True)
class Action(Directive):
    """use:action={params}"""


@dataclass(frozen=True, slots=True)
class Animation(Directive):
    """animate:flip={params}"""


@dataclass(frozen=True, slots=True)
class Transition(Directive):
    """transition:fade, in:fly={params}, out:fade|local"""

    intro: bool = False
    outro: bool = False
    modifiers: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class Ref(Node):
    """ref:name (legacy element reference)"""

    name: str
