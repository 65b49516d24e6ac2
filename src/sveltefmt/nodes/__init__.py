"""Syntax-tree nodes for component templates.

Immutable, slotted dataclasses. Every node carries its ``start``/``end``
source offsets. The set of node kinds is closed: the printer dispatches on
the concrete class and treats anything else as a fatal error.

Node categories:
- **Markup**: Fragment, Text, Comment, Element and the element-like kinds
- **Tags**: MustacheTag, RawMustacheTag, DebugTag
- **Control flow**: IfBlock, ElseBlock, EachBlock, AwaitBlock and branches
- **Directives**: Attribute, Spread, EventHandler, Binding, Class, ...
- **Expressions**: Expression, Identifier
- **Structure**: Script, Style, Root
"""

from sveltefmt.nodes.base import Node
from sveltefmt.nodes.control_flow import (
    AwaitBlock,
    CatchBlock,
    EachBlock,
    ElseBlock,
    IfBlock,
    PendingBlock,
    ThenBlock,
)
from sveltefmt.nodes.directives import (
    Action,
    Animation,
    Attribute,
    AttributeShorthand,
    Binding,
    Class,
    Directive,
    EventHandler,
    Let,
    Ref,
    Spread,
    Transition,
)
from sveltefmt.nodes.expressions import Expr, Expression, Identifier
from sveltefmt.nodes.markup import (
    BaseElement,
    Body,
    Comment,
    Element,
    Fragment,
    Head,
    InlineComponent,
    Options,
    Slot,
    Text,
    Title,
    Window,
)
from sveltefmt.nodes.structure import Root, Script, Style
from sveltefmt.nodes.tags import DebugTag, MustacheTag, RawMustacheTag

# Closed unions the printer dispatches over
MarkupNode = (
    Text
    | Comment
    | Element
    | InlineComponent
    | Slot
    | Window
    | Head
    | Body
    | Options
    | Title
    | MustacheTag
    | RawMustacheTag
    | DebugTag
    | IfBlock
    | EachBlock
    | AwaitBlock
)
AttributeNode = (
    Attribute
    | Spread
    | EventHandler
    | Binding
    | Class
    | Let
    | Action
    | Animation
    | Transition
    | Ref
)
ExpressionNode = Expression | Identifier

__all__ = [
    "Action",
    "Animation",
    "Attribute",
    "AttributeNode",
    "AttributeShorthand",
    "AwaitBlock",
    "BaseElement",
    "Binding",
    "Body",
    "CatchBlock",
    "Class",
    "Comment",
    "DebugTag",
    "Directive",
    "EachBlock",
    "ElseBlock",
    "Element",
    "EventHandler",
    "Expr",
    "Expression",
    "ExpressionNode",
    "Fragment",
    "Head",
    "Identifier",
    "IfBlock",
    "InlineComponent",
    "Let",
    "MarkupNode",
    "MustacheTag",
    "Node",
    "Options",
    "PendingBlock",
    "RawMustacheTag",
    "Ref",
    "Root",
    "Script",
    "Slot",
    "Spread",
    "Style",
    "Text",
    "ThenBlock",
    "Title",
    "Transition",
    "Window",
]
