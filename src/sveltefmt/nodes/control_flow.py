"""Control flow blocks: {#if}, {#each}, {#await} and their branches."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sveltefmt.nodes.base import Node
from sveltefmt.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class ElseBlock(Node):
    """Else branch: {:else}... (an else-if holds a single IfBlock child)"""

    children: Sequence[Node]


@dataclass(frozen=True, slots=True)
class IfBlock(Node):
    """Conditional: {#if cond}...{:else if cond}...{:else}...{/if}

    ``elseif`` is set on an IfBlock that came from an ``{:else if}`` branch.
    """

    expression: Expr
    children: Sequence[Node]
    else_: ElseBlock | None = None
    elseif: bool = False


@dataclass(frozen=True, slots=True)
class EachBlock(Node):
    """Loop: {#each items as item, i (item.id)}...{:else}...{/each}"""

    expression: Expr
    context: Expr
    children: Sequence[Node]
    index: str | None = None
    key: Expr | None = None
    else_: ElseBlock | None = None


@dataclass(frozen=True, slots=True)
class PendingBlock(Node):
    """Content shown while an awaited promise is pending."""

    children: Sequence[Node]


@dataclass(frozen=True, slots=True)
class ThenBlock(Node):
    """Content shown once an awaited promise resolves."""

    children: Sequence[Node]


@dataclass(frozen=True, slots=True)
class CatchBlock(Node):
    """Content shown when an awaited promise rejects."""

    children: Sequence[Node]


@dataclass(frozen=True, slots=True)
class AwaitBlock(Node):
    """Promise block: {#await p}...{:then value}...{:catch error}...{/await}"""

    expression: Expr
    value: Expr | None
    error: Expr | None
    pending: PendingBlock
    then: ThenBlock
    catch: CatchBlock
