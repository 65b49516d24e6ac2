"""Base node class for the component-template syntax tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all syntax-tree nodes.

    All nodes track the source range they were parsed from (``end`` is
    exclusive). Nodes are immutable; the printer never annotates them.

    """

    start: int
    end: int
