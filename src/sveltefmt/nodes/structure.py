"""Component structure: embedded script/style regions and the root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from sveltefmt.nodes.base import Node
from sveltefmt.nodes.directives import Attribute
from sveltefmt.nodes.markup import Fragment


@dataclass(frozen=True, slots=True)
class Script(Node):
    """<script> region; ``context`` is "module" for <script context="module">."""

    context: Literal["default", "module"]
    attributes: Sequence[Attribute]
    content: str


@dataclass(frozen=True, slots=True)
class Style(Node):
    """<style> region."""

    attributes: Sequence[Attribute]
    content: str


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Whole component: scripts, markup and style.

    ``js`` is the legacy plain-script slot; the parser fills ``instance`` and
    ``module`` instead, but a hand-built tree may still use it.
    """

    html: Fragment
    instance: Script | None = None
    module: Script | None = None
    css: Style | None = None
    js: Script | None = None
