"""Doc primitives and builder helpers.

A Doc is a tree of layout instructions. Plain ``str`` values are text; the
dataclasses below describe where lines may break, how content is grouped,
and how deep it is indented. The renderer in :mod:`sveltefmt.doc.printer`
turns a Doc into text for a given line width.

All primitives are immutable, so builders can freely share sub-docs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Concat:
    """Sequence of docs printed one after another."""

    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Line:
    """Possible line break.

    In flat mode a plain line prints a space and a soft line prints nothing.
    A hard line always breaks. ``keep_if_lonely`` marks whitespace that held a
    blank line in the source, so children grouping can keep it when it is the
    only thing between two block siblings.
    """

    hard: bool = False
    soft: bool = False
    keep_if_lonely: bool = False


@dataclass(frozen=True, slots=True)
class Group:
    """Print ``contents`` flat if it fits the remaining width, else broken."""

    contents: Doc
    should_break: bool = False


@dataclass(frozen=True, slots=True)
class Indent:
    """Increase indentation by one unit for line breaks inside ``contents``."""

    contents: Doc


@dataclass(frozen=True, slots=True)
class Dedent:
    """Return to the enclosing indentation for line breaks inside ``contents``."""

    contents: Doc


@dataclass(frozen=True, slots=True)
class Fill:
    """Alternating content and separator docs, wrapped like words in a paragraph.

    ``parts[0]``, ``parts[2]``, ... are content; ``parts[1]``, ``parts[3]``, ...
    are separators and must be :class:`Line` instances.
    """

    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class BreakParent:
    """Force every enclosing group to break."""


Doc = str | Concat | Line | Group | Indent | Dedent | Fill | BreakParent

line = Line()
softline = Line(soft=True)
break_parent = BreakParent()
hardline = Concat((Line(hard=True), break_parent))


def concat(parts: Iterable[Doc]) -> Doc:
    """Concatenate docs, flattening nested concats and dropping empty strings."""
    flat: list[Doc] = []
    for part in parts:
        if isinstance(part, Concat):
            flat.extend(part.parts)
        elif part != "":
            flat.append(part)
    if not flat:
        return ""
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def join(separator: Doc, docs: Iterable[Doc]) -> Doc:
    """Interleave ``separator`` between ``docs``."""
    out: list[Doc] = []
    for i, doc in enumerate(docs):
        if i:
            out.append(separator)
        out.append(doc)
    return concat(out)


def group(contents: Doc, should_break: bool = False) -> Group:
    return Group(contents, should_break)


def indent(contents: Doc) -> Indent:
    return Indent(contents)


def dedent(contents: Doc) -> Dedent:
    return Dedent(contents)


def fill(parts: Sequence[Doc]) -> Fill:
    """Build a :class:`Fill`, checking that every separator slot holds a line.

    Raises:
        ValueError: If a separator position holds anything but a :class:`Line`.
    """
    parts = tuple(parts)
    for i in range(1, len(parts), 2):
        if not isinstance(parts[i], Line):
            raise ValueError(
                f"fill() separator at position {i} must be a Line, got {type(parts[i]).__name__}"
            )
    return Fill(parts)


__all__ = [
    "BreakParent",
    "Concat",
    "Dedent",
    "Doc",
    "Fill",
    "Group",
    "Indent",
    "Line",
    "break_parent",
    "concat",
    "dedent",
    "fill",
    "group",
    "hardline",
    "indent",
    "join",
    "line",
    "softline",
]
