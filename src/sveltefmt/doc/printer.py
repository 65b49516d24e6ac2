"""Width-aware Doc renderer.

Turns a Doc tree into text. The algorithm is the classic Wadler/Prettier
command stack: each command is ``(indentation, mode, doc)``; groups try flat
mode first and fall back to break mode when their content (plus whatever
follows on the same line) does not fit in the remaining width.

Break propagation:
    A group that contains a hard line or a :class:`BreakParent`, directly or
    through a nested group, can never be flat. :func:`propagate_breaks`
    computes that set up front so the renderer never has to re-walk subtrees.

Example:
    >>> from sveltefmt.doc import group, indent, line, concat
    >>> doc = group(concat(["[", indent(concat([line, "a,", line, "b"])), line, "]"]))
    >>> print_doc_to_string(doc, print_width=80)
    '[ a, b ]'
    >>> print(print_doc_to_string(doc, print_width=4))
    [
      a,
      b
    ]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from sveltefmt.doc.builders import (
    BreakParent,
    Concat,
    Dedent,
    Doc,
    Fill,
    Group,
    Indent,
    Line,
)

Mode = Literal["flat", "break"]

MODE_FLAT: Mode = "flat"
MODE_BREAK: Mode = "break"


@dataclass(frozen=True, slots=True)
class Indentation:
    """Current indentation: the literal prefix, its visual width, and the level it came from."""

    value: str = ""
    length: int = 0
    parent: Indentation | None = None

    def indent(self, unit: str, width: int) -> Indentation:
        return Indentation(self.value + unit, self.length + width, self)

    def dedent(self) -> Indentation:
        return self.parent if self.parent is not None else self


_Command = tuple[Indentation, Mode, Doc]


def propagate_breaks(doc: Doc) -> frozenset[int]:
    """Return ids of every group that must render broken.

    A group breaks when it was built with ``should_break`` or contains a hard
    line, a :class:`BreakParent`, or another breaking group.
    """
    broken: set[int] = set()
    seen: dict[int, bool] = {}

    def visit(d: Doc) -> bool:
        if isinstance(d, str):
            return False
        if isinstance(d, BreakParent):
            return True
        if isinstance(d, Line):
            return d.hard
        key = id(d)
        if key in seen:
            return seen[key]
        if isinstance(d, Group):
            result = visit(d.contents) or d.should_break
            if result:
                broken.add(key)
        elif isinstance(d, (Indent, Dedent)):
            result = visit(d.contents)
        else:
            # every part must be visited so nested groups get marked
            results = [visit(part) for part in d.parts]
            result = any(results)
        seen[key] = result
        return result

    visit(doc)
    return frozenset(broken)


def _fits(
    next_cmd: _Command,
    rest_cmds: list[_Command],
    width: int,
    broken: frozenset[int],
    must_be_flat: bool,
) -> bool:
    """Check whether ``next_cmd`` fits in ``width`` columns.

    Measurement continues into ``rest_cmds`` (in their own modes) until the
    first line that would break, so trailing text on the same line counts.
    """
    rest_idx = len(rest_cmds)
    cmds: list[tuple[Mode, Doc]] = [(next_cmd[1], next_cmd[2])]
    while width >= 0:
        if not cmds:
            if rest_idx == 0:
                return True
            rest_idx -= 1
            _, mode, doc = rest_cmds[rest_idx]
            cmds.append((mode, doc))
            continue

        mode, doc = cmds.pop()
        if isinstance(doc, str):
            newline = doc.find("\n")
            if newline >= 0:
                # verbatim multi-line text: only its first line shares this one
                return width - newline >= 0
            width -= len(doc)
        elif isinstance(doc, (Concat, Fill)):
            cmds.extend((mode, part) for part in reversed(doc.parts))
        elif isinstance(doc, (Indent, Dedent)):
            cmds.append((mode, doc.contents))
        elif isinstance(doc, Group):
            is_broken = id(doc) in broken
            if must_be_flat and is_broken:
                return False
            cmds.append((MODE_BREAK if is_broken else mode, doc.contents))
        elif isinstance(doc, Line):
            if mode == MODE_BREAK or doc.hard:
                return True
            if not doc.soft:
                width -= 1
    return False


def _trim(out: list[str]) -> None:
    """Drop trailing spaces and tabs before a newline is emitted."""
    while out:
        trimmed = out[-1].rstrip(" \t")
        if trimmed:
            out[-1] = trimmed
            return
        out.pop()


def print_doc_to_string(
    doc: Doc,
    print_width: int = 80,
    tab_width: int = 2,
    use_tabs: bool = False,
) -> str:
    """Render ``doc`` to text, breaking groups that do not fit in ``print_width``."""
    broken = propagate_breaks(doc)
    unit = "\t" if use_tabs else " " * tab_width

    out: list[str] = []
    pos = 0
    should_remeasure = False
    cmds: list[_Command] = [(Indentation(), MODE_BREAK, doc)]

    while cmds:
        ind, mode, d = cmds.pop()

        if isinstance(d, str):
            out.append(d)
            newline = d.rfind("\n")
            pos = len(d) - newline - 1 if newline >= 0 else pos + len(d)

        elif isinstance(d, Concat):
            cmds.extend((ind, mode, part) for part in reversed(d.parts))

        elif isinstance(d, Indent):
            cmds.append((ind.indent(unit, tab_width), mode, d.contents))

        elif isinstance(d, Dedent):
            cmds.append((ind.dedent(), mode, d.contents))

        elif isinstance(d, Group):
            is_broken = id(d) in broken
            if mode == MODE_FLAT and not should_remeasure:
                cmds.append((ind, MODE_BREAK if is_broken else MODE_FLAT, d.contents))
                continue
            should_remeasure = False
            flat_cmd: _Command = (ind, MODE_FLAT, d.contents)
            if not is_broken and _fits(flat_cmd, cmds, print_width - pos, broken, False):
                cmds.append(flat_cmd)
            else:
                cmds.append((ind, MODE_BREAK, d.contents))

        elif isinstance(d, Fill):
            _print_fill(d, ind, mode, cmds, print_width - pos, broken)

        elif isinstance(d, Line):
            if mode == MODE_FLAT and not d.hard:
                if not d.soft:
                    out.append(" ")
                    pos += 1
                continue
            if mode == MODE_FLAT:
                # hard line inside a flat group; enclosing groups must re-measure
                should_remeasure = True
            _trim(out)
            out.append("\n" + ind.value)
            pos = ind.length

        elif isinstance(d, BreakParent):
            continue

        else:
            raise TypeError(f"Unexpected doc type: {type(d).__name__}")

    return "".join(out)


def _print_fill(
    d: Fill,
    ind: Indentation,
    mode: Mode,
    cmds: list[_Command],
    remaining: int,
    broken: frozenset[int],
) -> None:
    """Schedule the next content/separator pair of a fill.

    A separator breaks only when the content after it would not fit on the
    current line; content is never split.
    """
    parts = d.parts
    if not parts:
        return

    content = parts[0]
    content_flat: _Command = (ind, MODE_FLAT, content)
    content_break: _Command = (ind, MODE_BREAK, content)
    content_fits = _fits(content_flat, [], remaining, broken, True)

    if len(parts) == 1:
        cmds.append(content_flat if content_fits else content_break)
        return

    separator = parts[1]
    separator_flat: _Command = (ind, MODE_FLAT, separator)
    separator_break: _Command = (ind, MODE_BREAK, separator)

    if len(parts) == 2:
        if content_fits:
            cmds.extend((separator_flat, content_flat))
        else:
            cmds.extend((separator_break, content_break))
        return

    rest: _Command = (ind, mode, Fill(parts[2:]))
    pair_flat: _Command = (ind, MODE_FLAT, Concat((content, separator, parts[2])))

    if _fits(pair_flat, [], remaining, broken, True):
        cmds.extend((rest, separator_flat, content_flat))
    elif content_fits:
        cmds.extend((rest, separator_break, content_flat))
    else:
        cmds.extend((rest, separator_break, content_break))


__all__ = [
    "MODE_BREAK",
    "MODE_FLAT",
    "Indentation",
    "print_doc_to_string",
    "propagate_breaks",
]
