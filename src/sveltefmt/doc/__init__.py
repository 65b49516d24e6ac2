"""Doc layout primitives and renderer.

Public API:
    - Primitives: Concat, Line, Group, Indent, Dedent, Fill, BreakParent
    - Builders: concat, join, group, indent, dedent, fill
    - Constants: line, softline, hardline, break_parent
    - Rendering: print_doc_to_string
"""

from sveltefmt.doc.builders import (
    BreakParent,
    Concat,
    Dedent,
    Doc,
    Fill,
    Group,
    Indent,
    Line,
    break_parent,
    concat,
    dedent,
    fill,
    group,
    hardline,
    indent,
    join,
    line,
    softline,
)
from sveltefmt.doc.printer import print_doc_to_string, propagate_breaks

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
    "print_doc_to_string",
    "propagate_breaks",
    "softline",
]
