"""Tests for sibling grouping helpers."""

from sveltefmt.doc import Concat, Fill, Line, fill, line
from sveltefmt.nodes import Comment, Identifier, MustacheTag, Text
from sveltefmt.printer.children import (
    fill_parts,
    has_blank_line,
    is_empty,
    is_inline,
    merge_parts,
    trim_parts,
)


def _text(data: str) -> Text:
    return Text(start=0, end=len(data), data=data)


class TestClassification:
    def test_inline_kinds(self):
        tag = MustacheTag(start=0, end=3, expression=Identifier(start=1, end=2, name="a"))
        assert is_inline(_text("x"))
        assert is_inline(tag)
        assert not is_inline(Comment(start=0, end=7, data=""))

    def test_empty_text(self):
        assert is_empty(_text(" \n\t"))
        assert not is_empty(_text(" x "))
        assert not is_empty(Comment(start=0, end=7, data=""))

    def test_non_breaking_space_is_content(self):
        assert not is_empty(_text("\u00a0"))

    def test_blank_line(self):
        assert has_blank_line("\n  \n")
        assert not has_blank_line("  \n  ")


class TestParts:
    """Fill part lists merge at their touching content parts."""

    def test_fill_parts(self):
        assert fill_parts(fill(["a", line, "b"])) == ("a", line, "b")
        assert fill_parts(line) == ("", line, "")
        assert fill_parts("{x}") == ("{x}",)

    def test_merge_joins_content(self):
        merged = merge_parts(("a", line, "b"), ("c", line, "d"))
        assert merged == ("a", line, Concat(("b", "c")), line, "d")

    def test_merge_with_empty_side(self):
        assert merge_parts((), ("a",)) == ("a",)
        assert merge_parts(("a",), ()) == ("a",)

    def test_merge_drops_empty_strings(self):
        assert merge_parts(("a", line, ""), ("{x}",)) == ("a", line, "{x}")

    def test_trim_edges(self):
        parts = ("", line, "a", line, "b", line, "")
        assert trim_parts(parts) == ("a", line, "b")

    def test_trim_keeps_content(self):
        assert trim_parts(("a",)) == ("a",)
        assert trim_parts(("", line, "")) == ("",)

    def test_trimmed_parts_build_a_fill(self):
        parts = trim_parts(merge_parts(fill_parts(line), ("{x}",)))
        assert fill(parts) == Fill(("{x}",))
        assert all(isinstance(p, Line) for p in parts[1::2])
