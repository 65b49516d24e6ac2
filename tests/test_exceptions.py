"""Tests for error codes, source snippets and exception formatting."""

import pytest

from sveltefmt import terminal
from sveltefmt.exceptions import (
    EmbedError,
    ErrorCode,
    FormatError,
    ParseError,
    UnknownNodeError,
    build_source_snippet,
    offset_to_location,
    serialize_node,
)
from sveltefmt.nodes import Text


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


class TestErrorCode:
    """Error codes are grouped into categories by their prefix."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.UNCLOSED_TAG, "parser"),
            (ErrorCode.DUPLICATE_REGION, "parser"),
            (ErrorCode.UNKNOWN_NODE, "printer"),
            (ErrorCode.EMBED_FAILED, "embed"),
        ],
    )
    def test_category(self, code, category):
        assert code.category == category

    def test_codes_are_unique(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))


class TestLocation:
    """Offsets translate to 1-based lines and 0-based columns."""

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(0, (1, 0)), (3, (1, 3)), (4, (2, 0)), (6, (2, 2)), (99, (3, 1))],
    )
    def test_offset_to_location(self, offset, expected):
        assert offset_to_location("abc\nde\nf", offset) == expected

    def test_snippet_context(self):
        snippet = build_source_snippet("one\ntwo\nthree\nfour", 3, column=2)
        assert snippet.lines == ((2, "two"), (3, "three"), (4, "four"))
        assert snippet.error_line == 3

    def test_snippet_format_has_caret(self):
        formatted = build_source_snippet("<p>\n{name\n</p>", 2, column=1).format()
        assert ">  2 | {name" in formatted
        assert "  ^" in formatted


class TestParseError:
    """ParseError carries offsets, location and a suggestion."""

    def test_message_with_source(self):
        error = ParseError(
            "Expected '}'",
            4,
            source="<p>{name</p>",
            filename="App.svelte",
            code=ErrorCode.UNEXPECTED_EOF,
            suggestion="Close the tag",
        )
        message = str(error)
        assert "Parse Error: Expected '}'" in message
        assert "App.svelte:1:4" in message
        assert "Suggestion: Close the tag" in message
        assert error.code == ErrorCode.UNEXPECTED_EOF
        assert error.loc == {"start": 4, "end": 4}

    def test_message_without_source(self):
        error = ParseError("Bad", 7)
        assert "<component>@7" in str(error)
        assert error.lineno is None
        assert error.col_offset is None

    def test_default_code(self):
        assert ParseError("Bad", 0).code == ErrorCode.UNEXPECTED_TOKEN

    def test_format_compact_prefixes_code(self):
        compact = ParseError("Bad", 0).format_compact()
        assert compact.startswith("F-PAR-001: ")

    def test_is_format_error(self):
        assert issubclass(ParseError, FormatError)


class TestUnknownNodeError:
    """The offending node is serialized into the message."""

    def test_serialized_node(self):
        error = UnknownNodeError(Text(start=1, end=3, data="hi"))
        assert error.node_type == "Text"
        assert '"type": "Text"' in error.serialized
        assert '"data": "hi"' in error.serialized
        assert error.code == ErrorCode.UNKNOWN_NODE

    def test_serialize_non_dataclass(self):
        assert serialize_node(42) == "42"


class TestEmbedError:
    def test_attributes(self):
        error = EmbedError("css", 10, 20, "boom")
        assert (error.language, error.start, error.end) == ("css", 10, 20)
        assert "'css'" in str(error)
        assert "boom" in str(error)
        assert error.code.category == "embed"
