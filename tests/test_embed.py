"""Tests for embedded-language dispatch."""

import logging

import pytest

from sveltefmt import EmbedError, Formatter
from sveltefmt.embed import (
    EXPRESSION_LANGUAGE,
    body_lines,
    region_content,
    region_language,
    static_attribute,
)
from sveltefmt.extract import preprocess
from sveltefmt.parser import parse


def _failing(content, options):
    raise ValueError("unbalanced braces")


class TestLanguages:
    """Each region is keyed by its language."""

    @pytest.mark.parametrize(
        ("source", "language"),
        [
            ("<script>a</script>", "js"),
            ('<script lang="ts">a</script>', "ts"),
            ('<script type="text/typescript">a</script>', "ts"),
            ('<script lang="coffee" type="text/typescript">a</script>', "coffee"),
        ],
    )
    def test_script_language(self, source, language):
        assert region_language(parse(source).instance) == language

    @pytest.mark.parametrize(
        ("source", "language"),
        [("<style>a</style>", "css"), ('<style lang="scss">a</style>', "scss")],
    )
    def test_style_language(self, source, language):
        assert region_language(parse(source).css) == language

    def test_dynamic_attribute_has_no_static_text(self):
        (attribute,) = parse("<p lang={x}></p>").html.children[0].attributes
        assert static_attribute([attribute], "lang") is None
        assert static_attribute([attribute], "missing") is None

    def test_boolean_attribute_is_empty_text(self):
        (attribute,) = parse("<p hidden></p>").html.children[0].attributes
        assert static_attribute([attribute], "hidden") == ""


class TestRegionContent:
    def test_decoded_from_payload(self):
        source = '<style>\n  p::before { content: "<b>"; }\n</style>'
        root = parse(preprocess(source))
        assert region_content(root.css) == '\n  p::before { content: "<b>"; }\n'

    def test_plain_content_without_payload(self):
        assert region_content(parse("<style>p{}</style>").css) == "p{}"

    @pytest.mark.parametrize(
        ("content", "lines"),
        [
            ("", []),
            ("\n\n   \n", []),
            ("  a\n    b\n  c\n", ["a", "  b", "c"]),
            ("\n  a\n  \n  b\n\n", ["a", "", "b"]),
            ("a\n  b", ["a", "  b"]),
        ],
    )
    def test_body_lines(self, content, lines):
        assert body_lines(content) == lines


class TestSubFormatters:
    """Registered formatters replace region and expression content."""

    def test_style_formatter(self):
        formatter = Formatter(formatters={"css": lambda src, opts: src.upper()})
        result = formatter.format("<style>p { color: red; }</style>")
        assert result == "<style>\n  P { COLOR: RED; }\n</style>\n"

    def test_formatter_output_lines_reindented(self):
        formatter = Formatter(formatters={"css": lambda src, opts: "a {}\n\nb {}\n"})
        result = formatter.format("<style>whatever</style>")
        assert result == "<style>\n  a {}\n\n  b {}\n</style>\n"

    def test_formatter_receives_original_content_and_options(self):
        seen = []

        def record(content, options):
            seen.append((content, options.print_width))
            return content

        Formatter(print_width=60, formatters={"js": record}).format(
            '<script>\n  const s = "</div>";\n</script>'
        )
        assert seen == [('\n  const s = "</div>";\n', 60)]

    @pytest.mark.parametrize(
        "source",
        [
            "<script>\n    if (a) {\n        b();\n    }\n</script>\n",
            "<script>\n  const s = `a\nb`;\n</script>\n",
            "<script>let a = 1;</script>\n",
            "<style>\n\n  p { color: red; }  \n\n</style>\n",
        ],
    )
    def test_content_verbatim_without_formatter(self, formatter, source):
        assert formatter.format(source) == source

    @pytest.mark.parametrize(
        "content",
        [
            'const s = "<\\/script>";',
            'const s = "</scr" + "ipt>";',
            "const end = /<\\/script>/;",
        ],
    )
    def test_escaped_closing_sequence(self, formatter, content):
        seen = []

        def record(src, options):
            seen.append(src)
            return src

        source = f"<script>{content}</script>\n"
        assert formatter.format(source) == source
        result = Formatter(formatters={"js": record}).format(source)
        assert seen == [content]
        assert result == f"<script>\n  {content}\n</script>\n"

    def test_template_literal_value_unchanged(self, formatter):
        result = formatter.format("<p>{x}</p>\n<script>\n  const s = `a\nb`;\n</script>")
        assert result == "<script>\n  const s = `a\nb`;\n</script>\n<p>{x}</p>\n"

    def test_expression_formatter(self):
        formatter = Formatter(
            formatters={EXPRESSION_LANGUAGE: lambda src, opts: src.replace(" ", "")}
        )
        assert formatter.format("<p>{a + b} {name}</p>") == "<p>{a+b} {name}</p>\n"

    def test_identifiers_skip_expression_formatter(self):
        calls = []
        formatter = Formatter(formatters={EXPRESSION_LANGUAGE: lambda s, o: calls.append(s) or s})
        formatter.format("<input {value} bind:checked>")
        assert calls == []


class TestErrorPolicy:
    """Failing sub-formatters fall back or raise."""

    def test_fallback_keeps_original(self, caplog):
        formatter = Formatter(formatters={"css": _failing})
        with caplog.at_level(logging.WARNING, logger="sveltefmt.embed"):
            result = formatter.format("<style>p{}</style>")
        assert result == "<style>p{}</style>\n"
        assert "css formatter failed" in caplog.text
        assert "unbalanced braces" in caplog.text

    def test_fallback_for_expression(self):
        formatter = Formatter(formatters={EXPRESSION_LANGUAGE: _failing})
        assert formatter.format("{a  +  b}") == "{a  +  b}\n"

    def test_raise_policy(self):
        formatter = Formatter(embed_errors="raise", formatters={"js": _failing})
        with pytest.raises(EmbedError) as exc_info:
            formatter.format("<script>let a;</script>")
        error = exc_info.value
        assert error.language == "js"
        assert isinstance(error.__cause__, ValueError)
        assert "unbalanced braces" in str(error)
