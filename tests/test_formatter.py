"""Tests for the Formatter entry point and options."""

import logging

import pytest

import sveltefmt
from sveltefmt import FormatOptions, Formatter, FormatterRegistry, ParseError


class TestOptions:
    """Options are validated up front."""

    def test_defaults(self):
        options = FormatOptions()
        assert (options.print_width, options.tab_width, options.use_tabs) == (80, 2, False)
        assert options.embed_errors == "fallback"
        assert options.indentation == "  "

    def test_tab_indentation(self):
        assert FormatOptions(use_tabs=True).indentation == "\t"
        assert FormatOptions(tab_width=4).indentation == "    "

    @pytest.mark.parametrize(
        "kwargs",
        [{"print_width": 0}, {"tab_width": -1}, {"embed_errors": "ignore"}],
    )
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValueError):
            FormatOptions(**kwargs)

    def test_formatter_validates_on_construction(self):
        with pytest.raises(ValueError, match="print_width"):
            Formatter(print_width=-5)

    def test_options_are_immutable(self):
        with pytest.raises(AttributeError):
            FormatOptions().print_width = 100  # type: ignore[misc]


class TestFormatter:
    """Formatter.format runs the whole pipeline."""

    def test_output_ends_with_one_newline(self, fmt):
        assert fmt("<p>x</p>\n\n\n") == "<p>x</p>\n"

    def test_empty_source(self, fmt):
        assert fmt("") == ""

    def test_tab_width(self):
        assert Formatter(tab_width=4).format("<div><p>x</p></div>") == (
            "<div>\n    <p>x</p>\n</div>\n"
        )

    def test_use_tabs(self):
        assert Formatter(use_tabs=True).format("<div><p>x</p></div>") == (
            "<div>\n\t<p>x</p>\n</div>\n"
        )

    def test_parse_error_propagates(self, fmt):
        with pytest.raises(ParseError) as exc_info:
            fmt("<div>")
        assert "Parse Error" in str(exc_info.value)

    def test_filename_in_parse_error(self, formatter):
        with pytest.raises(ParseError, match="Card.svelte"):
            formatter.format("{#if a}", filename="Card.svelte")

    def test_formatter_is_reusable(self, formatter):
        first = formatter.format("<p>a</p>")
        with pytest.raises(ParseError):
            formatter.format("<div>")
        assert formatter.format("<p>a</p>") == first

    def test_debug_logging(self, formatter, caplog):
        with caplog.at_level(logging.DEBUG, logger="sveltefmt.formatter"):
            formatter.format("<script>let a;</script><p>x</p>", filename="App.svelte")
        assert "parsed App.svelte" in caplog.text
        assert "script=True" in caplog.text


class TestRegistration:
    """Sub-formatters can be registered in several ways."""

    def test_add_formatter(self, formatter):
        formatter.add_formatter("css", lambda src, opts: "p {}")
        assert "css" in formatter.formatters
        assert formatter.format("<style>x</style>") == "<style>\n  p {}\n</style>\n"

    def test_item_assignment(self, formatter):
        formatter.formatters["css"] = lambda src, opts: "q {}"
        assert formatter.format("<style>x</style>") == "<style>\n  q {}\n</style>\n"

    def test_registry_instance_kept(self):
        registry = FormatterRegistry({"css": lambda src, opts: src})
        formatter = Formatter(formatters=registry)
        assert formatter.formatters is registry

    def test_mapping_converted_to_registry(self):
        formatter = Formatter(formatters={"css": lambda src, opts: src})
        assert isinstance(formatter.formatters, FormatterRegistry)


class TestModuleFormat:
    """sveltefmt.format is a one-shot shortcut."""

    def test_defaults(self):
        assert sveltefmt.format("<div><span>a</span></div>") == "<div>\n  <span>a</span>\n</div>\n"

    def test_options_forwarded(self):
        assert sveltefmt.format("<div><p>x</p></div>", tab_width=3) == (
            "<div>\n   <p>x</p>\n</div>\n"
        )

    def test_formatters_forwarded(self):
        result = sveltefmt.format(
            "<style>x</style>", formatters={"css": lambda src, opts: "y"}
        )
        assert result == "<style>\n  y\n</style>\n"

    def test_unknown_option_rejected(self):
        with pytest.raises(TypeError):
            sveltefmt.format("<p></p>", colour=True)

    def test_version(self):
        assert isinstance(sveltefmt.__version__, str)
