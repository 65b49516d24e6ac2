"""Pytest configuration and fixtures for sveltefmt tests."""

from pathlib import Path

import pytest

from sveltefmt import Formatter
from sveltefmt.doc import print_doc_to_string
from sveltefmt.embed import Embedder
from sveltefmt.options import FormatOptions
from sveltefmt.parser import parse
from sveltefmt.printer import NodePrinter

SAMPLES_DIR = Path(__file__).parent / "samples"


@pytest.fixture
def formatter():
    """Create a Formatter with default options and no sub-formatters."""
    return Formatter()


@pytest.fixture
def fmt(formatter):
    """Format a source string with the default Formatter."""
    return formatter.format


@pytest.fixture
def options():
    return FormatOptions()


@pytest.fixture
def printer(options):
    """Create a NodePrinter without sub-formatters."""
    return NodePrinter(options, Embedder({}, options))


@pytest.fixture
def print_markup(printer):
    """Parse markup and render it through the printer, skipping preprocessing."""

    def _print(source: str, print_width: int = 80) -> str:
        doc = printer.print_root(parse(source))
        return print_doc_to_string(doc, print_width=print_width)

    return _print


def sample_files() -> list[Path]:
    return sorted(SAMPLES_DIR.glob("*.html"))


def assert_formats_to(formatter: Formatter, source: str, expected: str) -> None:
    """Assert source formats to expected, showing both on failure.

    Args:
        formatter: Formatter under test.
        source: Input component source.
        expected: The expected canonical output.
    """
    actual = formatter.format(source)
    assert actual == expected, (
        f"Formatting mismatch:\n"
        f"  Source:   {source!r}\n"
        f"  Actual:   {actual!r}\n"
        f"  Expected: {expected!r}"
    )
