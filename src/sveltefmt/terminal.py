"""ANSI styling for parse-error diagnostics.

Diagnostics are plain text unless the output is a terminal. The decision is
made once at import time:

- ``FORCE_COLOR`` set: always style
- ``NO_COLOR`` set (https://no-color.org/): never style
- otherwise style only when stdout is a TTY

Each helper names the role a piece of text plays in a diagnostic (an error
code, a ``file:line:col`` location, a hint) rather than a color, so the
palette lives in one table.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

ColorName = Literal["reset", "bold", "dim", "red", "yellow", "cyan", "bright_red", "bright_green"]

_CODES: dict[ColorName, str] = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
}

# Diagnostic role -> colors applied to it
_ROLES: dict[str, tuple[ColorName, ...]] = {
    "error_code": ("bright_red", "bold"),
    "location": ("cyan",),
    "line_number": ("yellow",),
    "error_line": ("bright_red",),
    "hint": ("bright_green",),
    "dim": ("dim",),
}

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap ``text`` in the given ANSI codes, or return it unchanged.

    Example:
        >>> colorize("F-PAR-002", "red", "bold")  # with colors enabled
        '\033[31m\033[1mF-PAR-002\033[0m'
    """
    if not _USE_COLORS:
        return text
    prefix = "".join(_CODES[color] for color in colors if color in _CODES)
    if not prefix:
        return text
    return f"{prefix}{text}{_CODES['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences, e.g. before comparing diagnostics."""
    return _ANSI_ESCAPE.sub("", text)


def _role(name: str, text: str) -> str:
    return colorize(text, *_ROLES[name])


def error_code(text: str) -> str:
    return _role("error_code", text)


def location(text: str) -> str:
    """Style a ``file:line:col`` location."""
    return _role("location", text)


def line_number(text: str) -> str:
    return _role("line_number", text)


def error_line(text: str) -> str:
    return _role("error_line", text)


def hint(text: str) -> str:
    return _role("hint", text)


def dim_text(text: str) -> str:
    return _role("dim", text)


def format_source_line(lineno: int, content: str, is_error: bool = False) -> str:
    """One gutter-numbered line of a source snippet.

    The offending line is marked with ``>`` and highlighted; context lines
    are dimmed::

        >  3 | <p>{name</p>
    """
    gutter = line_number(f"{'>' if is_error else ' '}{lineno:>3}")
    body = error_line(content) if is_error else dim_text(content)
    return f"{gutter} | {body}"
