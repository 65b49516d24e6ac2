"""Exceptions for sveltefmt.

Exception Hierarchy:
FormatError (base)
├── ParseError          # Source could not be parsed; carries start/end offsets
├── UnknownNodeError    # Printer reached a node kind it does not know (fatal)
└── EmbedError          # Sub-formatter failed and the policy is "raise"

Error Messages:
Parse errors show the offending line with a caret, in the same style as
compiler diagnostics:

    ```
    Parse Error: Expected '}' to close expression
      --> Widget.svelte:3:7
       |
    >  3 | <p>{name</p>
       |        ^
    ```

"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from typing import Any

from sveltefmt import terminal

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes.

    Format: F-{CATEGORY}-{NUMBER}
    Categories: PAR (parser), PRT (printer), EMB (embedded formatters)
    """

    # Parser errors (F-PAR-xxx)
    UNEXPECTED_TOKEN = "F-PAR-001"
    UNCLOSED_TAG = "F-PAR-002"
    UNCLOSED_BLOCK = "F-PAR-003"
    UNEXPECTED_CLOSING_TAG = "F-PAR-004"
    INVALID_EXPRESSION = "F-PAR-005"
    DUPLICATE_REGION = "F-PAR-006"
    UNEXPECTED_EOF = "F-PAR-007"

    # Printer errors (F-PRT-xxx)
    UNKNOWN_NODE = "F-PRT-001"

    # Embedded formatter errors (F-EMB-xxx)
    EMBED_FAILED = "F-EMB-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'parser', 'printer', 'embed')."""
        prefix = self.value.split("-")[1]
        return {
            "PAR": "parser",
            "PRT": "printer",
            "EMB": "embed",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


def offset_to_location(source: str, offset: int) -> tuple[int, int]:
    """Translate a character offset into a 1-based line and 0-based column."""
    offset = max(0, min(offset, len(source)))
    lineno = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return lineno, offset - line_start


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Source context around an error line.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet in Rust-inspired diagnostic style with colors."""
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            is_error = lineno == self.error_line
            parts.append(terminal.format_source_line(lineno, content, is_error=is_error))
            if is_error and self.column is not None:
                caret = " " * self.column + "^"
                parts.append(f"{terminal.dim_text('   |')}  {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 1,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from source text.

    Args:
        source: Full source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional column offset for caret pointer.
    """
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


def serialize_node(node: Any) -> str:
    """Serialize a node for diagnostics, falling back to repr for non-dataclasses."""
    if is_dataclass(node) and not isinstance(node, type):
        return json.dumps({"type": type(node).__name__, **asdict(node)}, indent=4, default=repr)
    return repr(node)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FormatError(Exception):
    """Base exception for all sveltefmt errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-screen summary prefixed with its code."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{terminal.error_code(self.code.value)}: {header}"
        return header


class ParseError(FormatError):
    """Source could not be parsed.

    Carries the ``start``/``end`` offsets of the offending range; line and
    column are derived from ``start`` when the source is known.
    """

    code: ErrorCode | None = ErrorCode.UNEXPECTED_TOKEN

    def __init__(
        self,
        message: str,
        start: int,
        end: int | None = None,
        *,
        source: str | None = None,
        filename: str | None = None,
        code: ErrorCode | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.start = start
        self.end = start if end is None else end
        self.source = source
        self.filename = filename
        self.suggestion = suggestion
        if code is not None:
            self.code = code
        super().__init__(self._format())

    @property
    def lineno(self) -> int | None:
        """Line number where the error occurred (1-based)."""
        if self.source is None:
            return None
        return offset_to_location(self.source, self.start)[0]

    @property
    def col_offset(self) -> int | None:
        """Column offset where the error occurred (0-based)."""
        if self.source is None:
            return None
        return offset_to_location(self.source, self.start)[1]

    @property
    def loc(self) -> dict[str, int]:
        """Offsets of the offending range."""
        return {"start": self.start, "end": self.end}

    def _format(self) -> str:
        location = self.filename or "<component>"
        if self.source is None:
            header = f"Parse Error: {self.message}\n  --> {location}@{self.start}"
            msg = f"\n{header}"
        else:
            lineno, column = offset_to_location(self.source, self.start)
            header = f"Parse Error: {self.message}\n  --> {terminal.location(f'{location}:{lineno}:{column}')}"
            snippet = build_source_snippet(self.source, lineno, column=column)
            msg = f"\n{header}\n{snippet.format()}"

        if self.suggestion:
            msg += f"\n\n{terminal.hint('Suggestion:')} {self.suggestion}"
        return msg


class UnknownNodeError(FormatError):
    """The printer was handed a node kind it has no rule for.

    This means the tree is malformed or the printer is incomplete; formatting
    aborts and the serialized node is attached for diagnosis.
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_NODE

    def __init__(self, node: Any):
        self.node = node
        self.node_type = type(node).__name__
        self.serialized = serialize_node(node)
        super().__init__(f"unknown node type: {self.node_type}\n{self.serialized}")


class EmbedError(FormatError):
    """An embedded-language formatter failed."""

    code: ErrorCode | None = ErrorCode.EMBED_FAILED

    def __init__(self, language: str, start: int, end: int, message: str):
        self.language = language
        self.start = start
        self.end = end
        super().__init__(f"Formatter for '{language}' failed on region {start}..{end}: {message}")


__all__ = [
    "EmbedError",
    "ErrorCode",
    "FormatError",
    "ParseError",
    "SourceSnippet",
    "UnknownNodeError",
    "build_source_snippet",
    "offset_to_location",
    "serialize_node",
]
