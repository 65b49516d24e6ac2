"""Script expression delimiting for the parser.

Expressions inside ``{...}`` belong to another language, so the parser does
not build a tree for them. It only finds where each one ends: brackets are
balanced, and string literals, template literals and comments are skipped so
a ``}`` inside them does not end the expression early.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sveltefmt.exceptions import ErrorCode
from sveltefmt.nodes import Expr, Expression, Identifier

if TYPE_CHECKING:
    from sveltefmt.exceptions import ParseError

IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")

# Literal keywords that look like identifiers but are not references
_NOT_IDENTIFIERS = frozenset({"true", "false", "null", "this", "typeof", "void", "new"})

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())


class ExpressionParsingMixin:
    """Mixin for reading embedded script expressions.

    Required Host Attributes:
        - All from ScannerMixin
    """

    if TYPE_CHECKING:
        _source: str
        _pos: int

        def _error(
            self,
            message: str,
            start: int | None = None,
            *,
            end: int | None = None,
            code: ErrorCode | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _read_expression(
        self,
        stops: str = "}",
        keyword: re.Pattern[str] | None = None,
    ) -> Expr:
        """Read an expression ending before a depth-0 character in ``stops``.

        If ``keyword`` is given, the expression also ends where it matches at
        bracket depth 0 (used for ``as`` in each blocks and ``then`` in await
        blocks).

        Returns:
            Identifier for a bare name, Expression otherwise.
        """
        start = self._pos
        end = self._find_expression_end(start, stops, keyword)
        raw = self._source[start:end]
        stripped = raw.strip()
        if not stripped:
            raise self._error("Expected an expression", start, code=ErrorCode.INVALID_EXPRESSION)

        lead = len(raw) - len(raw.lstrip())
        node_start = start + lead
        node_end = node_start + len(stripped)
        self._pos = end

        if IDENTIFIER.fullmatch(stripped) and stripped not in _NOT_IDENTIFIERS:
            return Identifier(start=node_start, end=node_end, name=stripped)
        return Expression(start=node_start, end=node_end, source=stripped)

    def _find_expression_end(
        self,
        pos: int,
        stops: str,
        keyword: re.Pattern[str] | None = None,
    ) -> int:
        source = self._source
        length = len(source)
        stack: list[str] = []
        i = pos

        while i < length:
            char = source[i]

            if not stack:
                if char in stops:
                    return i
                if keyword is not None and char.isspace() and keyword.match(source, i):
                    return i

            if char in "\"'":
                i = self._skip_string(i, char)
                continue
            if char == "`":
                i = self._skip_template_literal(i)
                continue
            if char == "/" and source.startswith("//", i):
                newline = source.find("\n", i)
                i = length if newline < 0 else newline
                continue
            if char == "/" and source.startswith("/*", i):
                close = source.find("*/", i + 2)
                if close < 0:
                    break
                i = close + 2
                continue

            if char in _OPENERS:
                stack.append(_OPENERS[char])
            elif char in _CLOSERS:
                if not stack or stack[-1] != char:
                    raise self._error(
                        f"Unexpected {char!r} in expression",
                        i,
                        code=ErrorCode.INVALID_EXPRESSION,
                    )
                stack.pop()
            i += 1

        expected = stack[-1] if stack else stops[-1]
        raise self._error(
            f"Expected {expected!r} to close expression",
            pos,
            end=length,
            code=ErrorCode.UNEXPECTED_EOF,
        )

    def _skip_string(self, pos: int, quote: str) -> int:
        """Index just past the string literal opening at ``pos``."""
        source = self._source
        i = pos + 1
        while i < len(source):
            char = source[i]
            if char == "\\":
                i += 2
                continue
            if char == quote:
                return i + 1
            i += 1
        raise self._error("Unterminated string literal", pos, code=ErrorCode.UNEXPECTED_EOF)

    def _skip_template_literal(self, pos: int) -> int:
        """Index just past the template literal opening at ``pos``, including ``${}`` parts."""
        source = self._source
        i = pos + 1
        while i < len(source):
            char = source[i]
            if char == "\\":
                i += 2
                continue
            if char == "`":
                return i + 1
            if source.startswith("${", i):
                i = self._find_expression_end(i + 2, "}") + 1
                continue
            i += 1
        raise self._error("Unterminated template literal", pos, code=ErrorCode.UNEXPECTED_EOF)
