"""Source navigation for the parser.

Provides the low-level cursor operations every parsing mixin builds on.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sveltefmt.exceptions import ErrorCode, ParseError

if TYPE_CHECKING:
    from sveltefmt.nodes import Node

_WHITESPACE = re.compile(r"\s*")


class ScannerMixin:
    """Cursor over the source string.

    Host attributes (set by ``Parser.__init__``):
        - _source: str
        - _filename: str | None
        - _pos: int
    """

    if TYPE_CHECKING:
        _source: str
        _filename: str | None
        _pos: int

        def _parse_children(self) -> list[Node]: ...

    def _eof(self) -> bool:
        return self._pos >= len(self._source)

    def _match(self, text: str) -> bool:
        return self._source.startswith(text, self._pos)

    def _eat(self, text: str) -> bool:
        """Consume ``text`` if the source continues with it."""
        if self._source.startswith(text, self._pos):
            self._pos += len(text)
            return True
        return False

    def _expect(self, text: str, message: str | None = None) -> None:
        if not self._eat(text):
            raise self._error(
                message or f"Expected {text!r}",
                code=ErrorCode.UNEXPECTED_EOF if self._eof() else ErrorCode.UNEXPECTED_TOKEN,
            )

    def _read(self, pattern: re.Pattern[str]) -> str | None:
        """Consume and return a match of ``pattern`` at the cursor, if any."""
        match = pattern.match(self._source, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group(0)

    def _skip_whitespace(self) -> None:
        match = _WHITESPACE.match(self._source, self._pos)
        if match is not None:
            self._pos = match.end()

    def _require_whitespace(self) -> None:
        if self._eof() or not self._source[self._pos].isspace():
            raise self._error("Expected whitespace")
        self._skip_whitespace()

    def _eat_keyword(self, word: str) -> bool:
        """Consume ``word`` only when it is not the prefix of a longer name."""
        end = self._pos + len(word)
        if not self._source.startswith(word, self._pos):
            return False
        if end < len(self._source) and (self._source[end].isalnum() or self._source[end] in "_$"):
            return False
        self._pos = end
        return True

    def _error(
        self,
        message: str,
        start: int | None = None,
        *,
        end: int | None = None,
        code: ErrorCode | None = None,
        suggestion: str | None = None,
    ) -> ParseError:
        """Build a ParseError at ``start`` (default: the cursor)."""
        start = self._pos if start is None else start
        return ParseError(
            message,
            start,
            end,
            source=self._source,
            filename=self._filename,
            code=code,
            suggestion=suggestion,
        )
