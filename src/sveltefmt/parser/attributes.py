"""Attribute and directive parsing for the parser.

Provides mixin for parsing the inside of an opening tag: plain attributes,
shorthand ``{name}`` attributes, ``{...spread}`` and prefixed directives
(``on:``, ``bind:``, ``class:``, ``let:``, ``use:``, ``animate:``,
``transition:``/``in:``/``out:``, ``ref:``).
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from sveltefmt.exceptions import ErrorCode
from sveltefmt.nodes import (
    Action,
    Animation,
    Attribute,
    AttributeShorthand,
    Binding,
    Class,
    EventHandler,
    Identifier,
    Let,
    MustacheTag,
    Node,
    Ref,
    Spread,
    Text,
    Transition,
)
from sveltefmt.utils.constants import DIRECTIVE_PREFIXES

if TYPE_CHECKING:
    from sveltefmt.exceptions import ParseError
    from sveltefmt.nodes import Expr

_ATTRIBUTE_NAME = re.compile(r"[^\s=>/\"'{}]+")
_UNQUOTED_VALUE_END = re.compile(r"[\s\"'=<>`{]|/>")

# Directives whose shorthand form stands for an identifier equal to the name
_SELF_REFERENCING = frozenset({"Binding", "Class"})


class AttributeParsingMixin:
    """Mixin for parsing attributes and directives.

    Required Host Attributes:
        - All from ScannerMixin
        - _read_expression: method (ExpressionParsingMixin)
    """

    if TYPE_CHECKING:
        _source: str
        _pos: int

        def _eof(self) -> bool: ...
        def _match(self, text: str) -> bool: ...
        def _eat(self, text: str) -> bool: ...
        def _expect(self, text: str, message: str | None = None) -> None: ...
        def _read(self, pattern: re.Pattern[str]) -> str | None: ...
        def _skip_whitespace(self) -> None: ...
        def _read_expression(
            self, stops: str = "}", keyword: re.Pattern[str] | None = None
        ) -> Expr: ...
        def _error(
            self,
            message: str,
            start: int | None = None,
            *,
            end: int | None = None,
            code: ErrorCode | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _parse_attributes(self, tag_start: int) -> list[Node]:
        """Parse attributes up to (not including) ``>`` or ``/>``."""
        attributes: list[Node] = []
        while True:
            self._skip_whitespace()
            if self._eof():
                raise self._error(
                    "Unclosed tag: expected '>'",
                    tag_start,
                    code=ErrorCode.UNCLOSED_TAG,
                )
            if self._match(">") or self._match("/>"):
                return attributes
            attributes.append(self._parse_attribute())

    def _parse_attribute(self) -> Node:
        start = self._pos

        if self._eat("{"):
            self._skip_whitespace()
            if self._eat("..."):
                expression = self._read_expression()
                self._expect("}")
                return Spread(start=start, end=self._pos, expression=expression)
            expression = self._read_expression()
            self._expect("}")
            if not isinstance(expression, Identifier):
                raise self._error(
                    "Expected an identifier in shorthand attribute",
                    expression.start,
                    end=expression.end,
                    code=ErrorCode.INVALID_EXPRESSION,
                    suggestion="Write name={expression} for computed values",
                )
            shorthand = AttributeShorthand(
                start=expression.start, end=expression.end, expression=expression
            )
            return Attribute(start=start, end=self._pos, name=expression.name, value=(shorthand,))

        name = self._read(_ATTRIBUTE_NAME)
        if name is None:
            raise self._error(f"Unexpected character {self._source[self._pos]!r} in tag")

        value: Sequence[Node] | bool = True
        after_name = self._pos
        self._skip_whitespace()
        if self._eat("="):
            self._skip_whitespace()
            value = self._parse_attribute_value()
        else:
            self._pos = after_name

        prefix, _, rest = name.partition(":")
        if rest and prefix in DIRECTIVE_PREFIXES:
            return self._build_directive(prefix, rest, value, start)
        return Attribute(start=start, end=self._pos, name=name, value=value)

    def _parse_attribute_value(self) -> tuple[Node, ...]:
        quote = self._source[self._pos : self._pos + 1]
        if quote in ('"', "'"):
            self._pos += 1
            chunks = self._parse_value_chunks(quote)
            self._expect(quote, f"Expected {quote} to close attribute value")
            return chunks
        if self._match("{"):
            return (self._parse_value_mustache(),)
        chunks = self._parse_value_chunks(None)
        if not chunks:
            raise self._error("Expected an attribute value")
        return chunks

    def _parse_value_chunks(self, quote: str | None) -> tuple[Node, ...]:
        """Read text and ``{expr}`` chunks until ``quote`` (or, unquoted, a delimiter)."""
        chunks: list[Node] = []
        text_start = self._pos

        def flush(end: int) -> None:
            if end > text_start:
                chunks.append(Text(start=text_start, end=end, data=self._source[text_start:end]))

        while not self._eof():
            if quote is not None and self._match(quote):
                break
            if quote is None and _UNQUOTED_VALUE_END.match(self._source, self._pos):
                if not self._match("{"):
                    break
            if self._match("{"):
                flush(self._pos)
                chunks.append(self._parse_value_mustache())
                text_start = self._pos
                continue
            self._pos += 1

        flush(self._pos)
        return tuple(chunks)

    def _parse_value_mustache(self) -> MustacheTag:
        start = self._pos
        self._expect("{")
        expression = self._read_expression()
        self._expect("}")
        return MustacheTag(start=start, end=self._pos, expression=expression)

    def _build_directive(
        self,
        prefix: str,
        rest: str,
        value: Sequence[Node] | bool,
        start: int,
    ) -> Node:
        kind = DIRECTIVE_PREFIXES[prefix]
        name, *modifiers = rest.split("|")
        end = self._pos

        if kind == "Ref":
            return Ref(start=start, end=end, name=name)

        expression: Expr | None = None
        if value is not True:
            if len(value) != 1 or not isinstance(value[0], MustacheTag):
                raise self._error(
                    "Directive value must be an expression enclosed in curly braces",
                    start,
                    end=end,
                    code=ErrorCode.INVALID_EXPRESSION,
                )
            expression = value[0].expression
        elif kind in _SELF_REFERENCING:
            name_start = start + len(prefix) + 1
            expression = Identifier(start=name_start, end=name_start + len(name), name=name)

        if kind == "EventHandler":
            return EventHandler(
                start=start, end=end, name=name, expression=expression, modifiers=tuple(modifiers)
            )
        if kind == "Transition":
            return Transition(
                start=start,
                end=end,
                name=name,
                expression=expression,
                intro=prefix in ("in", "transition"),
                outro=prefix in ("out", "transition"),
                modifiers=tuple(modifiers),
            )
        directive_class = _DIRECTIVE_CLASSES[kind]
        return directive_class(start=start, end=end, name=name, expression=expression)


_DIRECTIVE_CLASSES = {
    "Binding": Binding,
    "Class": Class,
    "Let": Let,
    "Action": Action,
    "Animation": Animation,
}
