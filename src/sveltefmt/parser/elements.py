"""Element, text and comment parsing for the parser.

Provides mixin for parsing markup children: tags (elements, components,
``svelte:*`` meta elements, slots), comments, text, and the top-level
``<script>``/``<style>`` regions that are lifted into the root.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sveltefmt.exceptions import ErrorCode
from sveltefmt.nodes import (
    Attribute,
    BaseElement,
    Body,
    Comment,
    Element,
    Head,
    InlineComponent,
    MustacheTag,
    Node,
    Options,
    Script,
    Slot,
    Style,
    Text,
    Title,
    Window,
)
from sveltefmt.utils.constants import META_ELEMENTS, RAW_TEXT_ELEMENTS, VOID_ELEMENTS

if TYPE_CHECKING:
    from sveltefmt.exceptions import ParseError
    from sveltefmt.nodes import Expr

_TAG_NAME = re.compile(r"[A-Za-z][\w:.\-]*")
_TEXT_END = re.compile(r"<[A-Za-z/!]|\{")

_ELEMENT_CLASSES: dict[str, type[BaseElement]] = {
    "Element": Element,
    "InlineComponent": InlineComponent,
    "Slot": Slot,
    "Window": Window,
    "Head": Head,
    "Body": Body,
    "Options": Options,
    "Title": Title,
}


class ElementParsingMixin:
    """Mixin for parsing markup children.

    Required Host Attributes:
        - All from ScannerMixin
        - _depth, _in_head: nesting state (Parser.__init__)
        - _instance, _module, _css: lifted regions (Parser.__init__)
        - _parse_attributes: method (AttributeParsingMixin)
        - _parse_mustache: method (BlockParsingMixin)
    """

    if TYPE_CHECKING:
        _source: str
        _pos: int
        _depth: int
        _in_head: bool
        _instance: Script | None
        _module: Script | None
        _css: Style | None

        def _eof(self) -> bool: ...
        def _match(self, text: str) -> bool: ...
        def _eat(self, text: str) -> bool: ...
        def _expect(self, text: str, message: str | None = None) -> None: ...
        def _read(self, pattern: re.Pattern[str]) -> str | None: ...
        def _skip_whitespace(self) -> None: ...
        def _parse_attributes(self, tag_start: int) -> list[Node]: ...
        def _parse_mustache(self) -> Node: ...
        def _error(
            self,
            message: str,
            start: int | None = None,
            *,
            end: int | None = None,
            code: ErrorCode | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _parse_children(self) -> list[Node]:
        """Parse markup until EOF, a closing tag, or a block branch/closer.

        The terminator is left for the caller to consume.
        """
        children: list[Node] = []
        while not self._eof():
            if self._match("</") or self._match("{:") or self._match("{/"):
                break
            if self._match("<!--"):
                children.append(self._parse_comment())
            elif self._match("<") and _TAG_NAME.match(self._source, self._pos + 1):
                element = self._parse_element()
                if element is not None:
                    children.append(element)
            elif self._match("{"):
                children.append(self._parse_mustache())
            else:
                children.append(self._parse_text())
        return children

    def _parse_text(self) -> Text:
        start = self._pos
        # a stray "<" that does not open a tag is text; always consume something
        match = _TEXT_END.search(self._source, start + 1)
        end = match.start() if match else len(self._source)
        self._pos = end
        return Text(start=start, end=end, data=self._source[start:end])

    def _parse_comment(self) -> Comment:
        start = self._pos
        self._expect("<!--")
        close = self._source.find("-->", self._pos)
        if close < 0:
            raise self._error("Unclosed comment", start, code=ErrorCode.UNCLOSED_TAG)
        data = self._source[self._pos : close]
        self._pos = close + 3
        return Comment(start=start, end=self._pos, data=data)

    def _parse_element(self) -> Node | None:
        """Parse a tag and its children; returns None for a lifted script/style region."""
        start = self._pos
        self._expect("<")
        name = self._read(_TAG_NAME)
        if name is None:
            raise self._error("Expected tag name")

        lowered = name.lower()
        if lowered in RAW_TEXT_ELEMENTS and self._depth == 0:
            self._parse_region(start, lowered)
            return None

        kind = self._element_kind(name)
        attributes = self._parse_attributes(start)
        expression: Expr | None = None
        if name == "svelte:component":
            attributes, expression = self._take_this_expression(attributes, start)

        self_closing = self._eat("/>")
        if not self_closing:
            self._expect(">")

        children: list[Node] = []
        if not self_closing and kind == "Element" and lowered in RAW_TEXT_ELEMENTS:
            children = self._parse_raw_text(name, start)
        elif not self_closing and lowered not in VOID_ELEMENTS:
            was_in_head = self._in_head
            self._depth += 1
            self._in_head = was_in_head or kind == "Head"
            try:
                children = self._parse_children()
            finally:
                self._depth -= 1
                self._in_head = was_in_head
            self._expect_closing_tag(name, start)

        element_class = _ELEMENT_CLASSES[kind]
        if element_class is InlineComponent:
            return InlineComponent(
                start=start,
                end=self._pos,
                name=name,
                attributes=tuple(attributes),
                children=tuple(children),
                expression=expression,
            )
        return element_class(
            start=start,
            end=self._pos,
            name=name,
            attributes=tuple(attributes),
            children=tuple(children),
        )

    def _parse_raw_text(self, name: str, start: int) -> list[Node]:
        """Read a nested <script>/<style> body as one Text child and consume its closing tag.

        The body is not markup: braces and ``<`` are plain characters up to the
        first ``</name>``.
        """
        closing = re.compile(rf"</{re.escape(name)}\s*>", re.IGNORECASE)
        close = closing.search(self._source, self._pos)
        if close is None:
            raise self._error(f"<{name}> was left open", start, code=ErrorCode.UNCLOSED_TAG)
        body_start = self._pos
        self._pos = close.end()
        if close.start() == body_start:
            return []
        return [Text(start=body_start, end=close.start(), data=self._source[body_start : close.start()])]

    def _element_kind(self, name: str) -> str:
        if name in META_ELEMENTS:
            return META_ELEMENTS[name]
        if name == "slot":
            return "Slot"
        if name == "title" and self._in_head:
            return "Title"
        if name[0].isupper() or "." in name:
            return "InlineComponent"
        return "Element"

    def _take_this_expression(
        self, attributes: list[Node], tag_start: int
    ) -> tuple[list[Node], Expr]:
        """Split ``this={...}`` off a ``<svelte:component>`` attribute list."""
        remaining: list[Node] = []
        expression: Expr | None = None
        for attribute in attributes:
            if isinstance(attribute, Attribute) and attribute.name == "this":
                value = attribute.value
                if value is True or len(value) != 1 or not isinstance(value[0], MustacheTag):
                    raise self._error(
                        "svelte:component requires this={expression}",
                        attribute.start,
                        end=attribute.end,
                        code=ErrorCode.INVALID_EXPRESSION,
                    )
                expression = value[0].expression
            else:
                remaining.append(attribute)
        if expression is None:
            raise self._error(
                "svelte:component is missing its this={expression} attribute",
                tag_start,
                code=ErrorCode.INVALID_EXPRESSION,
            )
        return remaining, expression

    def _expect_closing_tag(self, name: str, start: int) -> None:
        if self._eof():
            raise self._error(f"<{name}> was left open", start, code=ErrorCode.UNCLOSED_TAG)
        closing = re.compile(rf"</{re.escape(name)}\s*>")
        match = closing.match(self._source, self._pos)
        if match is None:
            found = self._source[self._pos : self._source.find(">", self._pos) + 1 or None]
            if self._match("</"):
                raise self._error(
                    f"Unexpected closing tag {found}, expected </{name}>",
                    code=ErrorCode.UNEXPECTED_CLOSING_TAG,
                )
            raise self._error(
                f"<{name}> was left open",
                start,
                code=ErrorCode.UNCLOSED_TAG,
                suggestion=f"Close <{name}> before {found or 'this point'}",
            )
        self._pos = match.end()

    def _parse_region(self, start: int, name: str) -> None:
        """Parse a top-level <script> or <style> and store it on the parser."""
        attributes = [a for a in self._parse_attributes(start) if isinstance(a, Attribute)]
        if self._eat("/>"):
            content = ""
        else:
            self._expect(">")
            close = re.compile(rf"</{name}\s*>", re.IGNORECASE).search(self._source, self._pos)
            if close is None:
                raise self._error(f"<{name}> was left open", start, code=ErrorCode.UNCLOSED_TAG)
            content = self._source[self._pos : close.start()]
            self._pos = close.end()

        if name == "style":
            if self._css is not None:
                raise self._error(
                    "A component can only have one top-level <style>",
                    start,
                    end=self._pos,
                    code=ErrorCode.DUPLICATE_REGION,
                )
            self._css = Style(start=start, end=self._pos, attributes=tuple(attributes), content=content)
            return

        context = "module" if _is_module_context(attributes) else "default"
        script = Script(
            start=start,
            end=self._pos,
            context=context,
            attributes=tuple(attributes),
            content=content,
        )
        if context == "module":
            if self._module is not None:
                raise self._error(
                    'A component can only have one <script context="module">',
                    start,
                    end=self._pos,
                    code=ErrorCode.DUPLICATE_REGION,
                )
            self._module = script
        else:
            if self._instance is not None:
                raise self._error(
                    "A component can only have one instance-level <script>",
                    start,
                    end=self._pos,
                    code=ErrorCode.DUPLICATE_REGION,
                )
            self._instance = script


def _is_module_context(attributes: list[Attribute]) -> bool:
    for attribute in attributes:
        if attribute.name != "context" or attribute.value is True:
            continue
        value = attribute.value
        return len(value) == 1 and isinstance(value[0], Text) and value[0].data == "module"
    return False
