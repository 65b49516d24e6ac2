"""Tag and block parsing for the parser.

Provides mixin for everything that starts with ``{`` in markup:
interpolations, ``{@html}``, ``{@debug}`` and the control-flow blocks
``{#if}``, ``{#each}`` and ``{#await}`` with their branches.

Block openers are looked up in :data:`_BLOCK_PARSERS`; branches
(``{:else}``, ``{:then}``, ``{:catch}``) and closers (``{/if}``) are
consumed by the block that owns them.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sveltefmt.exceptions import ErrorCode
from sveltefmt.nodes import (
    AwaitBlock,
    CatchBlock,
    DebugTag,
    EachBlock,
    ElseBlock,
    Identifier,
    IfBlock,
    MustacheTag,
    Node,
    PendingBlock,
    RawMustacheTag,
    ThenBlock,
)
from sveltefmt.parser.expressions import IDENTIFIER

if TYPE_CHECKING:
    from sveltefmt.exceptions import ParseError
    from sveltefmt.nodes import Expr

# Block keyword -> parser method
_BLOCK_PARSERS: dict[str, str] = {
    "if": "_parse_if_block",
    "each": "_parse_each_block",
    "await": "_parse_await_block",
}

_AS_KEYWORD = re.compile(r"\s+as\s")
_THEN_KEYWORD = re.compile(r"\s+then\b")
_BLOCK_KEYWORD = re.compile(r"[a-z]+")


class BlockParsingMixin:
    """Mixin for parsing ``{...}`` tags and control-flow blocks.

    Required Host Attributes:
        - All from ScannerMixin
        - _read_expression: method (ExpressionParsingMixin)
        - _parse_children: method (ElementParsingMixin)
    """

    if TYPE_CHECKING:
        _source: str
        _pos: int

        def _eof(self) -> bool: ...
        def _match(self, text: str) -> bool: ...
        def _eat(self, text: str) -> bool: ...
        def _eat_keyword(self, word: str) -> bool: ...
        def _expect(self, text: str, message: str | None = None) -> None: ...
        def _read(self, pattern: re.Pattern[str]) -> str | None: ...
        def _skip_whitespace(self) -> None: ...
        def _require_whitespace(self) -> None: ...
        def _read_expression(
            self, stops: str = "}", keyword: re.Pattern[str] | None = None
        ) -> Expr: ...
        def _parse_children(self) -> list[Node]: ...
        def _error(
            self,
            message: str,
            start: int | None = None,
            *,
            end: int | None = None,
            code: ErrorCode | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _parse_mustache(self) -> Node:
        start = self._pos
        self._expect("{")
        self._skip_whitespace()

        if self._eat("#"):
            keyword = self._read(_BLOCK_KEYWORD)
            method_name = _BLOCK_PARSERS.get(keyword or "")
            if method_name is None:
                raise self._error(
                    f"Unknown block {{#{keyword or ''}",
                    start,
                    suggestion="Expected {#if ...}, {#each ...} or {#await ...}",
                )
            return getattr(self, method_name)(start)

        if self._eat_keyword("@html"):
            self._require_whitespace()
            expression = self._read_expression()
            self._expect("}")
            return RawMustacheTag(start=start, end=self._pos, expression=expression)

        if self._eat_keyword("@debug"):
            return self._parse_debug_tag(start)

        expression = self._read_expression()
        self._expect("}")
        return MustacheTag(start=start, end=self._pos, expression=expression)

    def _parse_debug_tag(self, start: int) -> DebugTag:
        identifiers: list[Identifier] = []
        self._skip_whitespace()
        while not self._match("}"):
            ident_start = self._pos
            name = self._read(IDENTIFIER)
            if name is None:
                raise self._error(
                    "{@debug ...} arguments must be identifiers",
                    code=ErrorCode.INVALID_EXPRESSION,
                )
            identifiers.append(Identifier(start=ident_start, end=self._pos, name=name))
            self._skip_whitespace()
            if self._eat(","):
                self._skip_whitespace()
            elif not self._match("}"):
                raise self._error("Expected ',' or '}' in {@debug ...}")
        self._expect("}")
        return DebugTag(start=start, end=self._pos, identifiers=tuple(identifiers))

    # ─────────────────────────────────────────────────────────────────────────
    # Branches and closers
    # ─────────────────────────────────────────────────────────────────────────

    def _match_branch(self, keyword: str) -> bool:
        """Check for ``{:keyword`` at the cursor."""
        return re.compile(r"\{:" + keyword + r"\b").match(self._source, self._pos) is not None

    def _expect_block_close(self, keyword: str, start: int) -> None:
        closer = re.compile(r"\{/" + keyword + r"\s*\}")
        match = closer.match(self._source, self._pos)
        if match is None:
            raise self._error(
                f"Block {{#{keyword}}} was left open",
                start,
                code=ErrorCode.UNCLOSED_BLOCK,
                suggestion=f"Close it with {{/{keyword}}}",
            )
        self._pos = match.end()

    def _parse_plain_else(self) -> ElseBlock:
        start = self._pos
        self._expect("{:else")
        self._skip_whitespace()
        self._expect("}")
        children = self._parse_children()
        return ElseBlock(start=start, end=self._pos, children=tuple(children))

    # ─────────────────────────────────────────────────────────────────────────
    # Blocks
    # ─────────────────────────────────────────────────────────────────────────

    def _parse_if_block(self, start: int, elseif: bool = False) -> IfBlock:
        """Parse {#if cond}...{:else if cond}...{:else}...{/if}.

        An ``{:else if}`` branch becomes an ElseBlock holding one IfBlock
        (``elseif=True``) that shares the outer block's ``{/if}``.
        """
        self._require_whitespace()
        expression = self._read_expression()
        self._expect("}")
        children = self._parse_children()

        else_: ElseBlock | None = None
        if self._match_branch("else"):
            else_start = self._pos
            self._pos += len("{:else")
            self._skip_whitespace()
            if self._eat_keyword("if"):
                nested = self._parse_if_block(else_start, elseif=True)
                else_ = ElseBlock(start=else_start, end=nested.end, children=(nested,))
            else:
                self._pos = else_start
                else_ = self._parse_plain_else()

        if not elseif:
            self._expect_block_close("if", start)
        return IfBlock(
            start=start,
            end=self._pos,
            expression=expression,
            children=tuple(children),
            else_=else_,
            elseif=elseif,
        )

    def _parse_each_block(self, start: int) -> EachBlock:
        """Parse {#each items as item, index (key)}...{:else}...{/each}."""
        self._require_whitespace()
        expression = self._read_expression(keyword=_AS_KEYWORD)
        self._skip_whitespace()
        if not self._eat_keyword("as"):
            raise self._error("Expected 'as' in {#each ...}")
        self._require_whitespace()
        context = self._read_expression(stops=",(}")
        self._skip_whitespace()

        index: str | None = None
        if self._eat(","):
            self._skip_whitespace()
            index = self._read(IDENTIFIER)
            if index is None:
                raise self._error("Expected an index name after ','")
            self._skip_whitespace()

        key: Expr | None = None
        if self._eat("("):
            key = self._read_expression(stops=")")
            self._expect(")")
            self._skip_whitespace()

        self._expect("}")
        children = self._parse_children()

        else_: ElseBlock | None = None
        if self._match_branch("else"):
            else_ = self._parse_plain_else()

        self._expect_block_close("each", start)
        return EachBlock(
            start=start,
            end=self._pos,
            expression=expression,
            context=context,
            children=tuple(children),
            index=index,
            key=key,
            else_=else_,
        )

    def _parse_await_block(self, start: int) -> AwaitBlock:
        """Parse {#await p}...{:then v}...{:catch e}...{/await} (or {#await p then v})."""
        self._require_whitespace()
        expression = self._read_expression(keyword=_THEN_KEYWORD)
        self._skip_whitespace()

        value: Expr | None = None
        error: Expr | None = None

        pending_start = self._pos
        pending_children: list[Node] = []
        if self._eat_keyword("then"):
            value = self._read_branch_binding()
            pending = PendingBlock(start=pending_start, end=pending_start, children=())
            then = self._parse_branch_body(ThenBlock)
        else:
            self._expect("}")
            pending_start = self._pos
            pending_children = self._parse_children()
            pending = PendingBlock(
                start=pending_start, end=self._pos, children=tuple(pending_children)
            )
            if self._match_branch("then"):
                self._pos += len("{:then")
                value = self._read_branch_binding()
                then = self._parse_branch_body(ThenBlock)
            else:
                then = ThenBlock(start=self._pos, end=self._pos, children=())

        if self._match_branch("catch"):
            self._pos += len("{:catch")
            error = self._read_branch_binding()
            catch = self._parse_branch_body(CatchBlock)
        else:
            catch = CatchBlock(start=self._pos, end=self._pos, children=())

        self._expect_block_close("await", start)
        return AwaitBlock(
            start=start,
            end=self._pos,
            expression=expression,
            value=value,
            error=error,
            pending=pending,
            then=then,
            catch=catch,
        )

    def _read_branch_binding(self) -> Expr | None:
        """Read the optional name after then/catch, through the closing ``}``."""
        self._skip_whitespace()
        binding = None if self._match("}") else self._read_expression()
        self._expect("}")
        return binding

    def _parse_branch_body(
        self, block_class: type[ThenBlock] | type[CatchBlock]
    ) -> ThenBlock | CatchBlock:
        start = self._pos
        children = self._parse_children()
        return block_class(start=start, end=self._pos, children=tuple(children))
