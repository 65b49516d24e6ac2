"""Tag-content extraction for embedded regions.

Embedded ``<script>`` and ``<style>`` regions hold another language. Before
parsing, each top-level region is cut out of the component source and turned
into a :class:`Placeholder`: the original content is base64-encoded into a
synthetic attribute (:data:`CONTENT_ATTRIBUTE`), so later stages can recover
it byte for byte without re-reading the source.

The scanner is a single left-to-right pass. It tracks quoting and brace
nesting inside opening tags, skips comments and the raw content of other
script/style elements, and counts element depth so only regions at the top
level of the component are extracted. Anything it cannot match (for example
an opening tag without a closing tag) is left where it is.

Example:
    >>> rest, tags = extract_tag_content("style", "<p>hi</p><style>p { color: red; }</style>")
    >>> rest
    '<p>hi</p>'
    >>> tags[0].content
    'p { color: red; }'
"""

from __future__ import annotations

import base64
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from sveltefmt.utils.constants import RAW_TEXT_ELEMENTS, VOID_ELEMENTS

logger = logging.getLogger(__name__)

CONTENT_ATTRIBUTE = "✂sveltefmt:content✂"

_TAG_OPEN = re.compile(r"<(/?)([A-Za-z][\w:.\-]*)")
_MARKUP_SPECIAL = re.compile(r"[<{]")
_CONTENT_ATTR_RE = re.compile(r'\s*' + re.escape(CONTENT_ATTRIBUTE) + r'="([^"]*)"')


def encode_content(content: str) -> str:
    """Encode region content as printable, attribute-safe text."""
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def decode_content(encoded: str) -> str:
    """Inverse of :func:`encode_content`."""
    return base64.b64decode(encoded.encode("ascii")).decode("utf-8")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """An extracted region, ready to be re-inserted as a rewritten tag.

    Attributes:
        tag_name: Tag that was matched (as requested, e.g. "script").
        attributes: Original attribute text, verbatim, without the synthetic attribute.
        encoded: Base64 of the original content.
        body: What the rewritten tag shows as its content.
        order: Position among the regions extracted in the same call.
    """

    tag_name: str
    attributes: str
    encoded: str
    body: str
    order: int

    @property
    def content(self) -> str:
        """The original region content."""
        return decode_content(self.encoded)

    def render(self) -> str:
        """Rewritten tag carrying the encoded content."""
        return (
            f"<{self.tag_name}{self.attributes} "
            f'{CONTENT_ATTRIBUTE}="{self.encoded}">{self.body}</{self.tag_name}>'
        )


@dataclass(frozen=True, slots=True)
class _Region:
    start: int
    end: int
    attributes: str
    content: str


def _find_tag_end(source: str, pos: int) -> int:
    """Index of the ``>`` closing the tag that starts before ``pos``, or -1.

    Quoted values and ``{...}`` expressions may contain ``>``.
    """
    quote: str | None = None
    braces = 0
    for i in range(pos, len(source)):
        char = source[i]
        if quote is not None:
            if char == quote:
                quote = None
        elif char in "\"'`":
            quote = char
        elif char == "{":
            braces += 1
        elif char == "}":
            braces = max(0, braces - 1)
        elif char == ">" and braces == 0:
            return i
    return -1


def _find_expression_end(source: str, pos: int) -> int:
    """Index just past the ``}`` matching the ``{`` at ``pos``, or -1.

    Braces inside string and template literals do not count.
    """
    quote: str | None = None
    braces = 0
    i = pos
    while i < len(source):
        char = source[i]
        if quote is not None:
            if char == "\\":
                i += 1
            elif char == quote:
                quote = None
        elif char in "\"'`":
            quote = char
        elif char == "{":
            braces += 1
        elif char == "}":
            braces -= 1
            if braces == 0:
                return i + 1
        i += 1
    return -1


def _closing_tag(name: str) -> re.Pattern[str]:
    return re.compile(rf"</{re.escape(name)}\s*>", re.IGNORECASE)


def _scan(tag_name: str, source: str) -> Iterator[_Region]:
    """Yield every top-level ``<tag_name ...>...</tag_name>`` region in order."""
    wanted = tag_name.lower()
    closing = _closing_tag(wanted)
    depth = 0
    pos = 0

    while True:
        found = _MARKUP_SPECIAL.search(source, pos)
        if found is None:
            return
        lt = found.start()

        if source[lt] == "{":
            # interpolations and block tags may hold "<" and ">"
            end = _find_expression_end(source, lt)
            if end < 0:
                return
            pos = end
            continue

        if source.startswith("<!--", lt):
            end = source.find("-->", lt + 4)
            if end < 0:
                return
            pos = end + 3
            continue

        match = _TAG_OPEN.match(source, lt)
        if match is None:
            pos = lt + 1
            continue

        gt = _find_tag_end(source, match.end())
        if gt < 0:
            return

        is_closing = match.group(1) == "/"
        name = match.group(2).lower()
        self_closing = source[gt - 1] == "/"
        pos = gt + 1

        if is_closing:
            depth = max(0, depth - 1)
            continue

        if name == wanted and depth == 0:
            attributes = source[match.end() : gt - 1 if self_closing else gt]
            if self_closing:
                yield _Region(lt, gt + 1, attributes, "")
                continue
            close = closing.search(source, gt + 1)
            if close is None:
                continue
            yield _Region(lt, close.end(), attributes, source[gt + 1 : close.start()])
            pos = close.end()
            continue

        if self_closing or name in VOID_ELEMENTS:
            continue

        if name in RAW_TEXT_ELEMENTS:
            close = _closing_tag(name).search(source, gt + 1)
            if close is not None:
                pos = close.end()
            continue

        depth += 1


def extract_tag_content(
    tag_name: str,
    source: str,
    placeholder: str | bool = "",
) -> tuple[str, list[Placeholder]]:
    """Cut every top-level ``tag_name`` region out of ``source``.

    Args:
        tag_name: Tag to extract (matched case-insensitively).
        source: Component source.
        placeholder: Body of the rewritten tag: ``True`` keeps the original
            content, a string is used literally.

    Returns:
        The source with the regions removed, and one :class:`Placeholder` per
        region in source order.
    """
    placeholders: list[Placeholder] = []
    pieces: list[str] = []
    pos = 0

    for region in _scan(tag_name, source):
        attributes = region.attributes
        existing = _CONTENT_ATTR_RE.search(attributes)
        if existing is not None:
            # already rewritten: the visible body is a placeholder, keep the payload
            encoded = existing.group(1)
            attributes = attributes[: existing.start()] + attributes[existing.end() :]
        else:
            encoded = encode_content(region.content)

        body = region.content if placeholder is True else (placeholder or "")
        placeholders.append(
            Placeholder(
                tag_name=tag_name,
                attributes=attributes.rstrip(),
                encoded=encoded,
                body=body,
                order=len(placeholders),
            )
        )
        pieces.append(source[pos : region.start])
        pos = region.end

    pieces.append(source[pos:])
    if placeholders:
        logger.debug("extracted %d <%s> region(s)", len(placeholders), tag_name)
    return "".join(pieces), placeholders


def preprocess(source: str) -> str:
    """Hoist embedded regions: scripts first, then markup, then styles.

    Style content is replaced by the encoded attribute; script content stays
    visible after encoding.
    """
    rest, styles = extract_tag_content("style", source)
    rest, scripts = extract_tag_content("script", rest, placeholder=True)
    return "".join(
        [
            *(tag.render() for tag in scripts),
            rest.strip(),
            *(tag.render() for tag in styles),
        ]
    )


__all__ = [
    "CONTENT_ATTRIBUTE",
    "Placeholder",
    "decode_content",
    "encode_content",
    "extract_tag_content",
    "preprocess",
]
