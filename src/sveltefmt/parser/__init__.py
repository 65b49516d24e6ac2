"""Component source parser.

Turns component source into the immutable syntax tree of
:mod:`sveltefmt.nodes`, with start/end offsets on every node.

Example:
    >>> from sveltefmt.parser import parse
    >>> root = parse("{#if ok}<b>yes</b>{/if}")
    >>> type(root.html.children[0]).__name__
    'IfBlock'
"""

from sveltefmt.exceptions import ParseError
from sveltefmt.parser.core import Parser, parse

__all__ = ["ParseError", "Parser", "parse"]
