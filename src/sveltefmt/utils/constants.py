"""Shared markup constants."""

from __future__ import annotations

# Elements that never have content or a closing tag
# Source: WHATWG HTML Living Standard, void elements
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose content is raw text, ended only by the matching closing tag
RAW_TEXT_ELEMENTS: frozenset[str] = frozenset({"script", "style"})

# Special elements and the node kind each one becomes
META_ELEMENTS: dict[str, str] = {
    "svelte:window": "Window",
    "svelte:head": "Head",
    "svelte:body": "Body",
    "svelte:options": "Options",
    "svelte:self": "InlineComponent",
    "svelte:component": "InlineComponent",
}

# Directive prefix -> directive node kind
DIRECTIVE_PREFIXES: dict[str, str] = {
    "on": "EventHandler",
    "bind": "Binding",
    "class": "Class",
    "let": "Let",
    "use": "Action",
    "animate": "Animation",
    "transition": "Transition",
    "in": "Transition",
    "out": "Transition",
    "ref": "Ref",
}

# Whitespace that separates words in text content
WHITESPACE = "\t\n\f\r "

# Number of line breaks a whitespace-only text needs to count as a blank
# line that survives between block siblings
BLANK_LINE_THRESHOLD = 2
