"""Shared hypothesis strategies for sveltefmt property-based testing.

Provides reusable strategies that generate structurally valid component
sources at three abstraction levels:

- **Content**: raw text for embedded regions (anything but the closing tag)
- **Inline**: words and interpolations with the whitespace between them
- **Markup**: nested elements and control-flow blocks

These are building blocks -- individual test modules compose them into
property-specific strategies.
"""

from __future__ import annotations

from hypothesis import strategies as st

# ---------------------------------------------------------------------------
# Content strategies
# ---------------------------------------------------------------------------

# Arbitrary region content; only the region's own closing tag is excluded
region_content = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    max_size=200,
).filter(lambda s: "</style" not in s.lower() and "</script" not in s.lower())

# ---------------------------------------------------------------------------
# Inline strategies
# ---------------------------------------------------------------------------

identifier = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True).filter(
    lambda name: name not in {"true", "false", "null", "this", "typeof", "void", "new"}
)

word = st.from_regex(r"[A-Za-z0-9.,!?]{1,10}", fullmatch=True)

# Bare names and comparisons, whose "<" and ">" must not read as tags
mustache = st.one_of(
    identifier.map(lambda name: f"{{{name}}}"),
    st.tuples(identifier, st.sampled_from(["<", ">", " < ", " >= "]), identifier).map(
        lambda parts: f"{{{parts[0]}{parts[1]}{parts[2]}}}"
    ),
)

separator = st.sampled_from(["", " ", "\n", "  ", "\n\n", "\n  \n"])

inline_piece = st.one_of(word, word, mustache)

# Words and interpolations; consecutive words always get a separator
inline_content = st.lists(
    st.tuples(separator, inline_piece),
    min_size=1,
    max_size=8,
).map(lambda pairs: "".join(sep + piece for sep, piece in pairs))

# ---------------------------------------------------------------------------
# Markup strategies
# ---------------------------------------------------------------------------

tag_name = st.sampled_from(["div", "p", "span", "section", "em", "li"])

attribute = st.one_of(
    st.tuples(st.sampled_from(["class", "id", "title"]), word).map(
        lambda pair: f' {pair[0]}="{pair[1]}"'
    ),
    identifier.map(lambda name: f" {{{name}}}"),
    identifier.map(lambda name: f" on:click={{{name}}}"),
    st.just(" hidden"),
)

attributes = st.lists(attribute, max_size=3).map("".join)

void_element = st.sampled_from(["<br>", "<br />", "<hr/>", '<img src="a.png">'])


def _element(children: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    return st.tuples(tag_name, attributes, children).map(
        lambda parts: f"<{parts[0]}{parts[1]}>{parts[2]}</{parts[0]}>"
    )


def _if_block(children: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    return st.tuples(identifier, children, st.none() | children).map(
        lambda parts: (
            f"{{#if {parts[0]}}}{parts[1]}{{/if}}"
            if parts[2] is None
            else f"{{#if {parts[0]}}}{parts[1]}{{:else}}{parts[2]}{{/if}}"
        )
    )


def _each_block(children: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    return st.tuples(identifier, identifier, children).map(
        lambda parts: f"{{#each {parts[0]}s as {parts[1]}}}{parts[2]}{{/each}}"
    )


def _sequence(node: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    return st.lists(st.tuples(separator, node), max_size=4).map(
        lambda pairs: "".join(sep + piece for sep, piece in pairs)
    )


# Nested markup: elements and blocks holding text, interpolations and each other
markup = st.recursive(
    st.one_of(inline_content, void_element),
    lambda children: st.one_of(
        _element(_sequence(children)),
        _if_block(_sequence(children)),
        _each_block(_sequence(children)),
    ),
    max_leaves=12,
)

component = _sequence(markup)
