"""Tests for tag-content extraction and preprocessing."""

import pytest
from hypothesis import example, given, settings

from sveltefmt.extract import (
    CONTENT_ATTRIBUTE,
    Placeholder,
    decode_content,
    encode_content,
    extract_tag_content,
    preprocess,
)

from .strategies import region_content


class TestEncoding:
    """Content encoding is lossless and attribute-safe."""

    def test_encode_decode_unicode(self):
        content = 'p::before { content: "✂ </b> ünïcödé"; }\r\n'
        assert decode_content(encode_content(content)) == content

    def test_encoded_text_has_no_quotes_or_brackets(self):
        encoded = encode_content('"<>&\'')
        assert not set(encoded) & set("\"'<>& ")

    @given(content=region_content)
    @example(content='p::after { content: "<\\/style>"; }')
    @example(content='a { b: "</sty" + "le>" }')
    @settings(max_examples=200)
    def test_extraction_round_trip(self, content: str) -> None:
        """Decoding the synthetic attribute reproduces the content exactly."""
        rest, tags = extract_tag_content("style", f"<style>{content}</style>")
        assert rest == ""
        assert len(tags) == 1
        assert tags[0].content == content


class TestExtractTagContent:
    """Matching rules of the single-pass scanner."""

    def test_extracts_and_removes_region(self):
        rest, tags = extract_tag_content("style", "<p>hi</p><style>p { color: red; }</style>")
        assert rest == "<p>hi</p>"
        assert tags == [
            Placeholder(
                tag_name="style",
                attributes="",
                encoded=encode_content("p { color: red; }"),
                body="",
                order=0,
            )
        ]

    def test_text_outside_regions_untouched(self):
        rest, _ = extract_tag_content("style", "before <style>x</style> after")
        assert rest == "before  after"

    def test_attributes_kept_verbatim(self):
        _, tags = extract_tag_content("style", '<style lang="scss" data-x="a>b">c</style>')
        assert tags[0].attributes == ' lang="scss" data-x="a>b"'
        assert tags[0].content == "c"

    def test_case_insensitive_match(self):
        rest, tags = extract_tag_content("style", "<STYLE>a</Style >")
        assert rest == ""
        assert tags[0].content == "a"

    def test_name_must_end_at_boundary(self):
        source = "<styles>x</styles>"
        assert extract_tag_content("style", source) == (source, [])

    def test_nested_region_not_extracted(self):
        source = "<div><style>a</style></div>"
        assert extract_tag_content("style", source) == (source, [])

    def test_region_after_nested_element_is_extracted(self):
        rest, tags = extract_tag_content("style", "<div><br><img /></div><style>a</style>")
        assert rest == "<div><br><img /></div>"
        assert tags[0].content == "a"

    def test_commented_out_region_skipped(self):
        source = "<!-- <style>a</style> --><p></p>"
        assert extract_tag_content("style", source) == (source, [])

    def test_other_raw_text_content_skipped(self):
        source = '<script>const s = "<style>";</script><style>a</style>'
        rest, tags = extract_tag_content("style", source)
        assert rest == '<script>const s = "<style>";</script>'
        assert [tag.content for tag in tags] == ["a"]

    @pytest.mark.parametrize(
        "markup",
        [
            "<p>{a<b}</p>",
            "<p>{a > b}</p>",
            "{#if a<b}<p></p>{/if}",
            '<p>{"}<" + a}</p>',
            "<p>{`${a}<b`}</p>",
            "<input value={a<b}>",
        ],
    )
    def test_interpolations_may_hold_angle_brackets(self, markup):
        rest, tags = extract_tag_content("style", f"{markup}<style>x</style>")
        assert rest == markup
        assert [tag.content for tag in tags] == ["x"]

    def test_interpolation_inside_nested_element(self):
        source = "<div>{a > b}<style>x</style></div>"
        assert extract_tag_content("style", source) == (source, [])

    @pytest.mark.parametrize(
        ("tag_name", "content"),
        [
            ("script", 'const s = "<\\/script>";'),
            ("script", 'const s = "</scr" + "ipt>";'),
            ("script", "const end = /<\\/script>/;"),
            ("style", 'p::after { content: "<\\/style>"; }'),
        ],
    )
    def test_escaped_closing_sequence_stays_in_content(self, tag_name, content):
        source = f"<{tag_name}>{content}</{tag_name}><p></p>"
        rest, tags = extract_tag_content(tag_name, source)
        assert rest == "<p></p>"
        assert [tag.content for tag in tags] == [content]

    def test_unterminated_region_left_in_place(self):
        source = "<p>x</p><style>a"
        assert extract_tag_content("style", source) == (source, [])

    def test_self_closing_region_is_empty(self):
        rest, tags = extract_tag_content("style", '<style lang="css" />')
        assert rest == ""
        assert tags[0].content == ""
        assert tags[0].attributes == ' lang="css"'

    def test_multiple_regions_in_order(self):
        _, tags = extract_tag_content("script", "<script>a</script><p></p><script>b</script>")
        assert [(tag.order, tag.content) for tag in tags] == [(0, "a"), (1, "b")]

    def test_placeholder_true_keeps_content(self):
        _, tags = extract_tag_content("script", "<script>let a;</script>", placeholder=True)
        assert tags[0].body == "let a;"

    def test_placeholder_string_used_literally(self):
        _, tags = extract_tag_content("style", "<style>a</style>", placeholder="/* css */")
        assert tags[0].body == "/* css */"

    def test_render(self):
        _, tags = extract_tag_content("style", '<style lang="scss">a</style>')
        assert tags[0].render() == (
            f'<style lang="scss" {CONTENT_ATTRIBUTE}="{encode_content("a")}"></style>'
        )

    def test_idempotent_on_rewritten_input(self):
        """A tag that already carries the payload keeps it and is not re-wrapped."""
        _, first = extract_tag_content("style", '<style lang="scss">a { b: c }</style>')
        rest, second = extract_tag_content("style", first[0].render())
        assert rest == ""
        assert second[0].encoded == first[0].encoded
        assert second[0].attributes == ' lang="scss"'
        assert second[0].render() == first[0].render()

    def test_idempotent_with_visible_body(self):
        _, first = extract_tag_content("script", "<script>let a;</script>", placeholder=True)
        _, second = extract_tag_content("script", first[0].render(), placeholder=True)
        assert second[0].render() == first[0].render()


class TestPreprocess:
    """Regions are hoisted: scripts first, styles last."""

    def test_hoists_regions(self):
        source = "<style>p{}</style>\n<p>x</p>\n<script>let a;</script>\n"
        expected = (
            f'<script {CONTENT_ATTRIBUTE}="{encode_content("let a;")}">let a;</script>'
            "<p>x</p>"
            f'<style {CONTENT_ATTRIBUTE}="{encode_content("p{}")}"></style>'
        )
        assert preprocess(source) == expected

    def test_markup_only_is_stripped(self):
        assert preprocess("\n\n  <p>x</p>\n") == "<p>x</p>"

    def test_preprocess_is_stable(self):
        source = '<script context="module">export const x = 1;</script><p>a</p><style>b{}</style>'
        once = preprocess(source)
        assert preprocess(once) == once
