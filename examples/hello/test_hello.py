"""Tests for the hello example."""

import sveltefmt


class TestHelloApp:
    """Verify the hello example formats the component."""

    def test_script_first_style_last(self, example_app) -> None:
        output = example_app.output
        assert output.index("<script>") < output.index("<div>") < output.index("<style>")

    def test_region_content_kept_as_written(self, example_app) -> None:
        assert '<script>let name = "world";</script>' in example_app.output

    def test_markup_nested(self, example_app) -> None:
        assert "<div>\n  <span>Hello {name}!</span>\n</div>" in example_app.output

    def test_output_is_stable(self, example_app) -> None:
        assert sveltefmt.format(example_app.output) == example_app.output
