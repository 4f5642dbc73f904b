"""Edge cases for HtmlRenderer input handling and output sinks."""

from __future__ import annotations

import pytest

from linemd import StringBuilder, parse, render_to_buffer
from linemd.errors import RenderError
from linemd.renderers import HtmlRenderer, TokenRenderer
from linemd.renderers.html import RenderState, html_escape
from linemd.tokens import Header, LineBreak, Text


class TestInputShapes:
    def test_generator_input(self) -> None:
        tokens = parse("- a\n- b")
        renderer = HtmlRenderer()
        assert renderer.render(t for t in tokens) == renderer.render(tokens)

    def test_tuple_input(self) -> None:
        assert HtmlRenderer().render((Text("x"),)) == "<p>x </p>"

    def test_renderer_is_reusable(self) -> None:
        """State from one render never leaks into the next."""
        renderer = HtmlRenderer()
        first = renderer.render(parse("- a"))
        second = renderer.render(parse("- a"))
        assert first == second == "<ul>\n<li>a </li></ul>\n"

    def test_nested_header_markers(self) -> None:
        """A marker inside a heading's inline run still renders."""
        assert HtmlRenderer().render(parse("# # a")) == "<h1><h1>a </h1></h1>"


class TestRenderErrors:
    def test_non_token_raises(self) -> None:
        with pytest.raises(RenderError, match="at index 1") as exc_info:
            HtmlRenderer().render([Text("a"), "oops"])  # type: ignore[list-item]
        assert exc_info.value.obj == "oops"
        assert exc_info.value.position == 1

    def test_non_token_inside_header(self) -> None:
        with pytest.raises(RenderError, match="int object"):
            HtmlRenderer().render([Header(1), 42, LineBreak()])  # type: ignore[list-item]

    def test_none_raises(self) -> None:
        with pytest.raises(RenderError):
            HtmlRenderer().render([None])  # type: ignore[list-item]


class TestBufferRendering:
    def test_render_to_buffer_appends(self) -> None:
        sb = StringBuilder()
        sb.append("<div>")
        render_to_buffer(parse("x"), sb)
        sb.append("</div>")
        assert sb.build() == "<div><p>x </p></div>"

    def test_render_to_buffer_escape_flag(self) -> None:
        sb = StringBuilder()
        render_to_buffer([Text("<b>")], sb, escape_html=False)
        assert sb.build() == "<p><b> </p>"

    def test_render_to_matches_render(self) -> None:
        tokens = parse("# T\n\ntext *i*")
        renderer = HtmlRenderer()
        sb = StringBuilder()
        renderer.render_to(tokens, sb)
        assert sb.build() == renderer.render(tokens)


class TestHelpers:
    def test_render_state_defaults(self) -> None:
        state = RenderState()
        assert not (
            state.in_unordered_list
            or state.in_ordered_list
            or state.in_paragraph
            or state.was_line_break
        )

    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("a<b>c", "a&lt;b&gt;c"),
            ("&", "&amp;"),
            ('"', "&quot;"),
            ("'", "'"),
            ("&amp;", "&amp;amp;"),
        ],
    )
    def test_html_escape(self, raw: str, escaped: str) -> None:
        assert html_escape(raw) == escaped

    def test_protocol_conformance(self) -> None:
        assert isinstance(HtmlRenderer(), TokenRenderer)

    def test_protocol_rejects_non_renderer(self) -> None:
        assert not isinstance(object(), TokenRenderer)
