"""Tests for optional code fence highlighting."""

from __future__ import annotations

import pytest

from linemd import Markdown
from linemd import highlighting
from linemd.highlighting import get_highlighter, has_highlighter, highlight, set_highlighter
from linemd.renderers.html import HtmlRenderer
from linemd.tokens import CodeFence


@pytest.fixture(autouse=True)
def _no_highlighter(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with no highlighter and no Rosettes auto-loading."""
    monkeypatch.setattr(highlighting, "_highlighter", None)
    monkeypatch.setattr(highlighting, "_tried_rosettes", True)


def _tag(code: str, language: str) -> str:
    return f'<pre class="{language}">{code}</pre>'


class _PythonOnly:
    def highlight(self, code: str, language: str) -> str:
        return f"<pre>py:{code}</pre>"

    def supports_language(self, language: str) -> bool:
        return language == "python"


class _Broken:
    def highlight(self, code: str, language: str) -> str:
        raise RuntimeError("lexer crashed")


class TestRegistry:
    def test_none_by_default(self) -> None:
        assert get_highlighter() is None
        assert not has_highlighter()
        assert highlight("x", "rust") is None

    def test_callable(self) -> None:
        set_highlighter(_tag)
        assert has_highlighter()
        assert highlight("x", "rust") == '<pre class="rust">x</pre>'

    def test_protocol_object(self) -> None:
        set_highlighter(_PythonOnly())
        assert highlight("x", "python") == "<pre>py:x</pre>"
        assert highlight("x", "rust") is None

    def test_object_without_supports_language(self) -> None:
        set_highlighter(_Broken())
        with pytest.raises(RuntimeError):
            highlight("x", "rust")

    def test_clear(self) -> None:
        set_highlighter(_tag)
        set_highlighter(None)
        assert get_highlighter() is None


class TestRendererHighlighting:
    def test_highlighted_fence(self) -> None:
        set_highlighter(_tag)
        renderer = HtmlRenderer(highlight=True)
        assert renderer.render([CodeFence("x", "rust,norun")]) == '<pre class="rust">x</pre>'

    def test_off_by_default(self) -> None:
        set_highlighter(_tag)
        assert HtmlRenderer().render([CodeFence("x", "rust")]) == "<pre><code>x</code></pre>"

    def test_fence_without_language(self) -> None:
        set_highlighter(_tag)
        renderer = HtmlRenderer(highlight=True)
        assert renderer.render([CodeFence("x")]) == "<pre><code>x</code></pre>"

    def test_no_highlighter_falls_back(self) -> None:
        renderer = HtmlRenderer(highlight=True)
        assert renderer.render([CodeFence("<x>", "rust")]) == "<pre><code>&lt;x&gt;</code></pre>"

    def test_unsupported_language_falls_back(self) -> None:
        set_highlighter(_PythonOnly())
        renderer = HtmlRenderer(highlight=True)
        assert renderer.render([CodeFence("x", "rust")]) == "<pre><code>x</code></pre>"

    def test_failing_highlighter_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        set_highlighter(_Broken())
        renderer = HtmlRenderer(highlight=True)
        with caplog.at_level("DEBUG", logger="linemd.renderers.html"):
            out = renderer.render([CodeFence("x", "rust")])
        assert out == "<pre><code>x</code></pre>"
        assert "highlighting failed" in caplog.text

    def test_markdown_option(self) -> None:
        set_highlighter(_tag)
        md = Markdown(highlight=True)
        assert md("```python\nprint(1)\n```") == '<pre class="python">print(1)</pre>'


class TestRosettes:
    def test_rosettes_loaded_when_installed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("rosettes")
        monkeypatch.setattr(highlighting, "_tried_rosettes", False)
        assert has_highlighter()
        assert "print" in (highlight("print(1)", "python") or "")
