"""End-to-end rendering of a document mixing every construct."""

from linemd import Markdown, parse, render_html
from linemd.tokens import CodeFence, Header, LineBreak, ListItem, Text, Url

DOCUMENT = """\
# linemd

Some *italic* and **bold** text.
Second line with `code`.

- first
- second

1. one
2. two

```rust
fn main() {}
```

See <https://example.com>"""

EXPECTED_HTML = (
    "<h1>linemd </h1>\n\n"
    "<p>Some  <i>italic</i> and  <b>bold</b> text. \n"
    "Second line with  <code>code</code> . </p>\n\n"
    "<ul>\n<li>first </li>\n<li>second </li>\n</ul>\n\n"
    '<ol>\n<li value="1">one </li>\n<li value="2">two </li>\n</ol>\n\n'
    "<pre><code>fn main() {}</code></pre>\n\n"
    '<p>See  <a href="https://example.com">https://example.com</a></p>'
)


def test_document_tokens() -> None:
    tokens = parse(DOCUMENT)
    assert tokens[:3] == [Header(1), Text.plain("linemd"), LineBreak()]
    assert Text("italic", italic=True) in tokens
    assert Text("bold", bold=True) in tokens
    assert Text.inline_code("code") in tokens
    assert tokens.count(ListItem(None)) == 2
    assert [t for t in tokens if isinstance(t, ListItem) and t.ordered] == [
        ListItem(1),
        ListItem(2),
    ]
    assert CodeFence(code="fn main() {}", attrs="rust") in tokens
    assert tokens[-2:] == [Text.plain("See "), Url(url="https://example.com")]


def test_document_html() -> None:
    assert render_html(parse(DOCUMENT)) == EXPECTED_HTML


def test_markdown_matches_functions() -> None:
    assert Markdown()(DOCUMENT) == EXPECTED_HTML


def test_line_break_count() -> None:
    """Newlines inside the fence belong to the CodeFence, not to LineBreaks."""
    tokens = parse(DOCUMENT)
    fence_newlines = 2
    assert tokens.count(LineBreak()) == DOCUMENT.count("\n") - fence_newlines
