"""HTML renderer for linemd token streams.

Renders the flat token list in one left-to-right pass. Block structure the
stream does not carry explicitly is recovered by a small state machine:

- Lists: runs of ListItem tokens of one kind are wrapped in ``<ul>`` or
  ``<ol>``. A single LineBreak between items keeps the list open; two in a
  row, or any non-item content, close it.
- Paragraphs: runs of Text/Url tokens are wrapped in ``<p>``. A LineBreak
  followed by a blank line, a block marker or the end of the stream closes
  the paragraph before the LineBreak is emitted.
- Header and ListItem markers render the tokens after them, up to the
  next LineBreak, as their inline content.

Thread Safety:
All per-render state lives in a RenderState created fresh for each
render() call. A single HtmlRenderer may be shared between threads.

"""

import html
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from linemd.errors import RenderError
from linemd.stringbuilder import StringBuilder
from linemd.tokens import (
    TEXT_BEARING,
    CodeFence,
    Header,
    LineBreak,
    ListItem,
    Text,
    Token,
    Url,
)

logger = logging.getLogger(__name__)

# Tokens that never sit inside a paragraph
_BLOCK_LEVEL: tuple[type, ...] = (Header, ListItem, CodeFence)


def html_escape(s: str) -> str:
    """Escape <, >, & and " (single quotes are left alone)."""
    return html.escape(s, quote=False).replace('"', "&quot;")


@dataclass(slots=True)
class RenderState:
    """Per-render mutable state.

    Attributes:
        in_unordered_list: A ``<ul>`` is open
        in_ordered_list: An ``<ol>`` is open
        in_paragraph: A ``<p>`` is open
        was_line_break: The previous top-level token was a LineBreak

    """

    in_unordered_list: bool = False
    in_ordered_list: bool = False
    in_paragraph: bool = False
    was_line_break: bool = False


class HtmlRenderer:
    """Render a token stream to HTML.

    Usage:
        >>> from linemd import parse
        >>> HtmlRenderer().render(parse("- a\\n- b"))
        '<ul>\\n<li>a </li>\\n<li>b </li></ul>\\n'

    Thread Safety:
        Each render() call creates an independent RenderState.
    """

    __slots__ = ("_escape", "_highlight")

    def __init__(self, *, escape_html: bool = True, highlight: bool = False) -> None:
        """Initialize renderer.

        Args:
            escape_html: Escape text, code and URLs for safe embedding
            highlight: Syntax-highlight code fences that name a language
        """
        self._escape = escape_html
        self._highlight = highlight

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to an HTML string."""
        sb = StringBuilder()
        self.render_to(tokens, sb)
        return sb.build()

    def render_to(self, tokens: Iterable[Token], sb: StringBuilder) -> None:
        """Render tokens, appending HTML to a caller-owned StringBuilder.

        Raises:
            RenderError: If the sequence contains a non-token object.
        """
        if not isinstance(tokens, Sequence):
            tokens = list(tokens)

        state = RenderState()
        count = len(tokens)
        at = 0
        while at < count:
            token = tokens[at]
            is_line_break = isinstance(token, LineBreak)

            if state.in_paragraph and self._ends_paragraph(tokens, at):
                sb.append("</p>")
                state.in_paragraph = False

            self._update_lists(token, is_line_break, sb, state)

            if not state.in_paragraph and isinstance(token, TEXT_BEARING):
                sb.append("<p>")
                state.in_paragraph = True

            at = self._render_token(tokens, at, sb)
            state.was_line_break = is_line_break

        # End of stream closes whatever is still open
        if state.in_paragraph:
            sb.append("</p>")
        if state.in_unordered_list:
            sb.append("</ul>\n")
        if state.in_ordered_list:
            sb.append("</ol>\n")

    # =========================================================================
    # Grouping state machine
    # =========================================================================

    def _ends_paragraph(self, tokens: Sequence[Token], at: int) -> bool:
        """Check whether the open paragraph must close before tokens[at]."""
        token = tokens[at]
        if isinstance(token, _BLOCK_LEVEL):
            return True
        if not isinstance(token, LineBreak):
            return False
        # A line break continues the paragraph only into more inline text
        following = tokens[at + 1] if at + 1 < len(tokens) else None
        return not isinstance(following, TEXT_BEARING)

    def _update_lists(
        self,
        token: Token,
        is_line_break: bool,
        sb: StringBuilder,
        state: RenderState,
    ) -> None:
        """Open or close list containers before the token is emitted.

        A list survives one LineBreak between items. A second consecutive
        LineBreak, or any token that is not an item of the same kind,
        closes it.
        """
        is_item = isinstance(token, ListItem)
        is_unordered = is_item and token.place is None
        is_ordered = is_item and token.place is not None
        may_close = state.was_line_break or not is_line_break

        if not state.in_unordered_list and is_unordered:
            sb.append("<ul>\n")
            state.in_unordered_list = True
        elif state.in_unordered_list and not is_unordered and may_close:
            sb.append("</ul>\n")
            state.in_unordered_list = False

        if not state.in_ordered_list and is_ordered:
            sb.append("<ol>\n")
            state.in_ordered_list = True
        elif state.in_ordered_list and not is_ordered and may_close:
            sb.append("</ol>\n")
            state.in_ordered_list = False

    # =========================================================================
    # Token emission
    # =========================================================================

    def _render_token(self, tokens: Sequence[Token], at: int, sb: StringBuilder) -> int:
        """Emit tokens[at] and return the index of the next unconsumed token."""
        token = tokens[at]
        match token:
            case Text():
                sb.append(self._text_markup(token)).append(" ")
            case Url():
                self._render_url(token, sb)
            case Header(depth=depth):
                sb.append(f"<h{depth}>")
                at = self._render_inline_run(tokens, at + 1, sb)
                sb.append(f"</h{depth}>")
                return at
            case ListItem(place=None):
                sb.append("<li>")
                at = self._render_inline_run(tokens, at + 1, sb)
                sb.append("</li>")
                return at
            case ListItem(place=place):
                sb.append(f'<li value="{place}">')
                at = self._render_inline_run(tokens, at + 1, sb)
                sb.append("</li>")
                return at
            case CodeFence():
                self._render_code_fence(token, sb)
            case LineBreak():
                sb.append("\n")
            case _:
                raise RenderError(token, at)
        return at + 1

    def _render_inline_run(self, tokens: Sequence[Token], at: int, sb: StringBuilder) -> int:
        """Emit tokens up to (not including) the next LineBreak."""
        count = len(tokens)
        while at < count and not isinstance(tokens[at], LineBreak):
            at = self._render_token(tokens, at, sb)
        return at

    def _text_markup(self, text: Text) -> str:
        """Markup for a Text value: code outermost, then bold, then italic."""
        markup = self._escaped(text.value)
        if text.italic:
            markup = f"<i>{markup}</i>"
        if text.bold:
            markup = f"<b>{markup}</b>"
        if text.code:
            markup = f"<code>{markup}</code>"
        return markup

    def _render_url(self, url: Url, sb: StringBuilder) -> None:
        """Emit a link, or an image when is_image is set."""
        href = self._escaped(url.url)
        if url.is_image:
            sb.append(f'<img src="{href}" alt="{self._escaped(url.label)}">')
            return

        body = self._text_markup(url.name) if url.name is not None else href
        sb.append(f'<a href="{href}">').append(body).append("</a>")

    def _render_code_fence(self, fence: CodeFence, sb: StringBuilder) -> None:
        """Emit a fenced code block, highlighted when enabled and possible."""
        lang = fence.language
        if self._highlight and lang:
            try:
                from linemd.highlighting import highlight

                highlighted = highlight(fence.code, lang)
            except Exception:
                # Log unexpected errors but continue with fallback
                logger.debug("Syntax highlighting failed for language %r", lang, exc_info=True)
            else:
                if highlighted is not None:
                    sb.append(highlighted)
                    return

        sb.append("<pre><code>").append(self._escaped(fence.code)).append("</code></pre>")

    def _escaped(self, s: str) -> str:
        return html_escape(s) if self._escape else s


def render_to_buffer(
    tokens: Iterable[Token],
    sb: StringBuilder,
    *,
    escape_html: bool = True,
) -> None:
    """Render tokens as HTML into an existing StringBuilder.

    Example:
        >>> from linemd import parse
        >>> sb = StringBuilder()
        >>> render_to_buffer(parse("Some uninspiring text."), sb)
        >>> sb.build()
        '<p>Some uninspiring text. </p>'
    """
    HtmlRenderer(escape_html=escape_html).render_to(tokens, sb)


__all__ = ["HtmlRenderer", "RenderState", "html_escape", "render_to_buffer"]
