"""linemd: a small, opinionated markdown tokenizer and HTML renderer.

Markdown text is scanned into a flat token list, then rendered to HTML in
one pass. Malformed markdown never raises: unclosed constructs render as
literal text.

Quick Start:
    >>> from linemd import parse, render_html
    >>> tokens = parse("# Hello **World**")
    >>> tokens[0]
    Header(depth=1)
    >>> tokens[2]
    Text(value='World', bold=True, italic=False, code=False)
    >>> render_html(tokens)
    '<h1>Hello  <b>World</b> </h1>'

    >>> # Or use the high-level Markdown class
    >>> from linemd import Markdown
    >>> md = Markdown()
    >>> md("- one\\n- two")
    '<ul>\\n<li>one </li>\\n<li>two </li></ul>\\n'

Installation:
    pip install linemd              # Core (zero deps)
    pip install linemd[syntax]      # + code fence highlighting via Rosettes
"""

from collections.abc import Callable, Iterable, Iterator

from linemd.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from linemd.errors import LinemdError, RenderError
from linemd.lexer import Lexer
from linemd.lexer import tokenize as _tokenize
from linemd.parser import Parser
from linemd.renderers.html import HtmlRenderer, render_to_buffer
from linemd.renderers.protocol import TokenRenderer
from linemd.serialization import from_dict, from_json, to_dict, to_json
from linemd.stringbuilder import StringBuilder
from linemd.tokens import CodeFence, Header, LineBreak, ListItem, Text, Token, Url

__version__ = "0.4.0"


def parse(source: str) -> list[Token]:
    """Tokenize markdown source.

    Args:
        source: Markdown source text

    Returns:
        Tokens in document order (possibly empty)

    Example:
        >>> parse("### Title")
        [Header(depth=3), Text(value='Title', bold=False, italic=False, code=False)]
    """
    return list(_tokenize(source))


def tokenize(source: str, pos: int = 0) -> Iterator[Token]:
    """Lazily tokenize markdown source, starting at character offset pos."""
    return _tokenize(source, pos)


def render_html(tokens: Iterable[Token], *, escape_html: bool = True) -> str:
    """Render a token stream to HTML.

    Args:
        tokens: Tokens in document order, as produced by parse()
        escape_html: Escape text, code and URLs (on by default)

    Returns:
        HTML string (possibly empty)

    Example:
        >>> render_html(parse("a\\n\\nb"))
        '<p>a </p>\\n\\n<p>b </p>'
    """
    return HtmlRenderer(escape_html=escape_html).render(tokens)


class Markdown:
    """High-level markdown processor combining lexer and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("*Some* uninspiring text.")
        '<p><i>Some</i> uninspiring text. </p>'

        >>> # Access the tokens
        >>> md.parse("# Heading")[0]
        Header(depth=1)

    Thread Safety:
        Uses ContextVar for configuration. Safe to use multiple Markdown
        instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        highlight: bool = False,
        escape_html: bool = True,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            highlight: Syntax-highlight code fences that name a language
            escape_html: Escape text, code and URLs in the output
            text_transformer: Optional callback applied to plain text values
        """
        # Build immutable config once, reused across calls
        self._config = ParseConfig(text_transformer=text_transformer)
        self._renderer = HtmlRenderer(escape_html=escape_html, highlight=highlight)

    def __call__(self, source: str) -> str:
        """Parse and render markdown in one call."""
        return self._renderer.render(self.parse(source))

    def parse(self, source: str) -> list[Token]:
        """Tokenize source with this processor's configuration."""
        with parse_config_context(self._config):
            return list(_tokenize(source))

    def parse_many(self, sources: Iterable[str]) -> list[list[Token]]:
        """Tokenize several sources, setting the config once for the batch.

        Example:
            >>> md = Markdown()
            >>> [len(t) for t in md.parse_many(["# a", "b", ""])]
            [2, 1, 0]
        """
        with parse_config_context(self._config):
            return [list(_tokenize(source)) for source in sources]

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to HTML."""
        return self._renderer.render(tokens)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "render_html",
    "tokenize",
    "render_to_buffer",
    # Tokens
    "Token",
    "Text",
    "Url",
    "Header",
    "ListItem",
    "CodeFence",
    "LineBreak",
    # Components
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "TokenRenderer",
    "StringBuilder",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "LinemdError",
    "RenderError",
    # High-level
    "Markdown",
]
