"""Buffered parser front end.

A Parser accumulates source text through feed() and tokenizes the whole
buffer on parse(). Each parse() call re-reads the complete snapshot: there
is no incremental state carried between calls.

Thread Safety:
- Parser instances are not thread-safe; create one per document.
- Configuration is read from ContextVar (thread-local) at parse() time.
- The resulting tokens are immutable and safe to share.

"""

from __future__ import annotations

from linemd.config import get_parse_config
from linemd.lexer import Lexer
from linemd.tokens import Token


class Parser:
    """Accumulate markdown text and tokenize it.

    Usage:
        >>> parser = Parser()
        >>> parser.feed("# Hello\\n")
        >>> parser.feed("*World*")
        >>> parser.parse()[-1]
        Text(value='World', bold=False, italic=True, code=False)

    """

    __slots__ = ("_chunks",)

    def __init__(self, source: str = "") -> None:
        self._chunks: list[str] = [source] if source else []

    def feed(self, text: str) -> None:
        """Append text to the buffer."""
        if text:
            self._chunks.append(text)

    @property
    def source(self) -> str:
        """The text fed so far."""
        if len(self._chunks) > 1:
            # Collapse so repeated reads stay O(n)
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def parse(self) -> list[Token]:
        """Tokenize everything fed so far.

        Returns:
            Tokens in document order (possibly empty). Never raises for
            malformed markdown.
        """
        config = get_parse_config()
        lexer = Lexer(self.source, text_transformer=config.text_transformer)
        return list(lexer.tokenize())

    def clear(self) -> None:
        """Discard the buffered text."""
        self._chunks.clear()
