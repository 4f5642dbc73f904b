"""Character-cursor lexer producing a flat token stream.

The cursor is a plain integer threaded through every scanning method:
each method takes a position, peeks ahead without committing, and returns
the accepted token together with the position just past it. The Lexer
itself only holds the (read-only) source, so any offset can be scanned
directly in tests.

Dispatch order at each position (first match wins):
1. end of input: stop
2. skip spaces/tabs (emits nothing)
3. newline: LineBreak
4. header marker: Header
5. list marker: ListItem
6. inline: code/fence, URL, emphasis, plain text

The lexer never fails. Constructs that do not close degrade to literal
text.

Thread Safety:
The source is read-only. The only field written after construction is
the URL lookahead memo, replaced whole with a span that is true of the
source whichever thread computed it, so a single instance may be scanned
from several threads.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from linemd.lexer.classifiers import HeadingClassifierMixin, ListClassifierMixin
from linemd.lexer.scanners import (
    CodeScannerMixin,
    EmphasisScannerMixin,
    TextScannerMixin,
    UrlScannerMixin,
)
from linemd.parsing.charsets import NEWLINE, is_inline_space
from linemd.tokens import LineBreak, Token


class Lexer(
    # Classifiers (standalone markers)
    HeadingClassifierMixin,
    ListClassifierMixin,
    # Scanners (inline productions, in priority order)
    CodeScannerMixin,
    UrlScannerMixin,
    EmphasisScannerMixin,
    TextScannerMixin,
):
    """Character-cursor lexer for the linemd markdown dialect.

    Usage:
        >>> lexer = Lexer("# Hello\\n*World*")
        >>> list(lexer.tokenize())[:3]
        [Header(depth=1), Text(value='Hello', bold=False, italic=False, code=False), LineBreak()]

        >>> # Scan a single token at an arbitrary offset
        >>> lexer.scan(8)
        (Text(value='World', bold=False, italic=True, code=False), 15)

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_text_transformer",
        "_url_dead_span",  # Span where no "<" can open a URL
    )

    def __init__(
        self,
        source: str,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            text_transformer: Optional callback applied to plain text values
        """
        self._source = source
        self._source_len = len(source)
        self._text_transformer = text_transformer
        self._url_dead_span = (0, 0)

    def tokenize(self, pos: int = 0) -> Iterator[Token]:
        """Tokenize the source from pos to the end.

        Yields:
            Token objects in document order

        Complexity: O(n) for inputs whose delimiters close; unclosed fences
        cost an extra scan to end of input each.
        """
        while (scanned := self.scan(pos)) is not None:
            token, pos = scanned
            yield token

    def scan(self, pos: int) -> tuple[Token, int] | None:
        """Scan one token starting at pos.

        Leading spaces and tabs are skipped first.

        Returns:
            (token, end) where end is the position just past the token, or
            None at end of input.
        """
        pos = self._skip_inline_space(pos)
        if pos >= self._source_len:
            return None

        if self._source[pos] == NEWLINE:
            return LineBreak(), pos + 1

        return (
            self._try_classify_header(pos)
            or self._try_classify_list_marker(pos)
            or self._scan_inline(pos)
        )

    def _scan_inline(self, pos: int) -> tuple[Token, int] | None:
        """Scan one inline production at pos."""
        return (
            self._try_scan_code(pos)
            or self._try_scan_url(pos)
            or self._try_scan_emphasis(pos)
            or self._scan_plain_text(pos)
        )

    # =========================================================================
    # Character navigation helpers (read-only)
    # =========================================================================

    def _char_at(self, pos: int) -> str:
        """Character at pos, or empty string past the end of input."""
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _run_length(self, pos: int, char: str) -> int:
        """Length of the contiguous run of char starting at pos."""
        end = pos
        while end < self._source_len and self._source[end] == char:
            end += 1
        return end - pos

    def _line_end(self, pos: int) -> int:
        """Position of the next newline at or after pos, or end of input.

        Uses str.find for O(n) with low constant factor (C implementation).
        """
        idx = self._source.find(NEWLINE, pos)
        return idx if idx != -1 else self._source_len

    def _skip_inline_space(self, pos: int) -> int:
        """Position of the first character at or after pos that is not a
        space, tab or other non-newline whitespace."""
        while pos < self._source_len and is_inline_space(self._source[pos]):
            pos += 1
        return pos
