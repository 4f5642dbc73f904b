"""Plain text scanner mixin."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from linemd.parsing.charsets import (
    BACKTICK,
    CARRIAGE_RETURN,
    INLINE_SPECIAL,
    NEWLINE,
    STAR,
    URL_OPEN,
)
from linemd.tokens import Text, Token
from linemd.utils.logger import get_logger

if TYPE_CHECKING:
    from linemd.lexer.scanners.emphasis import StarPair

logger = get_logger(__name__)


class TextScannerMixin:
    """Mixin providing the fallback plain text production.

    Plain text runs to the end of the line, stopping early only where a
    code span, fence, URL or star pair would actually open. Special
    characters that open nothing are kept as literal text, so this scanner
    always makes progress unless it starts on a newline.

    """

    _source: str
    _source_len: int
    _text_transformer: Callable[[str], str] | None

    def _run_length(self, pos: int, char: str) -> int:
        """Length of the run of char starting at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _try_scan_code(self, pos: int) -> tuple[Token, int] | None:
        raise NotImplementedError

    def _try_scan_url(self, pos: int) -> tuple[Token, int] | None:
        raise NotImplementedError

    def _find_star_pair(self, pos: int) -> StarPair | None:
        raise NotImplementedError

    def scan(self, pos: int) -> tuple[Token, int] | None:
        raise NotImplementedError

    def _opens_construct(self, pos: int) -> bool:
        """Check whether the special character at pos opens an inline construct."""
        char = self._source[pos]
        if char == STAR:
            return self._find_star_pair(pos) is not None
        if char == BACKTICK:
            return self._try_scan_code(pos) is not None
        if char == URL_OPEN:
            return self._try_scan_url(pos) is not None
        return False

    def _literal_run_length(self, pos: int) -> int:
        """Characters to keep literally for a special character that opens nothing.

        Star and backtick runs are kept whole, so a later position inside
        the same run is never re-read as a shorter delimiter.
        """
        char = self._source[pos]
        if char in (STAR, BACKTICK):
            return self._run_length(pos, char)
        return 1

    def _scan_plain_text(self, pos: int) -> tuple[Token, int] | None:
        """Scan the longest plain text run starting at pos.

        A carriage return right before the newline is dropped. A run the
        text transformer maps to "" emits nothing: scanning continues after
        it and the next token is returned instead.

        Returns:
            (Text, end), the scan after a transformed-away run, or None if
            no text could be consumed.
        """
        source = self._source
        source_len = self._source_len
        end = pos

        while end < source_len:
            char = source[end]
            if char == NEWLINE:
                break
            if char in INLINE_SPECIAL:
                if end > pos and self._opens_construct(end):
                    break
                run = self._literal_run_length(end)
                logger.debug("literal %r x%d at offset %d", char, run, end)
                end += run
                continue
            end += 1

        if end == pos:
            return None

        value = source[pos:end]
        if end < source_len and source[end] == NEWLINE and value.endswith(CARRIAGE_RETURN):
            # CRLF line ending
            value = value[:-1]
        if self._text_transformer is not None:
            value = self._text_transformer(value)
        if not value:
            # Transformed away: emit nothing and carry on after the run
            return self.scan(end)
        return Text.plain(value), end
