"""Inline URL scanner mixin."""

from __future__ import annotations

from linemd.parsing.charsets import URL_CLOSE, URL_OPEN
from linemd.tokens import Token, Url


class UrlScannerMixin:
    """Mixin providing ``<url>`` scanning.

    A failed lookahead from ``<`` at p proves that no ``<`` in
    [p, line end) can open a URL. That span is remembered in
    ``_url_dead_span`` so a line full of unmatched ``<`` is searched once.
    """

    _source: str
    _url_dead_span: tuple[int, int]

    def _char_at(self, pos: int) -> str:
        """Character at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _line_end(self, pos: int) -> int:
        """Position of the next newline or EOF. Implemented by Lexer."""
        raise NotImplementedError

    def _try_scan_url(self, pos: int) -> tuple[Token, int] | None:
        """Scan ``<`` up to the next ``>`` on the same line as a bare link."""
        if self._char_at(pos) != URL_OPEN:
            return None

        dead_start, dead_end = self._url_dead_span
        if dead_start <= pos < dead_end:
            return None

        start = pos + 1
        line_end = self._line_end(start)
        close = self._source.find(URL_CLOSE, start, line_end)
        if close == -1:
            # Replaced whole, never mutated in place
            self._url_dead_span = (pos, line_end)
            return None

        return Url(url=self._source[start:close]), close + 1
