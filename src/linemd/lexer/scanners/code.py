"""Code span and code fence scanner mixin."""

from __future__ import annotations

from linemd.parsing.charsets import (
    BACKTICK,
    FENCE,
    FENCE_RUN,
    INLINE_CODE_RUN,
    NEWLINE,
)
from linemd.tokens import CodeFence, Text, Token


def trim_blank_lines(body: str) -> str:
    """Drop leading and trailing whitespace-only lines from a fence body.

    Indentation of the first non-blank line is preserved.

    Example:
        >>> trim_blank_lines("\\n\\n  fn f() {}\\n\\n")
        '  fn f() {}'
    """
    lines = body.split(NEWLINE)
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return NEWLINE.join(lines[start:end])


class CodeScannerMixin:
    """Mixin providing code fence and inline code scanning.

    A run of exactly one backtick opens inline code, exactly three open a
    fence. Any other run length, or an opener with no terminator, is not a
    code construct and is left to the plain text scanner.
    """

    _source: str

    def _run_length(self, pos: int, char: str) -> int:
        """Length of the run of char starting at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _line_end(self, pos: int) -> int:
        """Position of the next newline or EOF. Implemented by Lexer."""
        raise NotImplementedError

    def _try_scan_code(self, pos: int) -> tuple[Token, int] | None:
        """Try to scan inline code or a code fence at pos."""
        run = self._run_length(pos, BACKTICK)
        if run == FENCE_RUN:
            return self._try_scan_fence(pos)
        if run == INLINE_CODE_RUN:
            return self._try_scan_inline_code(pos)
        return None

    def _try_scan_fence(self, pos: int) -> tuple[Token, int] | None:
        """Scan a ``` fence whose terminator may be on any later line.

        The content up to the first newline is the info string (attrs); the
        rest, minus surrounding blank lines, is the code. Content is never
        re-tokenized.
        """
        content_start = pos + FENCE_RUN
        close = self._source.find(FENCE, content_start)
        if close == -1:
            return None

        content = self._source[content_start:close]
        newline = content.find(NEWLINE)
        if newline == -1:
            # ```code``` on one line has no info string
            attrs, body = "", content
        else:
            attrs, body = content[:newline].strip(), content[newline + 1 :]

        return CodeFence(code=trim_blank_lines(body), attrs=attrs), close + FENCE_RUN

    def _try_scan_inline_code(self, pos: int) -> tuple[Token, int] | None:
        """Scan `code` terminated by the next backtick on the same line."""
        start = pos + INLINE_CODE_RUN
        close = self._source.find(BACKTICK, start, self._line_end(start))
        if close == -1:
            return None
        return Text.inline_code(self._source[start:close]), close + 1
