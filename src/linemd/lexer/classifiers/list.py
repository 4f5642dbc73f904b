"""List marker classifier mixin."""

from __future__ import annotations

from linemd.parsing.charsets import BULLET_MARKERS, DIGITS, ORDINAL_TERMINATOR
from linemd.tokens import ListItem, Token


class ListClassifierMixin:
    """Mixin providing list marker classification."""

    _source: str

    def _char_at(self, pos: int) -> str:
        """Character at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_inline_space(self, pos: int) -> int:
        """Skip non-newline whitespace. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list_marker(self, pos: int) -> tuple[Token, int] | None:
        """Try to classify pos as a list item marker.

        Unordered: ``-``, ``+`` or ``*`` followed by whitespace.
        Ordered: ASCII digits, ``.``, then whitespace.

        The marker and the whitespace after it are consumed; a bullet
        directly followed by a newline is an empty item.

        Returns:
            (ListItem, end) if pos starts a list marker, None otherwise.
        """
        char = self._char_at(pos)

        if char in BULLET_MARKERS:
            if not self._char_at(pos + 1).isspace():
                return None
            return ListItem(None), self._skip_inline_space(pos + 1)

        if char not in DIGITS:
            return None

        end = pos
        while self._char_at(end) in DIGITS:
            end += 1

        # "3.x" and "3 x" are text
        if self._char_at(end) != ORDINAL_TERMINATOR:
            return None
        if not self._char_at(end + 1).isspace():
            return None

        place = int(self._source[pos:end])
        return ListItem(place), self._skip_inline_space(end + 1)
