"""Header marker classifier mixin."""

from linemd.parsing.charsets import HEADER_CHAR
from linemd.tokens import Header, Token, clamp_depth


class HeadingClassifierMixin:
    """Mixin providing header marker classification."""

    def _char_at(self, pos: int) -> str:
        """Character at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _run_length(self, pos: int, char: str) -> int:
        """Length of the run of char starting at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_header(self, pos: int) -> tuple[Token, int] | None:
        """Try to classify pos as a header marker.

        A header marker is a run of ``#`` followed by whitespace. Only the
        ``#`` run is consumed; the heading text is scanned by the next call
        as ordinary inline tokens.

        Args:
            pos: Position of the candidate ``#``

        Returns:
            (Header, end) if pos starts a header marker, None otherwise.
        """
        run = self._run_length(pos, HEADER_CHAR)
        if run == 0:
            return None

        # "#" at end of input, or "#word", is plain text
        if not self._char_at(pos + run).isspace():
            return None

        return Header(clamp_depth(run)), pos + run
