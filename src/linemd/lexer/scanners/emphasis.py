"""Star-pair emphasis scanner for the linemd lexer.

Pairs the star run at the current position with the next star run on the
same line. The shorter of the two runs decides the strength:

    1 star   italic
    2 stars  bold
    3 stars  bold + italic
    4+       not emphasis (literal text)

Exactly ``strength`` stars are taken from each run as the delimiter. Any
surplus stars on either side stay in the text value as literal characters:

    ***ada**   ->  bold "*ada"
    **ada*     ->  italic "*ada"
    **ada***   ->  bold "ada*"

Thread Safety:
All methods are read-only lookahead over the source string.

"""

from __future__ import annotations

from typing import NamedTuple

from linemd.parsing.charsets import MAX_STRENGTH, STAR
from linemd.tokens import Text, Token


class StarPair(NamedTuple):
    """A matched opening/closing star run.

    Attributes:
        strength: Stars consumed as delimiter on each side (1-3)
        value_start: Start of the text value (after the delimiter)
        value_end: End of the text value (before the closing delimiter)
        end: Position just past the closing run

    """

    strength: int
    value_start: int
    value_end: int
    end: int


class EmphasisScannerMixin:
    """Mixin providing star-pair emphasis scanning.

    Required Host Attributes:
        - _source: str

    Required Host Methods:
        - _run_length
        - _line_end

    """

    _source: str

    def _run_length(self, pos: int, char: str) -> int:
        """Length of the run of char starting at pos. Implemented by Lexer."""
        raise NotImplementedError

    def _line_end(self, pos: int) -> int:
        """Position of the next newline or EOF. Implemented by Lexer."""
        raise NotImplementedError

    def _find_star_pair(self, pos: int) -> StarPair | None:
        """Look ahead for a star pair opening at pos.

        Pure lookahead: never moves the cursor. Also used by the plain text
        scanner to decide where a text run must stop.

        Returns:
            StarPair if pos opens emphasis, None otherwise.
        """
        open_len = self._run_length(pos, STAR)
        if open_len == 0:
            return None

        # Runs are maximal, so the first star after the opening run starts
        # the closing run. Emphasis never crosses a newline.
        inner_start = pos + open_len
        close_start = self._source.find(STAR, inner_start, self._line_end(inner_start))
        if close_start == -1:
            return None

        close_len = self._run_length(close_start, STAR)
        strength = min(open_len, close_len)
        if strength > MAX_STRENGTH:
            return None

        close_end = close_start + close_len
        return StarPair(
            strength=strength,
            value_start=pos + strength,
            value_end=close_end - strength,
            end=close_end,
        )

    def _try_scan_emphasis(self, pos: int) -> tuple[Token, int] | None:
        """Scan a bold and/or italic text run at pos."""
        pair = self._find_star_pair(pos)
        if pair is None:
            return None

        token = Text(
            self._source[pair.value_start : pair.value_end],
            bold=pair.strength != 1,
            italic=pair.strength != 2,
        )
        return token, pair.end
