"""TokenRenderer protocol: stable interface for token stream renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol. The built-in ``HtmlRenderer`` is the reference implementation;
alternate outputs (an SVG writer, a terminal pretty-printer) read the same
flat token stream through the same contract.

Example:
    from linemd.renderers.protocol import TokenRenderer

    def render_page(renderer: TokenRenderer, source: str) -> str:
        return renderer.render(parse(source))

"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from linemd.tokens import Token


@runtime_checkable
class TokenRenderer(Protocol):
    """Protocol for token stream renderers."""

    def render(self, tokens: Iterable[Token]) -> str:
        """Render a token stream to a string.

        Args:
            tokens: Tokens in document order, as produced by parse().

        Returns:
            Rendered string output.

        """
        ...
