"""linemd renderers.

Renderers turn the flat token stream into an output format.

Available Renderers:
- HtmlRenderer: Renders tokens to HTML using the StringBuilder pattern

Thread Safety:
Renderers keep per-call state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from linemd.renderers.html import HtmlRenderer, render_to_buffer
from linemd.renderers.protocol import TokenRenderer

__all__ = ["HtmlRenderer", "TokenRenderer", "render_to_buffer"]
