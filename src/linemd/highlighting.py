"""Optional syntax highlighting for code fences.

When linemd[syntax] is installed, Rosettes is used automatically for fences
whose info string names a language (``rust`` in ```` ```rust,norun ````).
Highlighting is off unless the renderer is created with ``highlight=True``.

Usage:
    # Automatic with linemd[syntax]
    from linemd import Markdown
    md = Markdown(highlight=True)

    # Manual injection
    from linemd.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from linemd.utils.logger import get_logger

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Thread Safety:
        Implementations must be thread-safe. highlight() may be called
        concurrently from multiple render threads.
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code and return complete HTML markup.

        Contract:
            - MUST escape HTML entities in code
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if the highlighter supports the given language."""
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]

_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_rosettes: bool = False


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter implementation, or a function taking
            (code, language) and returning HTML. None clears it.
    """
    global _highlighter
    _highlighter = highlighter


def _try_import_rosettes() -> bool:
    """Try to import and configure the Rosettes highlighter."""
    global _highlighter, _tried_rosettes

    if _tried_rosettes:
        return _highlighter is not None

    _tried_rosettes = True

    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("rosettes not installed, code fences render unhighlighted")
        return False

    class RosettesHighlighter:
        """Rosettes-based highlighter implementing the Highlighter protocol."""

        def highlight(self, code: str, language: str) -> str:
            result: str = rosettes.highlight(code, language=language)
            return result

        def supports_language(self, language: str) -> bool:
            try:
                result: bool = rosettes.supports_language(language)
                return result
            except Exception:
                return False

    _highlighter = RosettesHighlighter()
    return True


def get_highlighter() -> Highlighter | SimpleHighlighter | None:
    """Get the configured highlighter, loading Rosettes on first use."""
    if _highlighter is None:
        _try_import_rosettes()
    return _highlighter


def has_highlighter() -> bool:
    """Check if a syntax highlighter is available."""
    return get_highlighter() is not None


def highlight(code: str, language: str) -> str | None:
    """Highlight code with the configured highlighter.

    Returns:
        HTML markup, or None when no highlighter is available or it does not
        support the language (the caller renders a plain block instead).
    """
    highlighter = get_highlighter()
    if highlighter is None:
        return None

    if hasattr(highlighter, "highlight") and callable(highlighter.highlight):
        supports = getattr(highlighter, "supports_language", None)
        if supports is not None and not supports(language):
            return None
        return highlighter.highlight(code, language)

    # Simple callable - just pass code and language
    return highlighter(code, language)


__all__ = [
    "Highlighter",
    "SimpleHighlighter",
    "get_highlighter",
    "has_highlighter",
    "highlight",
    "set_highlighter",
]
