"""Block marker classifiers for the linemd lexer.

Each classifier is a mixin that recognises one kind of standalone marker
token (headers, list items). Classifiers are pure: they take a position,
peek ahead, and return the token with the position just past it, or None.
"""

from linemd.lexer.classifiers.heading import HeadingClassifierMixin
from linemd.lexer.classifiers.list import ListClassifierMixin

__all__ = [
    "HeadingClassifierMixin",
    "ListClassifierMixin",
]
