"""Character-cursor lexer for the linemd markdown dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (mixin composition + dispatch)
├── classifiers/         # Standalone marker recognisers
│   ├── heading.py       # # Header
│   └── list.py          # - item, 1. item
└── scanners/            # Inline productions
    ├── code.py          # `code` and ``` fences
    ├── url.py           # <url>
    ├── emphasis.py      # *star* pairs
    └── text.py          # plain text fallback

Usage:
    >>> from linemd.lexer import tokenize
    >>> tokens = list(tokenize("- **bold** item"))
    >>> tokens[:2]
    [ListItem(place=None), Text(value='bold', bold=True, italic=False, code=False)]

"""

from __future__ import annotations

from collections.abc import Iterator

from linemd.config import get_parse_config
from linemd.lexer.core import Lexer
from linemd.tokens import Token


def tokenize(source: str, pos: int = 0) -> Iterator[Token]:
    """Lazily tokenize source starting at pos, using the active ParseConfig."""
    config = get_parse_config()
    return Lexer(source, text_transformer=config.text_transformer).tokenize(pos)


__all__ = ["Lexer", "tokenize"]
