"""Inline production scanners for the linemd lexer.

Each scanner is a mixin providing one inline production, tried in this
order: code (fence or inline), URL, emphasis, plain text.
"""

from __future__ import annotations

from linemd.lexer.scanners.code import CodeScannerMixin
from linemd.lexer.scanners.emphasis import EmphasisScannerMixin, StarPair
from linemd.lexer.scanners.text import TextScannerMixin
from linemd.lexer.scanners.url import UrlScannerMixin

__all__ = [
    "CodeScannerMixin",
    "EmphasisScannerMixin",
    "StarPair",
    "TextScannerMixin",
    "UrlScannerMixin",
]
