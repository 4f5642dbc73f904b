"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from linemd.parsing.charsets import BULLET_MARKERS

    if char in BULLET_MARKERS:  # O(1) lookup
        ...
"""

NEWLINE = "\n"
CARRIAGE_RETURN = "\r"

# Header marker
HEADER_CHAR = "#"

# Unordered list bullets
BULLET_MARKERS: frozenset[str] = frozenset("-+*")

# ASCII digits only; str.isdigit() also accepts superscripts int() rejects
DIGITS: frozenset[str] = frozenset("0123456789")

# Ordered list ordinal terminator
ORDINAL_TERMINATOR = "."

BACKTICK = "`"
STAR = "*"
URL_OPEN = "<"
URL_CLOSE = ">"

# Backtick run lengths that open a construct
INLINE_CODE_RUN = 1
FENCE_RUN = 3
FENCE = BACKTICK * FENCE_RUN

# Emphasis strength above this degrades to literal text
MAX_STRENGTH = 3

# Characters at which plain text must check for a construct start
INLINE_SPECIAL: frozenset[str] = frozenset((NEWLINE, URL_OPEN, BACKTICK, STAR))


def is_inline_space(char: str) -> bool:
    """Whitespace other than newline (spaces, tabs, carriage returns)."""
    return char != NEWLINE and char.isspace()
