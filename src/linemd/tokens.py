"""Token definitions for the linemd tokenizer.

The lexer produces a flat, ordered list of tokens that renderers consume
left to right. There is no nesting: a Header or ListItem is a bare marker
whose text is simply the tokens that follow it, up to the next LineBreak.

Token Union:
Token
├── Text        inline literal or styled run
├── Url         <url> link (or image, for renderer-facing callers)
├── Header      heading marker, depth 1-6
├── ListItem    list item marker, ordered when place is set
├── CodeFence   whole ``` block, content not re-tokenized
└── LineBreak   one consumed newline

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

MIN_HEADER_DEPTH = 1
MAX_HEADER_DEPTH = 6


def clamp_depth(depth: int) -> int:
    """Clamp a heading depth into the 1-6 range."""
    return max(MIN_HEADER_DEPTH, min(depth, MAX_HEADER_DEPTH))


@dataclass(frozen=True, slots=True)
class Text:
    """Inline text run.

    Code spans are never emphasized: a Text with ``code`` set cannot also
    be bold or italic.

    Attributes:
        value: Literal text, sliced from the source
        bold: Rendered strong
        italic: Rendered emphasized
        code: Inline code span

    Examples:
        >>> Text.plain("hello")
        Text(value='hello', bold=False, italic=False, code=False)
        >>> Text("ada", bold=True)
        Text(value='ada', bold=True, italic=False, code=False)

    """

    value: str
    bold: bool = False
    italic: bool = False
    code: bool = False

    def __post_init__(self) -> None:
        if self.code and (self.bold or self.italic):
            msg = "code text cannot be bold or italic"
            raise ValueError(msg)

    @classmethod
    def plain(cls, value: str) -> Text:
        """Create unstyled text."""
        return cls(value)

    @classmethod
    def inline_code(cls, value: str) -> Text:
        """Create an inline code span."""
        return cls(value, code=True)

    @property
    def styled(self) -> bool:
        """True if any of bold, italic or code is set."""
        return self.bold or self.italic or self.code


@dataclass(frozen=True, slots=True)
class Url:
    """Link or image.

    The tokenizer only produces bare links (``<url>``). ``name`` and
    ``is_image`` exist for callers that build token streams themselves.

    Attributes:
        url: Raw URL text
        name: Display text; None displays the raw URL
        is_image: Render as an image instead of a link

    """

    url: str
    name: Text | None = None
    is_image: bool = False

    @property
    def label(self) -> str:
        """Display text: the name's value, or the URL when unnamed."""
        return self.name.value if self.name is not None else self.url


@dataclass(frozen=True, slots=True)
class Header:
    """Heading marker.

    The heading text is the run of tokens following this marker up to the
    next LineBreak (or end of stream). Depth is clamped into 1-6.
    """

    depth: int

    def __post_init__(self) -> None:
        # Idempotent write on a frozen dataclass
        object.__setattr__(self, "depth", clamp_depth(self.depth))


@dataclass(frozen=True, slots=True)
class ListItem:
    """List item marker.

    ``place`` is None for unordered (``-``, ``+``, ``*``) items and the
    explicit ordinal for ordered (``3.``) items. Item text follows in the
    stream exactly as for Header.
    """

    place: int | None = None

    @property
    def ordered(self) -> bool:
        return self.place is not None


@dataclass(frozen=True, slots=True)
class CodeFence:
    """Fenced code block.

    Attributes:
        code: Block body with surrounding blank lines trimmed
        attrs: Raw info string from the opening fence line (e.g. "rust,norun")

    """

    code: str
    attrs: str = ""

    @property
    def language(self) -> str:
        """First word of the info string, or "" if there is none."""
        head = self.attrs.replace(",", " ").split()
        return head[0] if head else ""


@dataclass(frozen=True, slots=True)
class LineBreak:
    """A single consumed newline."""


Token = Text | Url | Header | ListItem | CodeFence | LineBreak

TOKEN_TYPES: tuple[type, ...] = (Text, Url, Header, ListItem, CodeFence, LineBreak)

# Tokens that open a paragraph in HTML output
TEXT_BEARING: tuple[type, ...] = (Text, Url)


__all__ = [
    "MAX_HEADER_DEPTH",
    "MIN_HEADER_DEPTH",
    "TEXT_BEARING",
    "TOKEN_TYPES",
    "CodeFence",
    "Header",
    "LineBreak",
    "ListItem",
    "Text",
    "Token",
    "Url",
    "clamp_depth",
]
