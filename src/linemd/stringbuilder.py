"""StringBuilder for O(n) output accumulation.

Renderers append fragments to a list and join once at the end instead of
growing a string with repeated concatenation.

Thread Safety:
A StringBuilder is owned by the render call that creates it (or by the
caller that passes it to render_to_buffer). No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> _ = sb.append("<h1>").append("Hello ").append("</h1>")
        >>> sb.build()
        '<h1>Hello </h1>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment; empty strings are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Drop all accumulated fragments."""
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
