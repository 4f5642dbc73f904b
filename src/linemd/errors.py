"""Exception classes for linemd.

The tokenizer and renderer are total over tokenizer output: malformed
markdown degrades to literal text instead of raising. These exceptions
cover programming errors at the API boundary only.
"""

from __future__ import annotations


class LinemdError(Exception):
    """Base exception for all linemd errors."""

    pass


class RenderError(LinemdError):
    """Error during rendering.

    Raised when a renderer is handed an object that is not a token.
    """

    def __init__(self, obj: object, position: int | None = None) -> None:
        """Initialize render error.

        Args:
            obj: The offending object
            position: Index of the object in the token sequence (optional)
        """
        self.obj = obj
        self.position = position

        location = f" at index {position}" if position is not None else ""
        super().__init__(f"Cannot render {type(obj).__name__!s} object{location}: not a token")
