"""Token stream serialization: JSON round-trip for linemd tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Dumping the token stream while debugging the lexer
- Handing a parsed stream to a renderer in another process

All output is deterministic (sorted keys).

Example:
    from linemd import parse
    from linemd.serialization import to_json, from_json

    tokens = parse("# Hello **World**")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from linemd.tokens import (
    TOKEN_TYPES,
    CodeFence,
    Header,
    LineBreak,
    ListItem,
    Text,
    Token,
    Url,
)

# Registry of token type names to classes for deserialization
_TOKEN_TYPES: dict[str, type] = {
    "Text": Text,
    "Url": Url,
    "Header": Header,
    "ListItem": ListItem,
    "CodeFence": CodeFence,
    "LineBreak": LineBreak,
}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. A Url's
    name is serialized as a nested Text dict.

    Raises:
        TypeError: If token is not a linemd token.

    """
    if not isinstance(token, TOKEN_TYPES):
        msg = f"Not a token: {type(token).__name__}"
        raise TypeError(msg)

    result: dict[str, Any] = {"_type": type(token).__name__}
    for f in fields(token):
        value = getattr(token, f.name)
        result[f.name] = to_dict(value) if isinstance(value, Text) else value
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized token dict, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)

    token_cls = _TOKEN_TYPES.get(type_name)
    if token_cls is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(token_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        kwargs[f.name] = from_dict(raw) if isinstance(raw, dict) else raw

    return token_cls(**kwargs)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Args:
        tokens: Tokens in document order.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token stream from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
