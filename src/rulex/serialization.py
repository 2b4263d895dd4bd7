"""Token serialization: JSON round-trip for rulex tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching token streams between runs
- Sending tokens to a front end that highlights the source
- Debugging and inspection

All output is deterministic (sorted keys).

Token content is whatever the rule's callback returned, so to_json only
succeeds when that content is JSON-serializable.

Example:
    from rulex import Lexer
    from rulex.serialization import to_json, from_json

    tokens = Lexer().lex("hello world")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from rulex.location import Position
from rulex.tokens import Token


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        token: Token to serialize.

    Returns:
        Dict with ``_type``, ``name``, ``content`` and ``position``.

    """
    return {
        "_type": "Token",
        "name": token.name,
        "content": token.content,
        "position": {
            "_type": "Position",
            "line": token.position.line,
            "column": token.position.column,
        },
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Token (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)
    if type_name != "Token":
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    position = data["position"]
    return Token(
        name=data["name"],
        content=data["content"],
        position=Position(line=position["line"], column=position["column"]),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON string.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string (a list of token objects).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> tuple[Token, ...]:
    """Deserialize a token sequence from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Tokens in their serialized order.

    Raises:
        ValueError: If the JSON is not a list of tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return tuple(from_dict(item) for item in raw)
