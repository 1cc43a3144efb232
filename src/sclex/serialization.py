"""Token serialization: JSON-compatible dicts for sclex tokens.

Useful for:
- Golden files in tests of downstream parsers
- Shipping a token stream to another process
- Debugging and inspection

All JSON output is deterministic (sorted keys).

Example:
    from sclex import lex
    from sclex.serialization import to_json, from_json

    tokens = list(lex("main.sc", "var x int"))
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from sclex.errors import SerializationError
from sclex.location import SourceLocation
from sclex.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Example:
        >>> to_dict(Token(TokenType.IDENT, "x", SourceLocation(1, 5, 4)))
        {'type': 'IDENT', 'value': 'x', 'location': {'lineno': 1, 'col_offset': 5, 'offset': 4, 'filename': None}}

    """
    loc = token.location
    return {
        "type": token.type.name,
        "value": token.value,
        "location": {
            "lineno": loc.lineno,
            "col_offset": loc.col_offset,
            "offset": loc.offset,
            "filename": loc.filename,
        },
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        SerializationError: If a key is missing or the type name is unknown
    """
    try:
        type_name = data["type"]
        value = data["value"]
        loc = data["location"]
        location = SourceLocation(
            lineno=loc["lineno"],
            col_offset=loc["col_offset"],
            offset=loc.get("offset", 0),
            filename=loc.get("filename"),
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise SerializationError(f"Malformed token data: {data!r}") from exc

    try:
        token_type = TokenType[type_name]
    except KeyError:
        raise SerializationError(f"Unknown token type: {type_name!r}") from None

    return Token(type=token_type, value=value, location=location)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string."""
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string produced by to_json.

    Raises:
        SerializationError: If the JSON is invalid or not an array of tokens
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise SerializationError(f"Expected a JSON array, got {type(data).__name__}")
    return [from_dict(item) for item in data]
