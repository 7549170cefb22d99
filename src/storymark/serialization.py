"""Token serialization: JSON round-trip for storymark tokens.

Tokens reference their source instead of copying text, so the serialized
form stores only offsets. Deserializing needs the same source string back.

Useful for:
- Caching tokenized sections next to the documentation source
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from storymark import tokenize
    from storymark.serialization import to_json, from_json

    tokens = tokenize(source)
    restored = from_json(to_json(tokens), source)
    assert restored == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from storymark.errors import SerializationError
from storymark.tokens import Chunk, Directive, Heading, Token

# Registry of token type names to classes for deserialization
_TOKEN_TYPES: dict[str, type[Token]] = {
    "Heading": Heading,
    "Directive": Directive,
    "Chunk": Chunk,
}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. The source
    reference is left out.
    """
    result: dict[str, Any] = {"_type": type(token).__name__}
    for f in fields(token):
        if f.name == "source":
            continue
        result[f.name] = getattr(token, f.name)
    return result


def from_dict(data: dict[str, Any], source: str) -> Token:
    """Rebuild a token from a dict produced by to_dict.

    Args:
        data: Dict with ``_type`` and token fields
        source: The source string the token was produced from

    Returns:
        Token bound to ``source``.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, a field is
            missing or has the wrong type, or the spans do not fit inside
            ``source``.
    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized token")

    token_cls = _TOKEN_TYPES.get(type_name) if isinstance(type_name, str) else None
    if token_cls is None:
        raise SerializationError(f"Unknown token type: {type_name!r}")

    kwargs: dict[str, Any] = {"source": source}
    for f in fields(token_cls):
        if f.name == "source":
            continue
        if f.name not in data:
            raise SerializationError(f"{type_name} is missing field {f.name!r}")
        kwargs[f.name] = data[f.name]

    token = token_cls(**kwargs)
    _validate(token, len(source))
    return token


def _validate(token: Token, source_len: int) -> None:
    spans = [(token.offset, token.length)]
    if isinstance(token, Heading):
        if not _is_int(token.level):
            raise SerializationError(f"Heading level must be an integer, got {token.level!r}")
        spans.append((token.text_offset, token.text_length))
    elif isinstance(token, Directive):
        if not isinstance(token.controls, bool):
            raise SerializationError(
                f"Directive controls must be a boolean, got {token.controls!r}"
            )
        if token.target_offset is not None:
            spans.append((token.target_offset, token.target_length))

    for offset, length in spans:
        if not (_is_int(offset) and _is_int(length)):
            raise SerializationError(
                f"{type(token).__name__} span ({offset!r}, {length!r}) must be integers"
            )
        if offset < 0 or length < 0 or offset + length > source_len:
            raise SerializationError(
                f"{type(token).__name__} span ({offset}, {length}) "
                f"outside source of length {source_len}"
            )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def to_json(tokens: list[Token], *, indent: int | None = None) -> str:
    """Serialize a token list to a JSON string.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).
    """
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(data: str, source: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Raises:
        SerializationError: If ``data`` is not valid JSON or not a list of
            tokens for ``source``.
    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(raw, list):
        raise SerializationError(f"Expected a JSON list, got {type(raw).__name__}")
    return [from_dict(item, source) for item in raw]
