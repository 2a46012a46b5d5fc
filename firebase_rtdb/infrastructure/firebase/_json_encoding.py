"""Encode/decode Python values to/from Realtime Database JSON bodies."""

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from firebase_rtdb.domain.exceptions import SerializationException


def encode_value(value: Any, operation: str) -> bytes:
    """Serialize ``value`` to a JSON body.

    Plain JSON types go through as-is; pydantic models, dataclasses,
    datetimes and the like are converted with pydantic's JSON rules.
    NaN and infinities are rejected (not valid JSON).
    """
    try:
        text = json.dumps(
            value,
            default=to_jsonable_python,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        raise SerializationException(
            f"Cannot encode value of type {type(value).__name__}: {e}",
            operation,
        ) from e
    return text.encode("utf-8")


def encode_diffgram(value: Any, operation: str = "update") -> bytes:
    """Serialize a partial-update document (sub-path -> new value)."""
    if not isinstance(value, Mapping):
        raise SerializationException(
            f"Update requires a mapping of paths to values, got {type(value).__name__}",
            operation,
        )
    return encode_value(dict(value), operation)


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode_value(raw: bytes, operation: str, shape: Any = None) -> Any:
    """Deserialize a response body.

    Args:
        raw: Response body.
        operation: Name of the client operation, for error details.
        shape: Optional type (pydantic model, ``dict[str, int]``...) the
            value is validated into. ``None`` returns plain JSON data.
    """
    try:
        if shape is None:
            return json.loads(raw)
        return _adapter(shape).validate_json(raw)
    except (ValueError, ValidationError) as e:
        raise SerializationException(
            f"Cannot decode response body: {e}",
            operation,
        ) from e
    except TypeError as e:
        raise SerializationException(
            f"Unsupported shape {shape!r}: {e}",
            operation,
        ) from e


def decode_push_key(raw: bytes) -> str:
    """Return the generated child key from a push (POST) response ``{"name": ...}``."""
    data = decode_value(raw, "push")
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        raise SerializationException(
            "Push response has no generated key ('name' field)",
            "push",
        )
    return name
