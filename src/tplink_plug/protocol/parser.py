"""Response parsing: deciphered payload bytes to a typed response."""

from __future__ import annotations

import json

from ..errors import DecodingError, DeserializationError
from ..models.base import SchemaError
from ..models.response import PlugResponse


def decode_text(payload: bytes) -> str:
    """Interpret a deciphered payload as UTF-8 text.

    Raises:
        DecodingError: If the payload is not valid UTF-8.
    """
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError(f"Decoding failed: {e}") from e


def parse_response(text: str) -> PlugResponse:
    """Parse JSON response text into a :class:`PlugResponse`.

    Absent or ``null`` fields decode as ``None``. Only malformed JSON or a
    known field of the wrong type is an error.

    Raises:
        DeserializationError: With the underlying parser's message.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Deserialization failed. Reason: {e}") from e

    try:
        return PlugResponse.from_dict(document)
    except SchemaError as e:
        raise DeserializationError(f"Deserialization failed. Reason: {e}") from e
