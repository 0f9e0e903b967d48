"""Protocol error taxonomy.

Every failure of a single request/response exchange surfaces as one of
these. None are retried internally; the caller decides what to do.
"""

from __future__ import annotations


class ProtocolError(Exception):
    """Base class for all device protocol failures."""

    category: str = "protocol"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "category": self.category}


class DeviceConnectionError(ProtocolError, ConnectionError):
    """The device could not be reached or dropped the connection."""

    category = "connection"


class WriteError(ProtocolError):
    """Sending the request frame failed."""

    category = "write"


class ReadError(ProtocolError):
    """Reading the response failed, timed out, or ended mid-frame."""

    category = "read"


class DecodingError(ProtocolError):
    """The deciphered payload is not valid UTF-8 text."""

    category = "decode"


class DeserializationError(ProtocolError):
    """The payload text is not a JSON document of the expected shape."""

    category = "deserialize"


class TruncatedFrameError(ProtocolError):
    """A buffer is shorter than the length its own prefix declares."""

    category = "frame"
