"""Client for the TP-Link smart-home local protocol (plugs, bulbs, strips)."""

from .device import TpLinkDevice
from .errors import (
    DecodingError,
    DeserializationError,
    DeviceConnectionError,
    ProtocolError,
    ReadError,
    TruncatedFrameError,
    WriteError,
)
from .models import PlugResponse
