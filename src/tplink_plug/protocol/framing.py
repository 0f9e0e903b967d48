"""Frame builder and parser for the smart-home TCP protocol.

Frame layout::

    +-----------------+--------------------------------+
    | Length          |  Ciphered payload              |
    | 4 bytes (BE u32)|  N bytes (N == Length)         |
    +-----------------+--------------------------------+

- Length: big-endian byte count of the plaintext (equal to the ciphertext
  length, the cipher is a byte-wise substitution)
- Payload: UTF-8 JSON run through an autokey XOR cipher. The key starts at
  171 for every frame and each ciphertext byte becomes the key for the next
  byte, in both directions.

The cipher only obscures traffic; it provides no confidentiality.
"""

from __future__ import annotations

import struct

from ..errors import TruncatedFrameError

INITIAL_KEY = 171
HEADER_SIZE = 4
_HEADER = struct.Struct(">I")


def encrypt(plaintext: bytes) -> bytes:
    """Cipher a plaintext payload (no length prefix)."""
    key = INITIAL_KEY
    out = bytearray(len(plaintext))
    for i, byte in enumerate(plaintext):
        key = byte ^ key
        out[i] = key
    return bytes(out)


def decrypt(ciphertext: bytes) -> bytes:
    """Reverse :func:`encrypt`. The ciphertext byte just read is the next key."""
    key = INITIAL_KEY
    out = bytearray(len(ciphertext))
    for i, byte in enumerate(ciphertext):
        out[i] = byte ^ key
        key = byte
    return bytes(out)


def build_frame(plaintext: bytes) -> bytes:
    """Build a wire frame: length prefix followed by the ciphered payload.

    Args:
        plaintext: Request bytes, normally compact UTF-8 JSON.

    Returns:
        ``len(plaintext) + 4`` bytes ready to write to the socket.
    """
    return _HEADER.pack(len(plaintext)) + encrypt(plaintext)


def frame_length(header: bytes) -> int:
    """Return the payload length declared by a 4-byte frame header."""
    if len(header) < HEADER_SIZE:
        raise TruncatedFrameError(
            f"Truncated frame: header needs {HEADER_SIZE} bytes, got {len(header)}"
        )
    return _HEADER.unpack_from(header)[0]


def parse_frame(data: bytes) -> bytes:
    """Parse a wire frame and return the deciphered payload.

    Only ``4 + N`` bytes are consumed; anything after the declared payload
    is ignored.

    Raises:
        TruncatedFrameError: If ``data`` is shorter than its prefix declares.
    """
    length = frame_length(data)
    end = HEADER_SIZE + length
    if len(data) < end:
        raise TruncatedFrameError(
            f"Truncated frame: header declares {length} payload bytes, "
            f"got {len(data) - HEADER_SIZE}"
        )
    return decrypt(data[HEADER_SIZE:end])
