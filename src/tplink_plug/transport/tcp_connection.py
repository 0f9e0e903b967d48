"""TCP connection to a smart-home device.

One connection carries exactly one request/response exchange and is then
closed. A single deadline (default 5000 ms) bounds connect, write and the
whole read.

Usage::

    with TCPConnection("192.168.1.20:9999") as conn:
        conn.write(build_frame(request))
        payload = conn.read_frame()
"""

from __future__ import annotations

import logging
import socket
import time

from ..errors import DeviceConnectionError, ProtocolError, ReadError, WriteError
from ..protocol.framing import HEADER_SIZE, build_frame, frame_length, parse_frame
from ..protocol.parser import decode_text

logger = logging.getLogger(__name__)

DEFAULT_PORT = 9999
READ_TIMEOUT_MS = 5000
RECV_CHUNK_SIZE = 4096
MAX_FRAME_SIZE = 4 * 1024 * 1024


def split_address(address: str, default_port: int = DEFAULT_PORT) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6]:port``, or bare ``host``) into a tuple.

    Raises:
        DeviceConnectionError: If the port is not a number.
    """
    host, port = address, default_port
    if address.startswith("["):
        end = address.find("]")
        if end == -1:
            raise DeviceConnectionError(f"Invalid address {address!r}")
        host = address[1:end]
        rest = address[end + 1:]
        if rest.startswith(":"):
            port = rest[1:]
    elif address.count(":") == 1:
        host, port = address.split(":")

    try:
        return host, int(port)
    except ValueError as e:
        raise DeviceConnectionError(f"Invalid port in address {address!r}") from e


class TCPConnection:
    """A single-use connection to one device address."""

    def __init__(self, address: str, timeout: float = READ_TIMEOUT_MS / 1000) -> None:
        self._address = address
        self._timeout = timeout
        self._sock: socket.socket | None = None
        self._deadline = 0.0

    @property
    def address(self) -> str:
        return self._address

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def __enter__(self) -> TCPConnection:
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def open(self) -> None:
        """Connect and start the exchange deadline.

        Raises:
            DeviceConnectionError: If the device cannot be reached.
        """
        host, port = split_address(self._address)
        self._deadline = time.monotonic() + self._timeout
        try:
            self._sock = socket.create_connection((host, port), timeout=self._timeout)
        except OSError as e:
            raise DeviceConnectionError(
                f"Connection error: could not connect to {self._address}: {e}"
            ) from e
        logger.debug("Connected to %s", self._address)

    def close(self) -> None:
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError as e:
            logger.warning("Error closing connection to %s: %s", self._address, e)
        finally:
            self._sock = None

    def _remaining(self) -> float:
        remaining = self._deadline - time.monotonic()
        if remaining <= 0:
            raise socket.timeout("deadline elapsed")
        return remaining

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise DeviceConnectionError(f"Not connected to {self._address}")
        return self._sock

    def write(self, data: bytes) -> int:
        """Write a whole frame, looping over partial sends.

        Raises:
            DeviceConnectionError: If the connection is not open.
            WriteError: On any send failure, reset or timeout.
        """
        sock = self._require_socket()
        try:
            sock.settimeout(self._remaining())
            sock.sendall(data)
        except OSError as e:
            raise WriteError(f"Write failed: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(data), self._address)
        return len(data)

    def _read_exact(self, size: int, buf: bytearray) -> None:
        sock = self._require_socket()
        while len(buf) < size:
            sock.settimeout(self._remaining())
            chunk = sock.recv(min(RECV_CHUNK_SIZE, size - len(buf)))
            if not chunk:
                if not buf:
                    raise DeviceConnectionError(
                        f"Connection error: {self._address} closed the connection "
                        f"without responding"
                    )
                raise ReadError(
                    f"Read failed: connection closed after {len(buf)} of {size} bytes"
                )
            buf += chunk

    def read_frame(self) -> bytes:
        """Read one whole response frame and return the deciphered payload.

        The 4-byte prefix is read first, then exactly the declared number of
        payload bytes, until satisfied or the deadline elapses.

        Raises:
            DeviceConnectionError: If the device closed or reset the
                connection before sending anything.
            ReadError: On timeout, a partial frame, a declared length above
                ``MAX_FRAME_SIZE``, or any other recv failure.
        """
        buf = bytearray()
        try:
            self._read_exact(HEADER_SIZE, buf)
            length = frame_length(buf)
            logger.debug("Response from %s declares %d payload bytes", self._address, length)
            if length > MAX_FRAME_SIZE:
                raise ReadError(
                    f"Read failed: declared length {length} exceeds "
                    f"{MAX_FRAME_SIZE} bytes"
                )
            self._read_exact(HEADER_SIZE + length, buf)
        except ProtocolError:
            raise
        except socket.timeout as e:
            raise ReadError(
                f"Read failed: timed out after {self._timeout:g}s "
                f"with {len(buf)} bytes received"
            ) from e
        except ConnectionError as e:
            if buf:
                raise ReadError(f"Read failed: {e}") from e
            raise DeviceConnectionError(
                f"Connection error: {self._address} reset the connection: {e}"
            ) from e
        except OSError as e:
            raise ReadError(f"Read failed: {e}") from e
        return parse_frame(bytes(buf))


def send_command(
    address: str, request: str, timeout: float = READ_TIMEOUT_MS / 1000
) -> str:
    """Perform one request/response exchange and return the response text.

    Args:
        address: Device ``host:port``.
        request: Request JSON text.
        timeout: Deadline in seconds for the whole exchange.

    Raises:
        DeviceConnectionError, WriteError, ReadError, DecodingError
    """
    logger.debug("Sending to %s: %s", address, request)
    with TCPConnection(address, timeout=timeout) as conn:
        conn.write(build_frame(request.encode("utf-8")))
        payload = conn.read_frame()
    text = decode_text(payload)
    logger.debug("Received from %s: %s", address, text)
    return text
