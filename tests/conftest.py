"""Shared fixtures: an in-process stub device listening on localhost."""

from __future__ import annotations

import socket
import threading

import pytest

from tplink_plug.protocol.framing import HEADER_SIZE, build_frame, frame_length, parse_frame


def recv_exact(conn: socket.socket, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def recv_request(conn: socket.socket) -> str:
    """Read one request frame and return its plaintext."""
    header = recv_exact(conn, HEADER_SIZE)
    body = recv_exact(conn, frame_length(header))
    return parse_frame(header + body).decode("utf-8")


class StubDevice:
    """A one-thread TCP listener that hands each connection to ``handler``."""

    def __init__(self, handler) -> None:
        self.handler = handler
        self.requests: list[str] = []
        self.release = threading.Event()
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(5)
        self._listener.settimeout(0.2)
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def address(self) -> str:
        host, port = self._listener.getsockname()
        return f"{host}:{port}"

    def _serve(self) -> None:
        while not self._stopped.is_set():
            try:
                conn, _ = self._listener.accept()
            except (socket.timeout, OSError):
                continue
            with conn:
                try:
                    self.handler(self, conn)
                except OSError:
                    pass

    def stop(self) -> None:
        self.release.set()
        self._stopped.set()
        self._thread.join(timeout=5)
        self._listener.close()


def reply_with(text: str | bytes):
    """Handler that records the request and answers with one framed payload."""
    payload = text.encode("utf-8") if isinstance(text, str) else text

    def handler(stub: StubDevice, conn: socket.socket) -> None:
        stub.requests.append(recv_request(conn))
        conn.sendall(build_frame(payload))

    return handler


@pytest.fixture
def stub_device():
    """Factory fixture: ``stub_device(handler)`` returns a running StubDevice."""
    stubs: list[StubDevice] = []

    def start(handler) -> StubDevice:
        stub = StubDevice(handler)
        stubs.append(stub)
        return stub

    yield start
    for stub in stubs:
        stub.stop()
