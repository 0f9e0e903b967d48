"""Transport layer: one TCP exchange per command."""

from .tcp_connection import TCPConnection, send_command
