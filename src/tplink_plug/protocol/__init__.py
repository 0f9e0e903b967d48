"""Protocol layer: frame cipher, request builders, and response parsing."""

from .framing import build_frame, parse_frame
from .commands import Module, build_command
from .parser import parse_response
