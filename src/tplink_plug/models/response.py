"""Top-level response document."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import ResponseModel, SchemaError, wire
from .clock import TimeResponse
from .cloud import CloudResponse
from .emeter import EmeterResponse
from .netif import NetifResponse
from .system import SystemResponse


@dataclass
class PlugResponse(ResponseModel):
    """A decoded device reply, keyed by module like the request was.

    Only the blocks for the modules the request addressed are present.
    ``raw`` keeps the decoded JSON object, including keys not modelled here.
    """

    system: SystemResponse | None = None
    emeter: EmeterResponse | None = None
    netif: NetifResponse | None = None
    cloud: CloudResponse | None = wire("cnCloud")
    time: TimeResponse | None = None
    raw: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict) -> PlugResponse:
        if not isinstance(data, dict):
            raise SchemaError(
                f"Response must be a JSON object, got {type(data).__name__}"
            )
        response = cls._from_dict(data, "response")
        response.raw = data
        return response

    def to_dict(self) -> dict:
        return dict(self.raw) if self.raw else super().to_dict()
