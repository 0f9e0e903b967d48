"""Time family: device clock and timezone."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .base import ActionResult, ResponseModel, wire


@dataclass
class DeviceTime(ResponseModel):
    """``time.get_time`` response."""

    err_code: int | None = None
    year: int | None = None
    month: int | None = None
    mday: int | None = None
    hour: int | None = None
    minute: int | None = wire("min")
    sec: int | None = None

    def to_datetime(self) -> datetime | None:
        """Return the device clock as a naive datetime.

        ``None`` if any part is missing or the parts do not form a valid
        date and time (unset clocks report zeroes).
        """
        parts = (self.year, self.month, self.mday, self.hour, self.minute, self.sec)
        if any(p is None for p in parts):
            return None
        try:
            return datetime(*parts)
        except ValueError:
            return None


@dataclass
class Timezone(ResponseModel):
    """``time.get_timezone`` response."""

    err_code: int | None = None
    index: int | None = None


@dataclass
class TimeResponse(ActionResult):
    """The ``time`` block of a response."""

    get_time: DeviceTime | None = None
    get_timezone: Timezone | None = None
    set_timezone: ActionResult | None = None
