"""Energy-meter family.

Firmware reports readings in one of two unit scales:

- legacy: decimal ``current`` (A), ``voltage`` (V), ``power`` (W),
  ``total`` (kWh)
- newer: integer ``current_ma`` (mA), ``voltage_mv`` (mV), ``power_mw``
  (mW), ``total_wh`` (Wh)

The ``*_a`` / ``*_v`` / ``*_w`` / ``*_kwh`` properties normalize to base
units from whichever scale is present.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import ActionResult, ResponseModel


def _scaled(legacy: float | None, milli: float | None) -> float | None:
    if milli is not None:
        return milli / 1000
    return legacy


@dataclass
class Realtime(ResponseModel):
    """``emeter.get_realtime`` response."""

    err_code: int | None = None
    current: float | None = None
    current_ma: float | None = None
    voltage: float | None = None
    voltage_mv: float | None = None
    power: float | None = None
    power_mw: float | None = None
    total: float | None = None
    total_wh: float | None = None

    @property
    def current_a(self) -> float | None:
        return _scaled(self.current, self.current_ma)

    @property
    def voltage_v(self) -> float | None:
        return _scaled(self.voltage, self.voltage_mv)

    @property
    def power_w(self) -> float | None:
        return _scaled(self.power, self.power_mw)

    @property
    def total_kwh(self) -> float | None:
        return _scaled(self.total, self.total_wh)

    def summary(self) -> str:
        """Human-readable ``V = .. V, I = .. A, P = .. W`` line."""
        return (
            f"V = {self.voltage_v} V, "
            f"I = {self.current_a} A, "
            f"P = {self.power_w} W"
        )


@dataclass
class VGainIGain(ResponseModel):
    """``emeter.get_vgain_igain`` response (calibration gains)."""

    err_code: int | None = None
    vgain: int | None = None
    igain: int | None = None


@dataclass
class DayStatItem(ResponseModel):
    year: int | None = None
    month: int | None = None
    day: int | None = None
    energy: float | None = None
    energy_wh: float | None = None

    @property
    def energy_kwh(self) -> float | None:
        return _scaled(self.energy, self.energy_wh)


@dataclass
class DayStat(ResponseModel):
    """``emeter.get_daystat`` response: per-day totals for one month."""

    err_code: int | None = None
    day_list: list[DayStatItem] | None = None


@dataclass
class MonthStatItem(ResponseModel):
    year: int | None = None
    month: int | None = None
    energy: float | None = None
    energy_wh: float | None = None

    @property
    def energy_kwh(self) -> float | None:
        return _scaled(self.energy, self.energy_wh)


@dataclass
class MonthStat(ResponseModel):
    """``emeter.get_monthstat`` response: per-month totals for one year."""

    err_code: int | None = None
    month_list: list[MonthStatItem] | None = None


@dataclass
class EmeterResponse(ActionResult):
    """The ``emeter`` block of a response."""

    get_realtime: Realtime | None = None
    get_vgain_igain: VGainIGain | None = None
    get_daystat: DayStat | None = None
    get_monthstat: MonthStat | None = None
    set_vgain_igain: ActionResult | None = None
    erase_emeter_stat: ActionResult | None = None
