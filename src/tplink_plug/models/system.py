"""System family: device information and device-level actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import ActionResult, ResponseModel, wire

# Newer firmware reports coordinates as integers scaled by this factor
COORDINATE_SCALE = 10000


class DeviceType(str, Enum):
    """Broad device class derived from the sysinfo type string."""

    PLUG = "plug"
    BULB = "bulb"
    STRIP = "strip"
    UNKNOWN = "unknown"


@dataclass
class ChildInfo(ResponseModel):
    """One outlet of a power strip."""

    id: str | None = None
    state: int | None = None
    alias: str | None = None
    on_time: int | None = None


@dataclass
class SysInfo(ResponseModel):
    """``system.get_sysinfo`` response."""

    err_code: int | None = None
    sw_ver: str | None = None
    hw_ver: str | None = None
    hw_type: str | None = wire("type")
    mic_type: str | None = None
    model: str | None = None
    mac: str | None = None
    mic_mac: str | None = None
    device_id: str | None = wire("deviceId")
    hw_id: str | None = wire("hwId")
    fw_id: str | None = wire("fwId")
    oem_id: str | None = wire("oemId")
    alias: str | None = None
    dev_name: str | None = None
    icon_hash: str | None = None
    relay_state: int | None = None
    on_time: int | None = None
    active_mode: str | None = None
    feature: str | None = None
    updating: int | None = None
    rssi: int | None = None
    led_off: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    latitude_i: int | None = None
    longitude_i: int | None = None
    children: list[ChildInfo] | None = None

    @property
    def device_type(self) -> DeviceType:
        kind = (self.hw_type or self.mic_type or "").lower()
        if "bulb" in kind:
            return DeviceType.BULB
        if "plug" in kind or "switch" in kind:
            return DeviceType.STRIP if self.children else DeviceType.PLUG
        return DeviceType.UNKNOWN

    @property
    def is_on(self) -> bool | None:
        if self.relay_state is None:
            return None
        return self.relay_state == 1

    @property
    def location(self) -> tuple[float, float] | None:
        """(latitude, longitude) in decimal degrees, if reported."""
        if self.latitude is not None and self.longitude is not None:
            return self.latitude, self.longitude
        if self.latitude_i is not None and self.longitude_i is not None:
            return (
                self.latitude_i / COORDINATE_SCALE,
                self.longitude_i / COORDINATE_SCALE,
            )
        return None


@dataclass
class DownloadState(ResponseModel):
    """``system.get_download_state`` response."""

    err_code: int | None = None
    status: int | None = None
    ratio: int | None = None
    reboot_time: int | None = None
    flash_time: int | None = None


@dataclass
class DeviceIcon(ResponseModel):
    """``system.get_dev_icon`` response."""

    err_code: int | None = None
    icon: str | None = None
    hash: str | None = None


@dataclass
class SystemResponse(ActionResult):
    """The ``system`` block of a response."""

    get_sysinfo: SysInfo | None = None
    get_download_state: DownloadState | None = None
    get_dev_icon: DeviceIcon | None = None
    set_relay_state: ActionResult | None = None
    reboot: ActionResult | None = None
    reset: ActionResult | None = None
    set_led_off: ActionResult | None = None
    set_dev_alias: ActionResult | None = None
    set_mac_addr: ActionResult | None = None
    set_device_id: ActionResult | None = None
    set_hw_id: ActionResult | None = None
    set_dev_location: ActionResult | None = None
    test_check_uboot: ActionResult | None = None
    set_dev_icon: ActionResult | None = None
    set_test_mode: ActionResult | None = None
    download_firmware: ActionResult | None = None
    flash_firmware: ActionResult | None = None
    check_new_config: ActionResult | None = None
