"""Module names and request builders.

Every request is a two-level JSON document::

    {"<module>": {"<action>": <params or null>}}

Builders return the compact JSON text (no whitespace), which is what the
device firmware sends and expects.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any


class Module(str, Enum):
    """Top-level request namespaces."""

    SYSTEM = "system"
    EMETER = "emeter"
    NETIF = "netif"
    CLOUD = "cnCloud"
    TIME = "time"


def to_json(document: dict[str, Any]) -> str:
    """Serialize a request document compactly."""
    return json.dumps(document, separators=(",", ":"))


def build_command(
    module: Module | str, action: str, params: dict[str, Any] | None = None
) -> str:
    """Build the request text for one module/action pair.

    Args:
        module: Request namespace.
        action: Action name within the module.
        params: Parameter object, or ``None`` to send JSON ``null``.
    """
    name = module.value if isinstance(module, Module) else module
    return to_json({name: {action: params}})


# ─── SYSTEM ──────────────────────────────────────────────────────────

def build_get_sysinfo() -> str:
    return build_command(Module.SYSTEM, "get_sysinfo", {})


def build_set_relay_state(state: int) -> str:
    """Build a relay command. ``state`` is 1 for on, 0 for off."""
    return build_command(Module.SYSTEM, "set_relay_state", {"state": state})


def build_reboot(delay: int = 1) -> str:
    return build_command(Module.SYSTEM, "reboot", {"delay": delay})


def build_reset(delay: int = 1) -> str:
    """Build a factory reset command."""
    return build_command(Module.SYSTEM, "reset", {"delay": delay})


def build_set_led_off(off: bool) -> str:
    """Build the night-mode command; ``off=True`` turns the LED off."""
    return build_command(Module.SYSTEM, "set_led_off", {"off": 1 if off else 0})


def build_set_alias(alias: str) -> str:
    return build_command(Module.SYSTEM, "set_dev_alias", {"alias": alias})


def build_set_mac_address(mac: str) -> str:
    return build_command(Module.SYSTEM, "set_mac_addr", {"mac": mac})


def build_set_device_id(device_id: str) -> str:
    return build_command(Module.SYSTEM, "set_device_id", {"deviceId": device_id})


def build_set_hardware_id(hardware_id: str) -> str:
    return build_command(Module.SYSTEM, "set_hw_id", {"hwId": hardware_id})


def build_set_location(latitude: float, longitude: float) -> str:
    return build_command(
        Module.SYSTEM,
        "set_dev_location",
        {"longitude": longitude, "latitude": latitude},
    )


def build_uboot_check() -> str:
    return build_command(Module.SYSTEM, "test_check_uboot")


def build_get_device_icon() -> str:
    return build_command(Module.SYSTEM, "get_dev_icon")


def build_set_device_icon(icon: str, icon_hash: str) -> str:
    return build_command(
        Module.SYSTEM, "set_dev_icon", {"icon": icon, "hash": icon_hash}
    )


def build_set_test_mode() -> str:
    return build_command(Module.SYSTEM, "set_test_mode", {"enable": 1})


def build_download_firmware(url: str) -> str:
    return build_command(Module.SYSTEM, "download_firmware", {"url": url})


def build_get_download_state() -> str:
    return build_command(Module.SYSTEM, "get_download_state", {})


def build_flash_firmware() -> str:
    return build_command(Module.SYSTEM, "flash_firmware", {})


def build_check_config() -> str:
    return build_command(Module.SYSTEM, "check_new_config")


# ─── NETIF ───────────────────────────────────────────────────────────

def build_scan_access_points(refresh: bool = True) -> str:
    return build_command(
        Module.NETIF, "get_scaninfo", {"refresh": 1 if refresh else 0}
    )


def build_connect_to_access_point(ssid: str, password: str, key_type: int = 3) -> str:
    """Build a Wi-Fi association command.

    Args:
        ssid: Network name.
        password: Network passphrase, sent as-is.
        key_type: Security type; 3 is WPA2.
    """
    return build_command(
        Module.NETIF,
        "set_stainfo",
        {"ssid": ssid, "password": password, "key_type": key_type},
    )


# ─── CLOUD ───────────────────────────────────────────────────────────

def build_get_cloud_info() -> str:
    return build_command(Module.CLOUD, "get_info")


def build_get_firmware_list() -> str:
    return build_command(Module.CLOUD, "get_intl_fw_list", {})


def build_set_server_url(server_url: str) -> str:
    return build_command(Module.CLOUD, "set_server_url", {"server": server_url})


def build_bind_cloud(username: str, password: str) -> str:
    return build_command(
        Module.CLOUD, "bind", {"username": username, "password": password}
    )


def build_unbind_cloud() -> str:
    return build_command(Module.CLOUD, "unbind")


# ─── TIME ────────────────────────────────────────────────────────────

def build_get_time() -> str:
    return build_command(Module.TIME, "get_time")


def build_get_timezone() -> str:
    return build_command(Module.TIME, "get_timezone")


def build_set_timezone(when: datetime, index: int) -> str:
    """Build a clock/timezone update.

    Args:
        when: Local wall-clock time to set on the device.
        index: Device timezone table index.
    """
    return build_command(
        Module.TIME,
        "set_timezone",
        {
            "year": when.year,
            "month": when.month,
            "mday": when.day,
            "hour": when.hour,
            "min": when.minute,
            "sec": when.second,
            "index": index,
        },
    )


# ─── EMETER ──────────────────────────────────────────────────────────

def build_get_realtime() -> str:
    return build_command(Module.EMETER, "get_realtime", {})


def build_get_vgain_igain() -> str:
    return build_command(Module.EMETER, "get_vgain_igain", {})


def build_set_vgain_igain(vgain: int, igain: int) -> str:
    return build_command(
        Module.EMETER, "set_vgain_igain", {"vgain": vgain, "igain": igain}
    )


def build_get_daystat(month: int, year: int) -> str:
    return build_command(
        Module.EMETER, "get_daystat", {"month": month, "year": year}
    )


def build_get_monthstat(year: int) -> str:
    return build_command(Module.EMETER, "get_monthstat", {"year": year})


def build_erase_emeter_stat() -> str:
    return build_command(Module.EMETER, "erase_emeter_stat")
