"""Device handle: one method per supported device operation.

Each method builds a fixed request document, performs one exchange over a
fresh TCP connection, and returns the decoded :class:`PlugResponse`. The
handle holds no connection or session state and can be shared freely.

Usage::

    plug = TpLinkDevice("192.168.1.20:9999")
    plug.turn_on()
    info = plug.get_sysinfo().system.get_sysinfo
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from .models.response import PlugResponse
from .protocol import commands
from .protocol.parser import parse_response
from .transport.tcp_connection import READ_TIMEOUT_MS, send_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TpLinkDevice:
    """Immutable handle for one device address.

    Args:
        address: ``host:port``; a bare host implies port 9999.
        timeout: Deadline in seconds for each exchange.
    """

    address: str
    timeout: float = READ_TIMEOUT_MS / 1000

    def send(self, request: str) -> PlugResponse:
        """Send raw request JSON text and parse the reply.

        Raises:
            ProtocolError: Any subclass, for the stage that failed.
        """
        text = send_command(self.address, request, timeout=self.timeout)
        return parse_response(text)

    # ─── SYSTEM ──────────────────────────────────────────────────────

    def get_sysinfo(self) -> PlugResponse:
        return self.send(commands.build_get_sysinfo())

    def set_relay_state(self, state: int) -> PlugResponse:
        return self.send(commands.build_set_relay_state(state))

    def turn_on(self) -> PlugResponse:
        return self.set_relay_state(1)

    def turn_off(self) -> PlugResponse:
        return self.set_relay_state(0)

    def reboot(self, delay: int = 1) -> PlugResponse:
        return self.send(commands.build_reboot(delay))

    def reset_to_factory(self, delay: int = 1) -> PlugResponse:
        return self.send(commands.build_reset(delay))

    def set_led_off(self, off: bool) -> PlugResponse:
        return self.send(commands.build_set_led_off(off))

    def turn_led_off(self) -> PlugResponse:
        return self.set_led_off(True)

    def turn_led_on(self) -> PlugResponse:
        return self.set_led_off(False)

    def set_alias(self, alias: str) -> PlugResponse:
        return self.send(commands.build_set_alias(alias))

    def set_mac_address(self, mac: str) -> PlugResponse:
        return self.send(commands.build_set_mac_address(mac))

    def set_device_id(self, device_id: str) -> PlugResponse:
        return self.send(commands.build_set_device_id(device_id))

    def set_hardware_id(self, hardware_id: str) -> PlugResponse:
        return self.send(commands.build_set_hardware_id(hardware_id))

    def set_location(self, latitude: float, longitude: float) -> PlugResponse:
        return self.send(commands.build_set_location(latitude, longitude))

    def uboot_bootloader_check(self) -> PlugResponse:
        return self.send(commands.build_uboot_check())

    def get_device_icon(self) -> PlugResponse:
        return self.send(commands.build_get_device_icon())

    def set_device_icon(self, icon: str, icon_hash: str) -> PlugResponse:
        return self.send(commands.build_set_device_icon(icon, icon_hash))

    def set_test_mode(self) -> PlugResponse:
        return self.send(commands.build_set_test_mode())

    def download_firmware(self, url: str) -> PlugResponse:
        """Ask the device to fetch a firmware image from ``url``."""
        return self.send(commands.build_download_firmware(url))

    def get_download_state(self) -> PlugResponse:
        return self.send(commands.build_get_download_state())

    def flash_firmware(self) -> PlugResponse:
        """Flash the previously downloaded firmware image."""
        return self.send(commands.build_flash_firmware())

    def check_config(self) -> PlugResponse:
        return self.send(commands.build_check_config())

    # ─── NETIF ───────────────────────────────────────────────────────

    def scan_access_points(self, refresh: bool = True) -> PlugResponse:
        return self.send(commands.build_scan_access_points(refresh))

    def connect_to_access_point(
        self, ssid: str, password: str, key_type: int = 3
    ) -> PlugResponse:
        return self.send(commands.build_connect_to_access_point(ssid, password, key_type))

    # ─── CLOUD ───────────────────────────────────────────────────────

    def get_cloud_info(self) -> PlugResponse:
        return self.send(commands.build_get_cloud_info())

    def get_firmware_list(self) -> PlugResponse:
        return self.send(commands.build_get_firmware_list())

    def set_server_url(self, server_url: str) -> PlugResponse:
        return self.send(commands.build_set_server_url(server_url))

    def bind_cloud(self, username: str, password: str) -> PlugResponse:
        return self.send(commands.build_bind_cloud(username, password))

    def unbind_cloud(self) -> PlugResponse:
        return self.send(commands.build_unbind_cloud())

    # ─── TIME ────────────────────────────────────────────────────────

    def get_time(self) -> PlugResponse:
        return self.send(commands.build_get_time())

    def get_timezone(self) -> PlugResponse:
        return self.send(commands.build_get_timezone())

    def set_timezone(self, when: datetime, index: int) -> PlugResponse:
        return self.send(commands.build_set_timezone(when, index))

    # ─── EMETER ──────────────────────────────────────────────────────

    def get_realtime(self) -> PlugResponse:
        return self.send(commands.build_get_realtime())

    def get_realtime_voltage_current(self) -> tuple[float | None, float | None]:
        """Return the instantaneous (volts, amps), normalized to base units.

        Either value is ``None`` if the device did not report it.
        """
        response = self.get_realtime()
        realtime = response.emeter.get_realtime if response.emeter else None
        if realtime is None:
            logger.debug("%s returned no realtime block", self.address)
            return None, None
        return realtime.voltage_v, realtime.current_a

    def get_vgain_igain(self) -> PlugResponse:
        return self.send(commands.build_get_vgain_igain())

    def set_vgain_igain(self, vgain: int, igain: int) -> PlugResponse:
        return self.send(commands.build_set_vgain_igain(vgain, igain))

    def get_daystat(self, month: int, year: int) -> PlugResponse:
        return self.send(commands.build_get_daystat(month, year))

    def get_monthstat(self, year: int) -> PlugResponse:
        return self.send(commands.build_get_monthstat(year))

    def erase_emeter_stat(self) -> PlugResponse:
        return self.send(commands.build_erase_emeter_stat())
