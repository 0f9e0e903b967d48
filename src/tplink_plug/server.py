"""MCP server entry point for TP-Link smart-home devices.

Exposes the device commands as tools via the Model Context Protocol using
the official Python MCP SDK with stdio transport. The server keeps no
connection state: every tool takes the device address and performs one
exchange.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .device import TpLinkDevice
from .errors import ProtocolError
from .models.response import PlugResponse
from .protocol.commands import Module

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "tplink-plug",
    instructions="MCP server for TP-Link smart plugs, bulbs and power strips",
)


def _device(address: str) -> TpLinkDevice:
    return TpLinkDevice(address)


def _run(address: str, call) -> dict[str, Any]:
    """Run one device call, mapping protocol failures to an error dict."""
    try:
        return call(_device(address))
    except ProtocolError as e:
        logger.info("%s: %s failure: %s", address, e.category, e.message)
        result = e.to_dict()
        result["address"] = address
        return result


def _block(response: PlugResponse, module: str, action: str) -> dict[str, Any]:
    block = response.raw.get(module)
    if not isinstance(block, dict):
        return {"error": f"Device returned no '{module}' block"}
    value = block.get(action)
    if value is None and "err_code" in block:
        return {"error": block.get("err_msg", "module not supported"),
                "err_code": block["err_code"]}
    return value if isinstance(value, dict) else {"result": value}


# ─── SYSTEM TOOLS ────────────────────────────────────────────────────

@mcp.tool()
def get_sysinfo(address: str) -> dict[str, Any]:
    """Read device identification and state (model, firmware, relay, RSSI).

    Args:
        address: Device host:port, e.g. "192.168.1.20:9999".
    """
    def call(device: TpLinkDevice) -> dict[str, Any]:
        response = device.get_sysinfo()
        info = response.system.get_sysinfo if response.system else None
        if info is None:
            return {"error": "No sysinfo in response"}
        result = info.to_dict()
        result["device_type"] = info.device_type.value
        result["is_on"] = info.is_on
        return result

    return _run(address, call)


@mcp.tool()
def set_power(address: str, on: bool) -> dict[str, Any]:
    """Switch the relay on or off.

    Args:
        address: Device host:port.
        on: True to switch on, False to switch off.
    """
    def call(device: TpLinkDevice) -> dict[str, Any]:
        response = device.turn_on() if on else device.turn_off()
        return _block(response, Module.SYSTEM.value, "set_relay_state")

    return _run(address, call)


@mcp.tool()
def reboot(address: str, delay: int = 1) -> dict[str, Any]:
    """Reboot the device after ``delay`` seconds."""
    return _run(
        address,
        lambda d: _block(d.reboot(delay), Module.SYSTEM.value, "reboot"),
    )


@mcp.tool()
def set_alias(address: str, alias: str) -> dict[str, Any]:
    """Rename the device.

    Args:
        address: Device host:port.
        alias: New display name.
    """
    return _run(
        address,
        lambda d: _block(d.set_alias(alias), Module.SYSTEM.value, "set_dev_alias"),
    )


@mcp.tool()
def set_led(address: str, on: bool) -> dict[str, Any]:
    """Turn the status LED on or off (night mode)."""
    return _run(
        address,
        lambda d: _block(d.set_led_off(not on), Module.SYSTEM.value, "set_led_off"),
    )


# ─── ENERGY METER TOOLS ──────────────────────────────────────────────

@mcp.tool()
def get_realtime(address: str) -> dict[str, Any]:
    """Read instantaneous voltage, current, power and total energy.

    Values are normalized to V, A, W and kWh whichever unit scale the
    firmware reports.
    """
    def call(device: TpLinkDevice) -> dict[str, Any]:
        response = device.get_realtime()
        realtime = response.emeter.get_realtime if response.emeter else None
        if realtime is None:
            return _block(response, Module.EMETER.value, "get_realtime")
        return {
            "voltage_v": realtime.voltage_v,
            "current_a": realtime.current_a,
            "power_w": realtime.power_w,
            "total_kwh": realtime.total_kwh,
            "summary": realtime.summary(),
        }

    return _run(address, call)


@mcp.tool()
def get_daystat(address: str, month: int, year: int) -> dict[str, Any]:
    """Read per-day energy totals for one month.

    Args:
        address: Device host:port.
        month: Month 1-12.
        year: Four-digit year.
    """
    def call(device: TpLinkDevice) -> dict[str, Any]:
        response = device.get_daystat(month, year)
        stat = response.emeter.get_daystat if response.emeter else None
        if stat is None:
            return _block(response, Module.EMETER.value, "get_daystat")
        days = [
            {"day": item.day, "energy_kwh": item.energy_kwh}
            for item in stat.day_list or []
        ]
        return {"year": year, "month": month, "days": days}

    return _run(address, call)


# ─── TIME / NETWORK / CLOUD TOOLS ────────────────────────────────────

@mcp.tool()
def get_time(address: str) -> dict[str, Any]:
    """Read the device clock."""
    def call(device: TpLinkDevice) -> dict[str, Any]:
        response = device.get_time()
        clock = response.time.get_time if response.time else None
        when = clock.to_datetime() if clock else None
        if when is None:
            return _block(response, Module.TIME.value, "get_time")
        return {"time": when.isoformat()}

    return _run(address, call)


@mcp.tool()
def scan_access_points(address: str) -> dict[str, Any]:
    """List the Wi-Fi networks visible to the device."""
    def call(device: TpLinkDevice) -> dict[str, Any]:
        response = device.scan_access_points()
        scan = response.netif.get_scaninfo if response.netif else None
        if scan is None:
            return _block(response, Module.NETIF.value, "get_scaninfo")
        return {"access_points": [ap.to_dict() for ap in scan.ap_list or []]}

    return _run(address, call)


@mcp.tool()
def get_cloud_info(address: str) -> dict[str, Any]:
    """Read the cloud binding state (user, server, connection)."""
    return _run(
        address,
        lambda d: _block(d.get_cloud_info(), Module.CLOUD.value, "get_info"),
    )


@mcp.tool()
def send_raw(address: str, request: str) -> dict[str, Any]:
    """Send a raw JSON request document and return the decoded reply.

    Args:
        address: Device host:port.
        request: JSON text such as '{"system":{"get_sysinfo":{}}}'.
    """
    try:
        json.loads(request)
    except json.JSONDecodeError as e:
        return {"error": f"Request is not valid JSON: {e}"}
    return _run(address, lambda d: d.send(request).raw)


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("tplink://protocol/modules")
def resource_modules() -> str:
    """Request namespaces understood by the devices."""
    return json.dumps({"modules": [m.value for m in Module]})


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
