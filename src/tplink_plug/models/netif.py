"""Network-interface family: Wi-Fi scan and association."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ActionResult, ResponseModel


@dataclass
class AccessPoint(ResponseModel):
    ssid: str | None = None
    key_type: int | None = None


@dataclass
class ScanInfo(ResponseModel):
    """``netif.get_scaninfo`` response."""

    err_code: int | None = None
    ap_list: list[AccessPoint] | None = None


@dataclass
class NetifResponse(ActionResult):
    """The ``netif`` block of a response."""

    get_scaninfo: ScanInfo | None = None
    set_stainfo: ActionResult | None = None
