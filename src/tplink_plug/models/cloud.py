"""Cloud (``cnCloud``) family: binding and firmware catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import ActionResult, ResponseModel, wire


@dataclass
class CloudInfo(ResponseModel):
    """``cnCloud.get_info`` response."""

    err_code: int | None = None
    username: str | None = None
    server: str | None = None
    binded: int | None = None
    cld_connection: int | None = None
    illegal_type: int | None = wire("illegalType")
    stop_connect: int | None = wire("stopConnect")
    tcsp_status: int | None = wire("tcspStatus")
    fw_dl_page: str | None = wire("fwDlPage")
    tcsp_info: str | None = wire("tcspInfo")
    fw_notify_type: int | None = wire("fwNotifyType")

    @property
    def is_bound(self) -> bool | None:
        if self.binded is None:
            return None
        return self.binded == 1


@dataclass
class FirmwareList(ResponseModel):
    """``cnCloud.get_intl_fw_list`` response. Entries are passed through."""

    err_code: int | None = None
    fw_list: list[dict[str, Any]] | None = None


@dataclass
class CloudResponse(ActionResult):
    """The ``cnCloud`` block of a response."""

    get_info: CloudInfo | None = None
    get_intl_fw_list: FirmwareList | None = None
    set_server_url: ActionResult | None = None
    bind: ActionResult | None = None
    unbind: ActionResult | None = None
