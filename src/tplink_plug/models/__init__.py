"""Typed response blocks for each command family."""

from .base import ActionResult, ResponseModel, SchemaError
from .system import (
    ChildInfo,
    DeviceIcon,
    DeviceType,
    DownloadState,
    SysInfo,
    SystemResponse,
)
from .emeter import (
    DayStat,
    DayStatItem,
    EmeterResponse,
    MonthStat,
    MonthStatItem,
    Realtime,
    VGainIGain,
)
from .netif import AccessPoint, NetifResponse, ScanInfo
from .cloud import CloudInfo, CloudResponse, FirmwareList
from .clock import DeviceTime, TimeResponse, Timezone
from .response import PlugResponse
