"""Tests for the optional-field response models."""

import pytest

from tplink_plug.models import (
    DeviceType,
    PlugResponse,
    Realtime,
    SchemaError,
    SysInfo,
)

HS110_SYSINFO = {
    "err_code": 0,
    "sw_ver": "1.2.5 Build 171213 Rel.101523",
    "hw_ver": "1.0",
    "type": "IOT.SMARTPLUGSWITCH",
    "model": "HS110(EU)",
    "mac": "50:C7:BF:00:00:01",
    "deviceId": "8006DEADBEEF",
    "hwId": "45E29DA8382494D2E82688B52A0B2EB5",
    "fwId": "00000000000000000000000000000000",
    "oemId": "3D341ECE302C0642C99E31CE2430544B",
    "alias": "Kitchen",
    "dev_name": "Wi-Fi Smart Plug With Energy Monitoring",
    "icon_hash": "",
    "relay_state": 1,
    "on_time": 3600,
    "active_mode": "schedule",
    "feature": "TIM:ENE",
    "updating": 0,
    "rssi": -61,
    "led_off": 0,
    "latitude": 52.5,
    "longitude": 13.4,
}


def test_sysinfo_full():
    """A complete sysinfo block maps wire names to attributes."""
    info = SysInfo.from_dict(HS110_SYSINFO)
    assert info.model == "HS110(EU)"
    assert info.device_id == "8006DEADBEEF"
    assert info.hw_type == "IOT.SMARTPLUGSWITCH"
    assert info.rssi == -61
    assert info.is_on is True
    assert info.device_type is DeviceType.PLUG
    assert info.location == (52.5, 13.4)


def test_sysinfo_empty():
    """An empty block decodes with every field unset."""
    info = SysInfo.from_dict({})
    assert info.alias is None
    assert info.relay_state is None
    assert info.is_on is None
    assert info.location is None
    assert info.device_type is DeviceType.UNKNOWN


def test_sysinfo_null_fields_are_unset():
    """Explicit nulls decode the same as missing keys."""
    info = SysInfo.from_dict({"alias": None, "rssi": None})
    assert info.alias is None
    assert info.rssi is None


def test_sysinfo_integer_coordinates():
    """Newer firmware reports scaled integer coordinates."""
    info = SysInfo.from_dict({"latitude_i": 525000, "longitude_i": 134000})
    assert info.location == (52.5, 13.4)


def test_device_type_bulb_and_strip():
    """Bulbs report mic_type; strips carry children."""
    bulb = SysInfo.from_dict({"mic_type": "IOT.SMARTBULB"})
    assert bulb.device_type is DeviceType.BULB

    strip = SysInfo.from_dict({
        "type": "IOT.SMARTPLUGSWITCH",
        "children": [{"id": "00", "state": 1, "alias": "Lamp"}],
    })
    assert strip.device_type is DeviceType.STRIP
    assert strip.children[0].alias == "Lamp"


def test_sysinfo_to_dict_uses_wire_names():
    """to_dict emits only present fields under their JSON keys."""
    info = SysInfo.from_dict({"deviceId": "X", "alias": "A"})
    assert info.to_dict() == {"deviceId": "X", "alias": "A"}


def test_unknown_keys_ignored():
    """Fields the model does not know about are not an error."""
    info = SysInfo.from_dict({"alias": "A", "ntc_state": 0, "next_action": {"type": -1}})
    assert info.alias == "A"


def test_wrong_type_is_schema_error():
    """A known field with the wrong JSON type is rejected."""
    with pytest.raises(SchemaError) as excinfo:
        SysInfo.from_dict({"relay_state": "on"})
    assert "relay_state" in str(excinfo.value)


def test_bool_is_not_an_integer():
    with pytest.raises(SchemaError):
        SysInfo.from_dict({"relay_state": True})


def test_integral_float_accepted_for_int():
    assert SysInfo.from_dict({"rssi": -60.0}).rssi == -60


def test_int_accepted_for_float():
    assert SysInfo.from_dict({"latitude": 52}).latitude == 52.0


def test_nested_block_must_be_object():
    with pytest.raises(SchemaError):
        PlugResponse.from_dict({"system": {"get_sysinfo": [1, 2]}})


def test_list_field_must_be_list():
    with pytest.raises(SchemaError):
        PlugResponse.from_dict({"emeter": {"get_daystat": {"day_list": {}}}})


def test_from_dict_requires_object():
    with pytest.raises(SchemaError):
        PlugResponse.from_dict([1, 2, 3])
    with pytest.raises(SchemaError):
        SysInfo.from_dict("nope")


def test_realtime_legacy_units():
    """Legacy firmware reports decimal base units."""
    rt = Realtime.from_dict({"current": 0.5, "voltage": 230.1, "power": 115.0, "total": 1.25})
    assert rt.current_a == 0.5
    assert rt.voltage_v == 230.1
    assert rt.power_w == 115.0
    assert rt.total_kwh == 1.25


def test_realtime_milli_units():
    """Newer firmware reports milli-unit integers."""
    rt = Realtime.from_dict({
        "current_ma": 500, "voltage_mv": 230100, "power_mw": 115000,
        "total_wh": 1250, "err_code": 0,
    })
    assert rt.current_a == 0.5
    assert rt.voltage_v == 230.1
    assert rt.power_w == 115.0
    assert rt.total_kwh == 1.25
    assert rt.summary() == "V = 230.1 V, I = 0.5 A, P = 115.0 W"


def test_realtime_empty():
    """Missing readings stay unset rather than defaulting to zero."""
    rt = Realtime.from_dict({})
    assert rt.current_a is None
    assert rt.voltage_v is None
    assert rt.summary() == "V = None V, I = None A, P = None W"


def test_response_without_emeter_fields():
    """A reply with no energy-meter data still decodes."""
    response = PlugResponse.from_dict({"emeter": {"get_realtime": {}}})
    rt = response.emeter.get_realtime
    assert rt.current is None
    assert rt.current_ma is None
    assert rt.voltage is None
    assert rt.voltage_mv is None
    assert rt.power is None
    assert rt.power_mw is None
    assert rt.total is None
    assert rt.total_wh is None
    assert rt.err_code is None


def test_response_module_not_supported():
    """Devices answer unsupported modules with a module-level error."""
    response = PlugResponse.from_dict(
        {"emeter": {"err_code": -1, "err_msg": "module not support"}}
    )
    assert response.emeter.err_code == -1
    assert response.emeter.err_msg == "module not support"
    assert response.emeter.ok is False
    assert response.emeter.get_realtime is None


def test_response_keeps_raw_document():
    raw = {"system": {"set_relay_state": {"err_code": 0}}, "extra": {"a": 1}}
    response = PlugResponse.from_dict(raw)
    assert response.system.set_relay_state.ok
    assert response.raw == raw
    assert response.to_dict() == raw


def test_response_top_level_raw_key_is_unknown():
    """A device key named "raw" is ignored like any other unknown key."""
    response = PlugResponse.from_dict({"raw": 5, "system": {}})
    assert response.system is not None
    assert response.raw == {"raw": 5, "system": {}}

    nested = {"raw": {"system": {}}}
    assert PlugResponse.from_dict(nested).raw == nested


def test_response_cloud_block_uses_wire_name():
    response = PlugResponse.from_dict({
        "cnCloud": {"get_info": {
            "username": "me@example.com", "server": "devs.tplinkcloud.com",
            "binded": 1, "cld_connection": 1, "illegalType": 0, "fwDlPage": "",
        }}
    })
    info = response.cloud.get_info
    assert info.server == "devs.tplinkcloud.com"
    assert info.illegal_type == 0
    assert info.is_bound is True


def test_response_time_block():
    response = PlugResponse.from_dict({
        "time": {"get_time": {
            "year": 2024, "month": 1, "mday": 2, "hour": 3, "min": 4, "sec": 5,
            "err_code": 0,
        }}
    })
    clock = response.time.get_time
    assert clock.minute == 4
    assert clock.to_datetime().isoformat() == "2024-01-02T03:04:05"


def test_device_time_partial():
    response = PlugResponse.from_dict({"time": {"get_time": {"year": 2024}}})
    assert response.time.get_time.to_datetime() is None


def test_device_time_impossible_date():
    """An unset clock reporting zeroes has no datetime."""
    response = PlugResponse.from_dict({"time": {"get_time": {
        "year": 2024, "month": 0, "mday": 0, "hour": 0, "min": 0, "sec": 0,
    }}})
    assert response.time.get_time.month == 0
    assert response.time.get_time.to_datetime() is None


def test_response_daystat_list():
    response = PlugResponse.from_dict({
        "emeter": {"get_daystat": {
            "day_list": [
                {"year": 2024, "month": 5, "day": 1, "energy": 0.4},
                {"year": 2024, "month": 5, "day": 2, "energy_wh": 350},
            ],
            "err_code": 0,
        }}
    })
    days = response.emeter.get_daystat.day_list
    assert [d.day for d in days] == [1, 2]
    assert days[0].energy_kwh == 0.4
    assert days[1].energy_kwh == 0.35


def test_response_scaninfo():
    response = PlugResponse.from_dict({
        "netif": {"get_scaninfo": {"ap_list": [
            {"ssid": "home", "key_type": 3},
            {"ssid": "guest", "key_type": 0},
        ], "err_code": 0}}
    })
    aps = response.netif.get_scaninfo.ap_list
    assert [ap.ssid for ap in aps] == ["home", "guest"]


def test_firmware_list_passes_entries_through():
    response = PlugResponse.from_dict({
        "cnCloud": {"get_intl_fw_list": {"fw_list": [{"fwUrl": "http://x", "fwType": 1}]}}
    })
    assert response.cloud.get_intl_fw_list.fw_list == [{"fwUrl": "http://x", "fwType": 1}]
