from __future__ import annotations

import pytest

from switchbot_cloud.codec import BrightnessValue
from switchbot_cloud.const import DEVICE_TYPE_CURTAIN, DEVICE_TYPE_METER
from switchbot_cloud.exceptions import SwitchBotDecodeError, SwitchBotWrongVariantError
from switchbot_cloud.models import (
    Device,
    DeviceStatus,
    InfraredDevice,
    KeyListItem,
    decode_device_status,
)


def test_meter_status() -> None:
    got = decode_device_status(
        {
            "deviceId": "C271111EC0AB",
            "deviceType": "Meter",
            "hubDeviceId": "FA7310762361",
            "humidity": 52,
            "temperature": 26.1,
        }
    )
    assert got == DeviceStatus(
        id="C271111EC0AB",
        type=DEVICE_TYPE_METER,
        hub="FA7310762361",
        humidity=52,
        temperature=26.1,
    )


def test_curtain_status_leaves_unrelated_fields_zero() -> None:
    got = decode_device_status(
        {
            "deviceId": "E2F6032048AB",
            "deviceType": "Curtain",
            "hubDeviceId": "FA7310762361",
            "calibrate": True,
            "group": False,
            "moving": False,
            "slidePosition": 0,
        }
    )
    assert got.type == DEVICE_TYPE_CURTAIN
    assert got.is_calibrated is True
    assert got.slide_position == 0
    assert got.humidity == 0
    assert got.power == ""
    assert got.brightness is None
    assert got.version == ""


@pytest.mark.parametrize(
    "body, numeric, ambient",
    [
        ({"deviceType": "Color Bulb", "brightness": 100}, 100, None),
        ({"deviceType": "Motion Sensor", "brightness": "bright"}, None, "bright"),
        ({"deviceType": "Contact Sensor", "brightness": "dim"}, None, "dim"),
    ],
)
def test_status_brightness_variants(body, numeric, ambient) -> None:
    brightness = decode_device_status(body).brightness
    assert isinstance(brightness, BrightnessValue)

    if numeric is not None:
        assert brightness.as_numeric() == numeric
        with pytest.raises(SwitchBotWrongVariantError):
            brightness.as_ambient()
    else:
        assert brightness.as_ambient() == ambient
        with pytest.raises(SwitchBotWrongVariantError):
            brightness.as_numeric()


@pytest.mark.parametrize("version", [3, "3"])
def test_status_version_is_normalized(version) -> None:
    assert decode_device_status({"deviceType": "Bot", "version": version}).version == "3"


def test_status_is_not_branching_on_device_type() -> None:
    # a meter reporting a lock field still gets it parsed
    got = decode_device_status({"deviceType": "Meter", "lockState": "locked", "CO2": 600})
    assert got.lock_state == "locked"
    assert got.co2 == 600


@pytest.mark.parametrize(
    "body",
    [
        {"deviceType": "Meter", "humidity": "52"},
        {"deviceType": "Bot", "power": True},
        {"deviceType": "Color Bulb", "brightness": [100]},
        {"deviceType": "Bot", "version": {"major": 1}},
        {"deviceType": 5},
    ],
)
def test_status_wrong_field_type(body) -> None:
    with pytest.raises(SwitchBotDecodeError):
        decode_device_status(body)


def test_status_body_must_be_an_object() -> None:
    with pytest.raises(SwitchBotDecodeError):
        DeviceStatus.from_dict(["not", "an", "object"])


def test_device_with_key_list() -> None:
    got = Device.from_dict(
        {
            "deviceId": "F7538E1ABCEB",
            "deviceName": "Front Keypad",
            "deviceType": "KeyPad",
            "enableCloudService": True,
            "hubDeviceId": "000000000000",
            "lockDeviceId": "CA1BDE2F3A4B",
            "keyList": [
                {
                    "id": 11,
                    "name": "Guest Code",
                    "type": "timeLimit",
                    "password": "ZmFrZQ==",
                    "iv": "aXY=",
                    "status": "normal",
                    "createTime": 1664640056,
                }
            ],
            "version": 12,
        }
    )
    assert got.lock_device_id == "CA1BDE2F3A4B"
    assert got.version == "12"
    assert got.key_list == [
        KeyListItem(
            id=11,
            name="Guest Code",
            type="timeLimit",
            password="ZmFrZQ==",
            iv="aXY=",
            status="normal",
            create_time=1664640056,
        )
    ]


def test_device_curtain_group() -> None:
    got = Device.from_dict(
        {
            "deviceId": "E2F6032048AB",
            "deviceName": "Curtain",
            "deviceType": "Curtain",
            "curtainDevicesIds": ["E2F6032048AB", "E2F6032048AC"],
            "group": True,
            "master": True,
            "openDirection": "left",
        }
    )
    assert got.curtains == ["E2F6032048AB", "E2F6032048AC"]
    assert got.is_grouped and got.is_master
    assert got.key_list == []


def test_infrared_device() -> None:
    got = InfraredDevice.from_dict(
        {
            "deviceId": "02-202008110034-13",
            "deviceName": "Living Room TV",
            "remoteType": "TV",
            "hubDeviceId": "FA7310762361",
        }
    )
    assert got == InfraredDevice(
        id="02-202008110034-13", name="Living Room TV", type="TV", hub="FA7310762361"
    )
