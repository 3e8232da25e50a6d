# switchbot_cloud/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .codec import (
    BrightnessValue,
    DeviceVersion,
    read_bool,
    read_brightness,
    read_float,
    read_int,
    read_object,
    read_str,
    read_str_list,
    read_version,
)
from .exceptions import SwitchBotDecodeError


@dataclass(slots=True)
class KeyListItem:
    """A passcode stored on a Smart Lock / Keypad."""

    id: int
    name: str
    type: str  # PASSCODE_* token
    password: str  # encrypted, see iv
    iv: str
    status: str  # PASSCODE_STATUS_* token
    create_time: int

    @classmethod
    def from_dict(cls, data: Any) -> KeyListItem:
        data = read_object(data, "keyList item")
        return cls(
            id=read_int(data, "id"),
            name=read_str(data, "name"),
            type=read_str(data, "type"),
            password=read_str(data, "password"),
            iv=read_str(data, "iv"),
            status=read_str(data, "status"),
            create_time=read_int(data, "createTime"),
        )


@dataclass(slots=True)
class Device:
    """A physical device from the device list."""

    id: str
    name: str
    type: str  # display type, e.g. "Smart Lock"
    is_enable_cloud_service: bool = False
    hub: str = ""
    curtains: list[str] = field(default_factory=list)
    is_calibrated: bool = False
    is_grouped: bool = False
    is_master: bool = False
    open_direction: str = ""
    group_name: str = ""
    lock_device_ids: list[str] = field(default_factory=list)
    lock_device_id: str = ""
    key_list: list[KeyListItem] = field(default_factory=list)
    version: DeviceVersion = DeviceVersion("")
    blind_tilts: list[str] = field(default_factory=list)
    direction: str = ""
    slide_position: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Device:
        data = read_object(data, "device")
        keys = data.get("keyList")
        if keys is not None and not isinstance(keys, list):
            raise SwitchBotDecodeError("field 'keyList': expected array")
        return cls(
            id=read_str(data, "deviceId"),
            name=read_str(data, "deviceName"),
            type=read_str(data, "deviceType"),
            is_enable_cloud_service=read_bool(data, "enableCloudService"),
            hub=read_str(data, "hubDeviceId"),
            curtains=read_str_list(data, "curtainDevicesIds"),
            is_calibrated=read_bool(data, "calibrate"),
            is_grouped=read_bool(data, "group"),
            is_master=read_bool(data, "master"),
            open_direction=read_str(data, "openDirection"),
            group_name=read_str(data, "groupName"),
            lock_device_ids=read_str_list(data, "lockDeviceIds"),
            lock_device_id=read_str(data, "lockDeviceId"),
            key_list=[KeyListItem.from_dict(k) for k in keys or []],
            version=read_version(data),
            blind_tilts=read_str_list(data, "blindTiltDeviceIds"),
            direction=read_str(data, "direction"),
            slide_position=read_int(data, "slidePosition"),
        )


@dataclass(slots=True)
class InfraredDevice:
    """A virtual infrared remote (TV, air conditioner, ...)."""

    id: str
    name: str
    type: str  # REMOTE_TYPE_* token
    hub: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> InfraredDevice:
        data = read_object(data, "infrared remote")
        return cls(
            id=read_str(data, "deviceId"),
            name=read_str(data, "deviceName"),
            type=read_str(data, "remoteType"),
            hub=read_str(data, "hubDeviceId"),
        )


@dataclass(slots=True)
class DeviceStatus:
    """
    Status of one physical device.

    Every known status field is parsed regardless of ``type``; fields that the
    reporting device does not have keep their zero value. Which of them are
    meaningful is up to the caller, based on ``type``.
    """

    id: str = ""
    type: str = ""
    hub: str = ""
    power: str = ""  # POWER_ON / POWER_OFF
    humidity: int = 0
    temperature: float = 0.0
    nebulization_efficiency: int = 0
    is_auto: bool = False
    is_child_lock: bool = False
    is_sound: bool = False
    is_calibrated: bool = False
    is_grouped: bool = False
    is_moving: bool = False
    slide_position: int = 0
    fan_mode: int = 0
    fan_speed: int = 0
    is_shaking: bool = False
    shake_center: int = 0
    shake_range: int = 0
    is_move_detected: bool = False
    brightness: BrightnessValue | None = None  # None when not reported
    light_level: int = 0
    open_state: str = ""
    color: str = ""  # "r:g:b"
    color_temperature: int = 0
    is_lack_water: bool = False
    voltage: float = 0.0
    weight: float = 0.0
    electricity_of_day: int = 0
    electric_current: float = 0.0
    lock_state: str = ""
    door_state: str = ""
    working_status: str = ""
    online_status: str = ""
    battery: int = 0
    version: DeviceVersion = DeviceVersion("")
    direction: str = ""
    co2: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> DeviceStatus:
        data = read_object(data, "device status")
        return cls(
            id=read_str(data, "deviceId"),
            type=read_str(data, "deviceType"),
            hub=read_str(data, "hubDeviceId"),
            power=read_str(data, "power"),
            humidity=read_int(data, "humidity"),
            temperature=read_float(data, "temperature"),
            nebulization_efficiency=read_int(data, "nebulizationEfficiency"),
            is_auto=read_bool(data, "auto"),
            is_child_lock=read_bool(data, "childLock"),
            is_sound=read_bool(data, "sound"),
            is_calibrated=read_bool(data, "calibrate"),
            is_grouped=read_bool(data, "group"),
            is_moving=read_bool(data, "moving"),
            slide_position=read_int(data, "slidePosition"),
            fan_mode=read_int(data, "mode"),
            fan_speed=read_int(data, "speed"),
            is_shaking=read_bool(data, "shaking"),
            shake_center=read_int(data, "shakeCenter"),
            shake_range=read_int(data, "shakeRange"),
            is_move_detected=read_bool(data, "moveDetected"),
            brightness=read_brightness(data),
            light_level=read_int(data, "lightLevel"),
            open_state=read_str(data, "openState"),
            color=read_str(data, "color"),
            color_temperature=read_int(data, "colorTemperature"),
            is_lack_water=read_bool(data, "lackWater"),
            voltage=read_float(data, "voltage"),
            weight=read_float(data, "weight"),
            electricity_of_day=read_int(data, "electricityOfDay"),
            electric_current=read_float(data, "electricCurrent"),
            lock_state=read_str(data, "lockState"),
            door_state=read_str(data, "doorState"),
            working_status=read_str(data, "workingStatus"),
            online_status=read_str(data, "onlineStatus"),
            battery=read_int(data, "battery"),
            version=read_version(data),
            direction=read_str(data, "direction"),
            co2=read_int(data, "CO2"),
        )


def decode_device_status(body: Any) -> DeviceStatus:
    """Decode the (already unwrapped) body of a device status response."""
    return DeviceStatus.from_dict(body)


@dataclass(slots=True)
class Scene:
    """A manual scene created by the account owner."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> Scene:
        data = read_object(data, "scene")
        return cls(id=read_str(data, "sceneId"), name=read_str(data, "sceneName"))


@dataclass(slots=True)
class WebhookConfig:
    """One entry of a queryDetails webhook response."""

    url: str
    device_list: str = ""
    enable: bool = False
    create_time: int = 0
    last_update_time: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> WebhookConfig:
        data = read_object(data, "webhook config")
        return cls(
            url=read_str(data, "url"),
            device_list=read_str(data, "deviceList"),
            enable=read_bool(data, "enable"),
            create_time=read_int(data, "createTime"),
            last_update_time=read_int(data, "lastUpdateTime"),
        )
