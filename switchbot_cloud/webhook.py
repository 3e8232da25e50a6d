"""Inbound webhook events.

A webhook delivery looks like::

    {"eventType": "changeReport", "eventVersion": "1",
     "context": {"deviceType": "WoPresence", "deviceMac": "...",
                 "timeOfSample": 123456789, ...device specific fields}}

``context.deviceType`` decides which event class the delivery decodes into.
Some tokens share a shape (both robot vacuum models decode into
SweeperEvent, both keypads into KeypadEvent, ...). New device types appear on
the vendor side without notice, so callers should always keep a fallback for
events they do not handle.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from .codec import (
    DeviceVersion,
    read_bool,
    read_float,
    read_int,
    read_object,
    read_str,
    read_version,
)
from .const import (
    LOGGER,
    WEBHOOK_BLIND_TILT,
    WEBHOOK_BOT,
    WEBHOOK_CEILING,
    WEBHOOK_CEILING_PRO,
    WEBHOOK_COLOR_BULB,
    WEBHOOK_CONTACT_SENSOR,
    WEBHOOK_CURTAIN,
    WEBHOOK_CURTAIN_3,
    WEBHOOK_HUB_2,
    WEBHOOK_INDOOR_CAM,
    WEBHOOK_KEYPAD,
    WEBHOOK_KEYPAD_TOUCH,
    WEBHOOK_LOCK,
    WEBHOOK_LOCK_PRO,
    WEBHOOK_METER,
    WEBHOOK_METER_PLUS,
    WEBHOOK_MOTION_SENSOR,
    WEBHOOK_OUTDOOR_METER,
    WEBHOOK_PAN_TILT_CAM,
    WEBHOOK_PLUG_MINI_JP,
    WEBHOOK_PLUG_MINI_US,
    WEBHOOK_STRIP_LIGHT,
    WEBHOOK_SWEEPER,
    WEBHOOK_SWEEPER_PLUS,
)
from .exceptions import SwitchBotDecodeError, SwitchBotUnknownDeviceTypeError

if TYPE_CHECKING:
    from aiohttp import web

Reader = Callable[[dict[str, Any], str], Any]


# ----- Contexts -----
@dataclass(slots=True)
class EventContext:
    device_type: str
    device_mac: str
    time_of_sample: int

    # (attribute, wire key, reader) for the device specific fields
    _WIRE: ClassVar[tuple[tuple[str, str, Reader], ...]] = ()

    @classmethod
    def from_dict(cls, data: Any) -> EventContext:
        data = read_object(data, "context")
        kwargs: dict[str, Any] = {
            "device_type": read_str(data, "deviceType"),
            "device_mac": read_str(data, "deviceMac"),
            "time_of_sample": read_int(data, "timeOfSample"),
        }
        for attr, key, reader in cls._WIRE:
            kwargs[attr] = reader(data, key)
        return cls(**kwargs)


@dataclass(slots=True)
class BotEventContext(EventContext):
    power: str
    battery: int
    device_mode: str  # pressMode / switchMode / customizeMode

    _WIRE = (
        ("power", "power", read_str),
        ("battery", "battery", read_int),
        ("device_mode", "deviceMode", read_str),
    )


@dataclass(slots=True)
class CurtainEventContext(EventContext):
    is_calibrated: bool
    is_grouped: bool
    slide_position: int
    battery: int

    _WIRE = (
        ("is_calibrated", "calibrate", read_bool),
        ("is_grouped", "group", read_bool),
        ("slide_position", "slidePosition", read_int),
        ("battery", "battery", read_int),
    )


@dataclass(slots=True)
class MotionSensorEventContext(EventContext):
    # "DETECTED", or "NOT_DETECTED" once nothing moved for a while
    detection_state: str

    _WIRE = (("detection_state", "detectionState", read_str),)


@dataclass(slots=True)
class ContactSensorEventContext(EventContext):
    detection_state: str
    door_mode: str  # "IN_DOOR" / "OUT_DOOR" when the enter/exit mode triggers
    brightness: str  # ambient token: "bright" / "dim"
    open_state: str  # "open" / "close" / "timeOutNotClose"

    _WIRE = (
        ("detection_state", "detectionState", read_str),
        ("door_mode", "doorMode", read_str),
        ("brightness", "brightness", read_str),
        ("open_state", "openState", read_str),
    )


@dataclass(slots=True)
class MeterEventContext(EventContext):
    temperature: float
    scale: str  # "CELSIUS" / "FAHRENHEIT"
    humidity: int

    _WIRE = (
        ("temperature", "temperature", read_float),
        ("scale", "scale", read_str),
        ("humidity", "humidity", read_int),
    )


@dataclass(slots=True)
class MeterPlusEventContext(MeterEventContext):
    pass


@dataclass(slots=True)
class OutdoorMeterEventContext(MeterEventContext):
    pass


@dataclass(slots=True)
class Hub2EventContext(MeterEventContext):
    light_level: int

    _WIRE = MeterEventContext._WIRE + (("light_level", "lightLevel", read_int),)


@dataclass(slots=True)
class LockEventContext(EventContext):
    # "LOCKED", "UNLOCKED", or "JAMMED" when the motor got stuck
    lock_state: str

    _WIRE = (("lock_state", "lockState", read_str),)


@dataclass(slots=True)
class KeypadEventContext(EventContext):
    event_name: str  # createKey / deleteKey
    command_id: str
    result: str  # success / failed / timeout

    _WIRE = (
        ("event_name", "eventName", read_str),
        ("command_id", "commandId", read_str),
        ("result", "result", read_str),
    )


@dataclass(slots=True)
class IndoorCamEventContext(EventContext):
    detection_state: str

    _WIRE = (("detection_state", "detectionState", read_str),)


@dataclass(slots=True)
class PanTiltCamEventContext(EventContext):
    detection_state: str

    _WIRE = (("detection_state", "detectionState", read_str),)


@dataclass(slots=True)
class ColorBulbEventContext(EventContext):
    power_state: str
    brightness: int  # 1-100
    color: str  # "r:g:b"
    color_temperature: int  # 2700-6500

    _WIRE = (
        ("power_state", "powerState", read_str),
        ("brightness", "brightness", read_int),
        ("color", "color", read_str),
        ("color_temperature", "colorTemperature", read_int),
    )


@dataclass(slots=True)
class StripLightEventContext(EventContext):
    power_state: str
    brightness: int
    color: str

    _WIRE = (
        ("power_state", "powerState", read_str),
        ("brightness", "brightness", read_int),
        ("color", "color", read_str),
    )


@dataclass(slots=True)
class PlugMiniUSEventContext(EventContext):
    power_state: str

    _WIRE = (("power_state", "powerState", read_str),)


@dataclass(slots=True)
class PlugMiniJPEventContext(EventContext):
    power_state: str

    _WIRE = (("power_state", "powerState", read_str),)


@dataclass(slots=True)
class SweeperEventContext(EventContext):
    working_status: str  # CLEANER_* token
    online_status: str
    battery: int

    _WIRE = (
        ("working_status", "workingStatus", read_str),
        ("online_status", "onlineStatus", read_str),
        ("battery", "battery", read_int),
    )


@dataclass(slots=True)
class CeilingEventContext(EventContext):
    power_state: str
    brightness: int
    color_temperature: int

    _WIRE = (
        ("power_state", "powerState", read_str),
        ("brightness", "brightness", read_int),
        ("color_temperature", "colorTemperature", read_int),
    )


@dataclass(slots=True)
class BlindTiltEventContext(EventContext):
    version: DeviceVersion
    is_calibrated: bool
    is_grouped: bool
    direction: str
    slide_position: int
    battery: int

    _WIRE = (
        ("version", "version", read_version),
        ("is_calibrated", "calibrate", read_bool),
        ("is_grouped", "group", read_bool),
        ("direction", "direction", read_str),
        ("slide_position", "slidePosition", read_int),
        ("battery", "battery", read_int),
    )


# ----- Events -----
@dataclass(slots=True)
class WebhookEvent:
    event_type: str
    event_version: str

    _CONTEXT: ClassVar[type[EventContext]] = EventContext

    @classmethod
    def from_dict(cls, data: Any) -> WebhookEvent:
        data = read_object(data, "webhook event")
        return cls(
            event_type=read_str(data, "eventType"),
            event_version=read_str(data, "eventVersion"),
            context=cls._CONTEXT.from_dict(data.get("context")),
        )


@dataclass(slots=True)
class BotEvent(WebhookEvent):
    context: BotEventContext
    _CONTEXT = BotEventContext


@dataclass(slots=True)
class CurtainEvent(WebhookEvent):
    context: CurtainEventContext
    _CONTEXT = CurtainEventContext


@dataclass(slots=True)
class MotionSensorEvent(WebhookEvent):
    context: MotionSensorEventContext
    _CONTEXT = MotionSensorEventContext


@dataclass(slots=True)
class ContactSensorEvent(WebhookEvent):
    context: ContactSensorEventContext
    _CONTEXT = ContactSensorEventContext


@dataclass(slots=True)
class MeterEvent(WebhookEvent):
    context: MeterEventContext
    _CONTEXT = MeterEventContext


@dataclass(slots=True)
class MeterPlusEvent(WebhookEvent):
    context: MeterPlusEventContext
    _CONTEXT = MeterPlusEventContext


@dataclass(slots=True)
class OutdoorMeterEvent(WebhookEvent):
    context: OutdoorMeterEventContext
    _CONTEXT = OutdoorMeterEventContext


@dataclass(slots=True)
class Hub2Event(WebhookEvent):
    context: Hub2EventContext
    _CONTEXT = Hub2EventContext


@dataclass(slots=True)
class LockEvent(WebhookEvent):
    context: LockEventContext
    _CONTEXT = LockEventContext


@dataclass(slots=True)
class KeypadEvent(WebhookEvent):
    context: KeypadEventContext
    _CONTEXT = KeypadEventContext


@dataclass(slots=True)
class IndoorCamEvent(WebhookEvent):
    context: IndoorCamEventContext
    _CONTEXT = IndoorCamEventContext


@dataclass(slots=True)
class PanTiltCamEvent(WebhookEvent):
    context: PanTiltCamEventContext
    _CONTEXT = PanTiltCamEventContext


@dataclass(slots=True)
class ColorBulbEvent(WebhookEvent):
    context: ColorBulbEventContext
    _CONTEXT = ColorBulbEventContext


@dataclass(slots=True)
class StripLightEvent(WebhookEvent):
    context: StripLightEventContext
    _CONTEXT = StripLightEventContext


@dataclass(slots=True)
class PlugMiniUSEvent(WebhookEvent):
    context: PlugMiniUSEventContext
    _CONTEXT = PlugMiniUSEventContext


@dataclass(slots=True)
class PlugMiniJPEvent(WebhookEvent):
    context: PlugMiniJPEventContext
    _CONTEXT = PlugMiniJPEventContext


@dataclass(slots=True)
class SweeperEvent(WebhookEvent):
    context: SweeperEventContext
    _CONTEXT = SweeperEventContext


@dataclass(slots=True)
class CeilingEvent(WebhookEvent):
    context: CeilingEventContext
    _CONTEXT = CeilingEventContext


@dataclass(slots=True)
class BlindTiltEvent(WebhookEvent):
    context: BlindTiltEventContext
    _CONTEXT = BlindTiltEventContext


EVENT_TYPES: dict[str, type[WebhookEvent]] = {
    WEBHOOK_BOT: BotEvent,
    WEBHOOK_CURTAIN: CurtainEvent,
    WEBHOOK_CURTAIN_3: CurtainEvent,
    WEBHOOK_MOTION_SENSOR: MotionSensorEvent,
    WEBHOOK_CONTACT_SENSOR: ContactSensorEvent,
    WEBHOOK_METER: MeterEvent,
    WEBHOOK_METER_PLUS: MeterPlusEvent,
    WEBHOOK_OUTDOOR_METER: OutdoorMeterEvent,
    WEBHOOK_HUB_2: Hub2Event,
    WEBHOOK_LOCK: LockEvent,
    WEBHOOK_LOCK_PRO: LockEvent,
    WEBHOOK_KEYPAD: KeypadEvent,
    WEBHOOK_KEYPAD_TOUCH: KeypadEvent,
    WEBHOOK_INDOOR_CAM: IndoorCamEvent,
    WEBHOOK_PAN_TILT_CAM: PanTiltCamEvent,
    WEBHOOK_COLOR_BULB: ColorBulbEvent,
    WEBHOOK_STRIP_LIGHT: StripLightEvent,
    WEBHOOK_PLUG_MINI_US: PlugMiniUSEvent,
    WEBHOOK_PLUG_MINI_JP: PlugMiniJPEvent,
    WEBHOOK_SWEEPER: SweeperEvent,
    WEBHOOK_SWEEPER_PLUS: SweeperEvent,
    WEBHOOK_CEILING: CeilingEvent,
    WEBHOOK_CEILING_PRO: CeilingEvent,
    WEBHOOK_BLIND_TILT: BlindTiltEvent,
}


# ----- Router -----
def _load(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise SwitchBotDecodeError(f"webhook body is not valid JSON: {e}") from e


def peek_device_type(payload: Any) -> str:
    """Return ``context.deviceType`` without decoding anything else."""
    payload = read_object(payload, "webhook event")
    context = read_object(payload.get("context"), "context")
    token = context.get("deviceType")
    if not isinstance(token, str):
        raise SwitchBotDecodeError("context.deviceType is missing or not a string")
    return token


def parse_webhook_body(raw: bytes | str) -> WebhookEvent:
    """Decode a webhook delivery into the event class of its device type."""
    payload = _load(raw)
    token = peek_device_type(payload)

    event_cls = EVENT_TYPES.get(token)
    if event_cls is None:
        LOGGER.warning("Webhook: unknown device type %r", token)
        raise SwitchBotUnknownDeviceTypeError(token)

    return event_cls.from_dict(payload)


async def parse_webhook_request(request: web.Request) -> WebhookEvent:
    """
    Decode an aiohttp request carrying a webhook delivery.

    aiohttp keeps the body it read, so handlers can still call
    ``request.read()``/``request.json()`` afterwards.
    """
    raw = await request.read()
    return parse_webhook_body(raw)
