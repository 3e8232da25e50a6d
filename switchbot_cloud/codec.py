"""Decoders for wire fields whose JSON type is not fixed.

The vendor API reports some fields with a JSON type that depends on the device
or firmware: ``version`` is an integer for some devices and a string for
others, and ``brightness`` is an integer 1-100 for lights but a qualitative
token ("bright"/"dim") for sensors. Each of those fields is resolved exactly
once, here, into a value with a single well-known Python type.

The ``read_*`` helpers apply the same rule to ordinary fields: a missing (or
``null``) key yields the zero value, a key present with the wrong JSON type
raises :class:`SwitchBotDecodeError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from .exceptions import (
    SwitchBotDecodeError,
    SwitchBotInvalidArgumentError,
    SwitchBotWrongVariantError,
)

_NUMERIC_BRIGHTNESS_DEVICES = "color bulb, strip light and ceiling light devices"
_AMBIENT_BRIGHTNESS_DEVICES = "motion sensor and contact sensor devices"


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _is_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a number here
    return isinstance(value, int) and not isinstance(value, bool)


# ---------- Device version ----------
class DeviceVersion(str):
    """Firmware/API version normalized to its string form."""

    __slots__ = ()


def decode_device_version(raw: Any) -> DeviceVersion:
    if _is_int(raw):
        return DeviceVersion(str(raw))
    if isinstance(raw, str):
        return DeviceVersion(raw)
    raise SwitchBotDecodeError(
        f"device version must be an integer or a string, got {_json_type(raw)}"
    )


# ---------- Brightness ----------
@dataclass(frozen=True, slots=True)
class BrightnessValue:
    """Either a numeric brightness (lights) or an ambient token (sensors)."""

    kind: Literal["numeric", "ambient"]
    value: int | str

    def __post_init__(self) -> None:
        if self.kind == "numeric" and _is_int(self.value):
            return
        if self.kind == "ambient" and isinstance(self.value, str):
            return
        raise SwitchBotInvalidArgumentError(
            f"brightness {self.kind!r} cannot hold a {_json_type(self.value)} value"
        )

    @classmethod
    def numeric(cls, value: int) -> BrightnessValue:
        return cls("numeric", value)

    @classmethod
    def ambient(cls, token: str) -> BrightnessValue:
        return cls("ambient", token)

    @property
    def is_numeric(self) -> bool:
        return self.kind == "numeric"

    @property
    def is_ambient(self) -> bool:
        return self.kind == "ambient"

    def as_numeric(self) -> int:
        if self.kind != "numeric":
            raise SwitchBotWrongVariantError(
                f"integer brightness value is only available for {_NUMERIC_BRIGHTNESS_DEVICES}"
            )
        return self.value  # type: ignore[return-value]

    def as_ambient(self) -> str:
        if self.kind != "ambient":
            raise SwitchBotWrongVariantError(
                f"ambient brightness value is only available for {_AMBIENT_BRIGHTNESS_DEVICES}"
            )
        return self.value  # type: ignore[return-value]


def decode_brightness(raw: Any) -> BrightnessValue:
    # try the integer shape first, then the string shape
    if _is_int(raw):
        return BrightnessValue.numeric(raw)
    if isinstance(raw, str):
        return BrightnessValue.ambient(raw)
    raise SwitchBotDecodeError(
        f"brightness must be an integer or a string, got {_json_type(raw)}"
    )


# ---------- Typed field readers ----------
def _mismatch(key: str, expected: str, value: Any) -> SwitchBotDecodeError:
    return SwitchBotDecodeError(
        f"field {key!r}: expected {expected}, got {_json_type(value)}"
    )


def read_object(data: Any, what: str = "body") -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SwitchBotDecodeError(f"{what}: expected object, got {_json_type(data)}")
    return data


def read_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _mismatch(key, "string", value)
    return value


def read_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if not _is_int(value):
        raise _mismatch(key, "integer", value)
    return value


def read_float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(key, "number", value)
    return float(value)


def read_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch(key, "boolean", value)
    return value


def read_str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _mismatch(key, "array", value)
    for item in value:
        if not isinstance(item, str):
            raise _mismatch(f"{key}[]", "string", item)
    return list(value)


def read_version(data: dict[str, Any], key: str = "version") -> DeviceVersion:
    value = data.get(key)
    if value is None:
        return DeviceVersion("")
    try:
        return decode_device_version(value)
    except SwitchBotDecodeError as e:
        raise SwitchBotDecodeError(f"field {key!r}: {e}") from e


def read_brightness(data: dict[str, Any], key: str = "brightness") -> BrightnessValue | None:
    value = data.get(key)
    if value is None:
        return None
    try:
        return decode_brightness(value)
    except SwitchBotDecodeError as e:
        raise SwitchBotDecodeError(f"field {key!r}: {e}") from e
