"""Device control commands.

Every operation a device supports is built by one of the constructors below
and rendered into the same three-field body the command endpoint expects::

    {"command": "setPosition", "parameter": "1,ff,80", "commandType": "command"}

Arguments are checked when the command is built, so ``Command.render()`` never
fails.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum

from .const import PASSCODE_DISPOSABLE, PASSCODE_TIME_LIMIT
from .exceptions import SwitchBotInvalidArgumentError

COMMAND_TYPE_COMMAND = "command"
COMMAND_TYPE_CUSTOMIZE = "customize"
DEFAULT_PARAMETER = "default"

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 12


@dataclass(frozen=True, slots=True)
class Command:
    command: str
    parameter: str = DEFAULT_PARAMETER
    command_type: str = COMMAND_TYPE_COMMAND

    def render(self) -> dict[str, str]:
        return {
            "command": self.command,
            "parameter": self.parameter,
            "commandType": self.command_type,
        }


def _simple(command: str) -> Command:
    return Command(command)


class SetPositionMode(IntEnum):
    DEFAULT = 0
    PERFORMANCE = 1
    SILENT = 2


class HumidifierMode(IntEnum):
    # any int 0-100 is also accepted by set_mode()
    AUTO = -1
    LOW = 101
    MID = 102
    HIGH = 103


class SmartFanMode(IntEnum):
    STANDARD = 1
    NATURAL = 2


class VacuumPowerLevel(IntEnum):
    QUIET = 0
    STANDARD = 1
    STRONG = 2
    MAX = 3


class ACMode(IntEnum):
    AUTO = 1
    COOL = 2
    DRY = 3
    FAN = 4
    HEAT = 5


class ACFanSpeed(IntEnum):
    AUTO = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4


class BlindTiltDirection(str, Enum):
    UP = "up"
    DOWN = "down"


# ---------- Common ----------
def turn_on() -> Command:
    """Turn on a Bot, Plug, Humidifier, light... For a Curtain: position 0."""
    return _simple("turnOn")


def turn_off() -> Command:
    """Turn off a Bot, Plug, Humidifier, light... For a Curtain: position 100."""
    return _simple("turnOff")


def toggle() -> Command:
    return _simple("toggle")


# ---------- Bot ----------
def press() -> Command:
    return _simple("press")


# ---------- Curtain ----------
def set_position(index: int, mode: SetPositionMode | int, position: int) -> Command:
    """
    Move a curtain to ``position`` (0 = open, 100 = closed).

    Out of range positions are clamped into 0..100.
    """
    position = max(0, min(100, int(position)))
    if mode in (SetPositionMode.PERFORMANCE, SetPositionMode.SILENT):
        mode_part = str(int(mode))
    else:
        mode_part = "ff"
    return Command("setPosition", f"{int(index)},{mode_part},{position}")


# ---------- Lock ----------
def lock() -> Command:
    return _simple("lock")


def unlock() -> Command:
    return _simple("unlock")


# ---------- Keypad ----------
def _unix(instant: datetime | None) -> int:
    # None and datetime.min (naive or aware) are the zero instant
    if instant is None or instant.replace(tzinfo=None) == datetime.min:
        return 0
    try:
        return int(instant.timestamp())
    except (OverflowError, ValueError, OSError) as e:
        raise SwitchBotInvalidArgumentError(f"instant out of range: {instant!r}") from e


def _is_zero(instant: datetime | None) -> bool:
    return _unix(instant) == 0


def create_key(
    name: str,
    passcode_type: str,
    password: str,
    start: datetime | None = None,
    end: datetime | None = None,
) -> Command:
    """
    Create a passcode on a Keypad.

    The created key is only reported back through the webhook. ``password``
    must be 6 to 12 characters; time limited and disposable passcodes need
    both ``start`` and ``end``.
    """
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise SwitchBotInvalidArgumentError(
            f"the length of password must be {PASSWORD_MIN_LENGTH} to "
            f"{PASSWORD_MAX_LENGTH} but {len(password)}"
        )

    if passcode_type in (PASSCODE_TIME_LIMIT, PASSCODE_DISPOSABLE) and (
        _is_zero(start) or _is_zero(end)
    ):
        raise SwitchBotInvalidArgumentError(
            f"when passcode type is {passcode_type}, start and end are required "
            "but either/both is zero value"
        )

    params = {
        "name": name,
        "type": passcode_type,
        "password": password,
        "startTime": _unix(start),
        "endTime": _unix(end),
    }
    return Command("createKey", json.dumps(params, separators=(",", ":"), ensure_ascii=False))


def delete_key(key_id: int) -> Command:
    return Command("deleteKey", json.dumps({"id": int(key_id)}))


# ---------- Humidifier ----------
def set_mode(mode: HumidifierMode | int) -> Command:
    """Set a humidifier mode: one of HumidifierMode or an exact level 0-100."""
    mode = int(mode)
    if mode == HumidifierMode.AUTO:
        return Command("setMode", "auto")
    if not (0 <= mode <= 100 or mode in (HumidifierMode.LOW, HumidifierMode.MID, HumidifierMode.HIGH)):
        raise SwitchBotInvalidArgumentError(f"invalid humidifier mode {mode}")
    return Command("setMode", str(mode))


# ---------- Smart Fan ----------
def set_all_status(power: str, fan_mode: SmartFanMode | int, fan_speed: int, shake_range: int) -> Command:
    return Command(
        "setAllStatus",
        f"{power.lower()},{int(fan_mode)},{int(fan_speed)},{int(shake_range)}",
    )


# ---------- Lights ----------
def set_brightness(brightness: int) -> Command:
    return Command("setBrightness", str(int(brightness)))


def set_color(r: int, g: int, b: int) -> Command:
    for channel in (r, g, b):
        if not 0 <= int(channel) <= 255:
            raise SwitchBotInvalidArgumentError(f"color channel out of range 0-255: {channel}")
    return Command("setColor", f"{int(r)}:{int(g)}:{int(b)}")


def set_color_temperature(temperature: int) -> Command:
    return Command("setColorTemperature", str(int(temperature)))


# ---------- Robot vacuum ----------
def start() -> Command:
    return _simple("start")


def stop() -> Command:
    return _simple("stop")


def dock() -> Command:
    return _simple("dock")


def pow_level(level: VacuumPowerLevel | int) -> Command:
    return Command("PowLevel", str(int(level)))


# ---------- Blind Tilt ----------
def blind_tilt_set_position(direction: BlindTiltDirection | str, position: int) -> Command:
    direction = BlindTiltDirection(direction)
    return Command("setPosition", f"{direction.value};{int(position)}")


def fully_open() -> Command:
    """Same end state as up;100 or down;100, sent as its own command."""
    return _simple("fullyOpen")


def close_up() -> Command:
    return _simple("closeUp")


def close_down() -> Command:
    return _simple("closeDown")


# ---------- Infrared remotes ----------
def button_push(name: str) -> Command:
    """Trigger a customized button learned by an infrared remote."""
    return Command(name, DEFAULT_PARAMETER, COMMAND_TYPE_CUSTOMIZE)


def ac_set_all(temperature: int, mode: ACMode | int, fan_speed: ACFanSpeed | int, power: str) -> Command:
    return Command(
        "setAll",
        f"{int(temperature)},{int(mode)},{int(fan_speed)},{power.lower()}",
    )


def set_channel(channel: int) -> Command:
    return Command("SetChannel", str(int(channel)))


def volume_add() -> Command:
    return _simple("volumeAdd")


def volume_sub() -> Command:
    return _simple("volumeSub")


def channel_add() -> Command:
    return _simple("channelAdd")


def channel_sub() -> Command:
    return _simple("channelSub")


def set_mute() -> Command:
    return _simple("setMute")


def fast_forward() -> Command:
    return _simple("FastForward")


def rewind() -> Command:
    return _simple("Rewind")


def next_track() -> Command:
    return _simple("Next")


def previous_track() -> Command:
    return _simple("Previous")


def pause() -> Command:
    return _simple("Pause")


def play() -> Command:
    return _simple("Play")


def stop_player() -> Command:
    return _simple("Stop")


def fan_swing() -> Command:
    return _simple("swing")


def fan_timer() -> Command:
    return _simple("timer")


def fan_low_speed() -> Command:
    return _simple("lowSpeed")


def fan_middle_speed() -> Command:
    return _simple("middleSpeed")


def fan_high_speed() -> Command:
    return _simple("highSpeed")


def light_brightness_up() -> Command:
    return _simple("brightnessUp")


def light_brightness_down() -> Command:
    return _simple("brightnessDown")
