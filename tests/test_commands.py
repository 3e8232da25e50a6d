from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from switchbot_cloud import commands
from switchbot_cloud.commands import (
    ACFanSpeed,
    ACMode,
    BlindTiltDirection,
    Command,
    HumidifierMode,
    SetPositionMode,
    SmartFanMode,
    VacuumPowerLevel,
)
from switchbot_cloud.const import (
    PASSCODE_DISPOSABLE,
    PASSCODE_PERMANENT,
    PASSCODE_TIME_LIMIT,
    POWER_ON,
)
from switchbot_cloud.exceptions import SwitchBotInvalidArgumentError

START = datetime(2022, 10, 1, 16, 0, 56, tzinfo=timezone.utc)
END = datetime(2022, 10, 9, 16, 3, 52, tzinfo=timezone.utc)


def test_render_envelope() -> None:
    assert commands.turn_on().render() == {
        "command": "turnOn",
        "parameter": "default",
        "commandType": "command",
    }


@pytest.mark.parametrize(
    "position, expected",
    [(150, "1,ff,100"), (-5, "1,ff,0"), (0, "1,ff,0"), (100, "1,ff,100"), (42, "1,ff,42")],
)
def test_set_position_clamps(position: int, expected: str) -> None:
    cmd = commands.set_position(1, SetPositionMode.DEFAULT, position)
    assert cmd.command == "setPosition"
    assert cmd.parameter == expected


@pytest.mark.parametrize(
    "mode, expected",
    [(SetPositionMode.PERFORMANCE, "0,1,30"), (SetPositionMode.SILENT, "0,2,30"), (7, "0,ff,30")],
)
def test_set_position_modes(mode, expected: str) -> None:
    assert commands.set_position(0, mode, 30).parameter == expected


def test_create_key_time_limit() -> None:
    cmd = commands.create_key("Guest Code", PASSCODE_TIME_LIMIT, "12345678", START, END)
    assert cmd.command == "createKey"
    assert cmd.parameter == (
        '{"name":"Guest Code","type":"timeLimit","password":"12345678",'
        '"startTime":1664640056,"endTime":1665331432}'
    )


@pytest.mark.parametrize("password", ["123456", "123456789012"])
def test_create_key_password_length_bounds(password: str) -> None:
    cmd = commands.create_key("Code", PASSCODE_PERMANENT, password)
    params = json.loads(cmd.parameter)
    assert params["password"] == password
    assert params["startTime"] == 0
    assert params["endTime"] == 0


@pytest.mark.parametrize("password", ["12345", "1234567890123", ""])
def test_create_key_rejects_password_length(password: str) -> None:
    with pytest.raises(SwitchBotInvalidArgumentError):
        commands.create_key("Code", PASSCODE_PERMANENT, password)


@pytest.mark.parametrize("passcode_type", [PASSCODE_TIME_LIMIT, PASSCODE_DISPOSABLE])
@pytest.mark.parametrize(
    "start, end",
    [
        (None, END),
        (START, None),
        (None, None),
        (datetime(1970, 1, 1, tzinfo=timezone.utc), END),
        (datetime.min, END),
        (datetime.min.replace(tzinfo=timezone.utc), END),
        (START, datetime.min),
    ],
)
def test_create_key_requires_validity_window(passcode_type: str, start, end) -> None:
    with pytest.raises(SwitchBotInvalidArgumentError):
        commands.create_key("Code", passcode_type, "123456", start, end)


def test_create_key_min_datetime_encodes_as_zero() -> None:
    cmd = commands.create_key("Code", PASSCODE_PERMANENT, "123456", datetime.min, datetime.min)
    params = json.loads(cmd.parameter)
    assert (params["startTime"], params["endTime"]) == (0, 0)


def test_delete_key() -> None:
    assert commands.delete_key(5).parameter == '{"id": 5}'


def test_button_push_is_customize() -> None:
    assert commands.button_push("ボタン").render() == {
        "command": "ボタン",
        "parameter": "default",
        "commandType": "customize",
    }


def test_ac_set_all() -> None:
    cmd = commands.ac_set_all(26, ACMode.AUTO, ACFanSpeed.MEDIUM, POWER_ON)
    assert (cmd.command, cmd.parameter) == ("setAll", "26,1,3,on")


def test_set_all_status() -> None:
    cmd = commands.set_all_status("OFF", SmartFanMode.NATURAL, 3, 60)
    assert (cmd.command, cmd.parameter) == ("setAllStatus", "off,2,3,60")


@pytest.mark.parametrize(
    "mode, expected",
    [(HumidifierMode.AUTO, "auto"), (HumidifierMode.HIGH, "103"), (38, "38")],
)
def test_set_mode(mode, expected: str) -> None:
    assert commands.set_mode(mode).parameter == expected


def test_set_mode_rejects_unknown_level() -> None:
    with pytest.raises(SwitchBotInvalidArgumentError):
        commands.set_mode(150)


def test_set_color() -> None:
    assert commands.set_color(122, 80, 20).parameter == "122:80:20"
    with pytest.raises(SwitchBotInvalidArgumentError):
        commands.set_color(256, 0, 0)


def test_blind_tilt_set_position() -> None:
    assert commands.blind_tilt_set_position(BlindTiltDirection.UP, 50).parameter == "up;50"
    assert commands.blind_tilt_set_position("down", 0).parameter == "down;0"


@pytest.mark.parametrize(
    "cmd, name, parameter",
    [
        (commands.turn_off(), "turnOff", "default"),
        (commands.press(), "press", "default"),
        (commands.lock(), "lock", "default"),
        (commands.unlock(), "unlock", "default"),
        (commands.toggle(), "toggle", "default"),
        (commands.set_brightness(40), "setBrightness", "40"),
        (commands.set_color_temperature(3500), "setColorTemperature", "3500"),
        (commands.start(), "start", "default"),
        (commands.stop(), "stop", "default"),
        (commands.dock(), "dock", "default"),
        (commands.pow_level(VacuumPowerLevel.MAX), "PowLevel", "3"),
        (commands.fully_open(), "fullyOpen", "default"),
        (commands.close_up(), "closeUp", "default"),
        (commands.close_down(), "closeDown", "default"),
        (commands.set_channel(15), "SetChannel", "15"),
        (commands.volume_add(), "volumeAdd", "default"),
        (commands.volume_sub(), "volumeSub", "default"),
        (commands.channel_add(), "channelAdd", "default"),
        (commands.channel_sub(), "channelSub", "default"),
        (commands.set_mute(), "setMute", "default"),
        (commands.fast_forward(), "FastForward", "default"),
        (commands.rewind(), "Rewind", "default"),
        (commands.next_track(), "Next", "default"),
        (commands.previous_track(), "Previous", "default"),
        (commands.pause(), "Pause", "default"),
        (commands.play(), "Play", "default"),
        (commands.stop_player(), "Stop", "default"),
        (commands.fan_swing(), "swing", "default"),
        (commands.fan_timer(), "timer", "default"),
        (commands.fan_low_speed(), "lowSpeed", "default"),
        (commands.fan_middle_speed(), "middleSpeed", "default"),
        (commands.fan_high_speed(), "highSpeed", "default"),
        (commands.light_brightness_up(), "brightnessUp", "default"),
        (commands.light_brightness_down(), "brightnessDown", "default"),
    ],
)
def test_command_names(cmd: Command, name: str, parameter: str) -> None:
    assert cmd.render() == {"command": name, "parameter": parameter, "commandType": "command"}


def test_commands_are_immutable() -> None:
    cmd = commands.turn_on()
    with pytest.raises(AttributeError):
        cmd.command = "turnOff"  # type: ignore[misc]
