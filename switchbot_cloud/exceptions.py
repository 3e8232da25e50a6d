"""Exceptions raised by switchbot_cloud."""

from __future__ import annotations

from .const import (
    LOGGER,
    STATUS_COMMAND_UNSUPPORTED,
    STATUS_CONFLICT,
    STATUS_DEVICE_NOT_FOUND,
    STATUS_DEVICE_OFFLINE,
    STATUS_DEVICE_TYPE_MISMATCH,
    STATUS_HUB_OFFLINE,
    STATUS_SUCCESS,
)


class SwitchBotError(Exception):
    pass


# ----- Decoding / encoding -----
class SwitchBotDecodeError(SwitchBotError, ValueError):
    pass  # wire JSON type did not match any accepted shape


class SwitchBotWrongVariantError(SwitchBotError):
    pass  # asked a BrightnessValue for the variant it does not hold


class SwitchBotInvalidArgumentError(SwitchBotError, ValueError):
    pass  # command / config preconditions


class SwitchBotUnknownDeviceTypeError(SwitchBotError):
    def __init__(self, token: str):
        super().__init__(f"unknown device type: {token!r}")
        self.token = token


# ----- Envelope statusCode != 100 -----
class SwitchBotAPIError(SwitchBotError):
    def __init__(self, status_code: int, message: str = ""):
        super().__init__(f"statusCode {status_code}: {message}" if message else f"statusCode {status_code}")
        self.status_code = status_code
        self.message = message


class SwitchBotDeviceTypeMismatchError(SwitchBotAPIError):
    pass  # 151


class SwitchBotNotFoundError(SwitchBotAPIError):
    pass  # 152


class SwitchBotUnsupportedError(SwitchBotAPIError):
    pass  # 160


class SwitchBotDeviceOfflineError(SwitchBotAPIError):
    pass  # 161


class SwitchBotHubOfflineError(SwitchBotAPIError):
    pass  # 171


class SwitchBotConflictError(SwitchBotAPIError):
    pass  # 190: states out of sync, bad command format, or request limit overlap


class SwitchBotUnknownError(SwitchBotAPIError):
    pass


# ----- HTTP / network -----
class SwitchBotTransportError(SwitchBotError):
    pass


class SwitchBotAuthError(SwitchBotTransportError):
    pass  # 401 / 403


class SwitchBotRateLimitError(SwitchBotTransportError):
    def __init__(self, *args, retry_after: float | None = None):
        super().__init__(*args)
        self.retry_after = retry_after


class SwitchBotServerError(SwitchBotTransportError):
    pass  # 5xx


class SwitchBotRequestError(SwitchBotTransportError):
    def __init__(self, *args, status: int | None = None):
        super().__init__(*args)
        self.status = status


class SwitchBotCommError(SwitchBotTransportError):
    pass  # timeouts, connection issues, unreadable bodies


_STATUS_ERRORS: dict[int, tuple[type[SwitchBotAPIError], str]] = {
    STATUS_DEVICE_TYPE_MISMATCH: (SwitchBotDeviceTypeMismatchError, "device type error"),
    STATUS_DEVICE_NOT_FOUND: (SwitchBotNotFoundError, "device not found"),
    STATUS_COMMAND_UNSUPPORTED: (SwitchBotUnsupportedError, "command is not supported"),
    STATUS_DEVICE_OFFLINE: (SwitchBotDeviceOfflineError, "device is offline"),
    STATUS_HUB_OFFLINE: (SwitchBotHubOfflineError, "hub device is offline"),
    STATUS_CONFLICT: (
        SwitchBotConflictError,
        "device internal error due to device states not synchronized with server, "
        "invalid command format or too many requests",
    ),
}


def check_status_code(status_code: int, message: str = "") -> None:
    """Raise the error mapped to a non-success envelope statusCode."""
    if status_code == STATUS_SUCCESS:
        return

    error_cls, default_message = _STATUS_ERRORS.get(
        status_code, (SwitchBotUnknownError, "unknown error")
    )
    LOGGER.debug("API statusCode %s (%s): %s", status_code, error_cls.__name__, message)
    raise error_cls(status_code, message or default_message)
