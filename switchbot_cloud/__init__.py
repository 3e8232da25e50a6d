"""Asyncio client for the SwitchBot cloud API."""

from __future__ import annotations

from . import commands
from .api import SwitchBotClient, sign_request
from .codec import BrightnessValue, DeviceVersion, decode_brightness, decode_device_version
from .commands import Command
from .config import ClientConfig
from .const import webhook_device_type
from .exceptions import (
    SwitchBotAPIError,
    SwitchBotAuthError,
    SwitchBotCommError,
    SwitchBotConflictError,
    SwitchBotDecodeError,
    SwitchBotDeviceOfflineError,
    SwitchBotDeviceTypeMismatchError,
    SwitchBotError,
    SwitchBotHubOfflineError,
    SwitchBotInvalidArgumentError,
    SwitchBotNotFoundError,
    SwitchBotRateLimitError,
    SwitchBotRequestError,
    SwitchBotServerError,
    SwitchBotTransportError,
    SwitchBotUnknownDeviceTypeError,
    SwitchBotUnknownError,
    SwitchBotUnsupportedError,
    SwitchBotWrongVariantError,
    check_status_code,
)
from .models import (
    Device,
    DeviceStatus,
    InfraredDevice,
    KeyListItem,
    Scene,
    WebhookConfig,
    decode_device_status,
)
from .webhook import WebhookEvent, parse_webhook_body, parse_webhook_request

__all__ = [
    "BrightnessValue",
    "ClientConfig",
    "Command",
    "Device",
    "DeviceStatus",
    "DeviceVersion",
    "InfraredDevice",
    "KeyListItem",
    "Scene",
    "SwitchBotAPIError",
    "SwitchBotAuthError",
    "SwitchBotClient",
    "SwitchBotCommError",
    "SwitchBotConflictError",
    "SwitchBotDecodeError",
    "SwitchBotDeviceOfflineError",
    "SwitchBotDeviceTypeMismatchError",
    "SwitchBotError",
    "SwitchBotHubOfflineError",
    "SwitchBotInvalidArgumentError",
    "SwitchBotNotFoundError",
    "SwitchBotRateLimitError",
    "SwitchBotRequestError",
    "SwitchBotServerError",
    "SwitchBotTransportError",
    "SwitchBotUnknownDeviceTypeError",
    "SwitchBotUnknownError",
    "SwitchBotUnsupportedError",
    "SwitchBotWrongVariantError",
    "WebhookConfig",
    "WebhookEvent",
    "check_status_code",
    "commands",
    "decode_brightness",
    "decode_device_status",
    "decode_device_version",
    "parse_webhook_body",
    "parse_webhook_request",
    "sign_request",
    "webhook_device_type",
]
