# All network I/O + status mapping for the SwitchBot cloud API.

from __future__ import annotations

import asyncio
import base64
import hashlib
import hmac
import json
import time
import uuid
from typing import Any

from aiohttp import ClientError, ClientSession, ClientTimeout

from .commands import Command
from .config import ClientConfig
from .const import API_VERSION, LOGGER, WEBHOOK_DEVICE_LIST_ALL
from .exceptions import (
    SwitchBotAuthError,
    SwitchBotCommError,
    SwitchBotDecodeError,
    SwitchBotInvalidArgumentError,
    SwitchBotRateLimitError,
    SwitchBotRequestError,
    SwitchBotServerError,
    check_status_code,
)
from .models import (
    Device,
    DeviceStatus,
    InfraredDevice,
    Scene,
    WebhookConfig,
    decode_device_status,
)

# ----- Paths -----
DEVICES_PATH = f"/{API_VERSION}/devices"
DEVICE_STATUS_PATH = f"/{API_VERSION}/devices/{{id}}/status"
DEVICE_COMMANDS_PATH = f"/{API_VERSION}/devices/{{id}}/commands"
SCENES_PATH = f"/{API_VERSION}/scenes"
SCENE_EXECUTE_PATH = f"/{API_VERSION}/scenes/{{id}}/execute"
WEBHOOK_SETUP_PATH = f"/{API_VERSION}/webhook/setupWebhook"
WEBHOOK_QUERY_PATH = f"/{API_VERSION}/webhook/queryWebhook"
WEBHOOK_UPDATE_PATH = f"/{API_VERSION}/webhook/updateWebhook"
WEBHOOK_DELETE_PATH = f"/{API_VERSION}/webhook/deleteWebhook"

QUERY_URL = "queryUrl"
QUERY_DETAILS = "queryDetails"

# Documented meaning of the HTTP error statuses
_HTTP_ERRORS = {
    400: "the client has issued an invalid request",
    401: "authorization for the API is required but the request has not been authenticated",
    403: "the request has been authenticated but does not have permission or the resource is not found",
    406: "the client has requested a MIME type via the Accept header for a value not supported by the server",
    415: "the client has defined a Content-Type header that is not supported by the server",
    422: "the client has made a valid request but the server cannot process it",
    429: "the client has exceeded the number of requests allowed for a given time window",
    500: "an unexpected error on the server has occurred",
}


def sign_request(open_token: str, secret_key: str, t: str, nonce: str) -> str:
    """HMAC-SHA256 over token + t + nonce, base64 encoded and uppercased."""
    digest = hmac.new(
        secret_key.encode(), f"{open_token}{t}{nonce}".encode(), hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode().upper()


def build_headers(config: ClientConfig, *, t: str | None = None, nonce: str | None = None) -> dict[str, str]:
    headers = {
        "Authorization": config.open_token,
        "Content-Type": "application/json; charset=utf8",
    }
    if config.signed:
        t = t or str(int(time.time() * 1000))
        nonce = nonce or str(uuid.uuid4())
        headers["t"] = t
        headers["nonce"] = nonce
        headers["sign"] = sign_request(config.open_token, config.secret_key, t, nonce)
    return headers


def _retry_after(value: str | None) -> float | None:
    try:
        return float(value) if value is not None else None
    except ValueError:
        return None


def _raise_for_http_status(status: int, text: str, retry_after: str | None = None) -> None:
    if status == 200:
        return
    message = _HTTP_ERRORS.get(status, f"unexpected HTTP status {status}")
    LOGGER.debug("HTTP %s: %s", status, text[:200])
    if status in (401, 403):
        raise SwitchBotAuthError(message)
    if status == 429:
        raise SwitchBotRateLimitError(message, retry_after=_retry_after(retry_after))
    if 500 <= status < 600:
        raise SwitchBotServerError(message)
    raise SwitchBotRequestError(message, status=status)


def unwrap_envelope(envelope: Any) -> Any:
    """Check a {statusCode, body, message} envelope and return its body."""
    if not isinstance(envelope, dict):
        raise SwitchBotDecodeError("response envelope is not an object")
    status_code = envelope.get("statusCode")
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        raise SwitchBotDecodeError("response envelope has no integer statusCode")
    message = envelope.get("message")
    check_status_code(status_code, message if isinstance(message, str) else "")
    return envelope.get("body")


class SwitchBotClient:
    """
    Client for the SwitchBot cloud API.

    The aiohttp session is owned by the caller when one is passed in; otherwise
    the client opens its own and closes it in async_close() / on context exit.
    """

    def __init__(self, config: ClientConfig, session: ClientSession | None = None) -> None:
        self._config = config
        self._session = session
        self._owns_session = session is None

        self.devices = DeviceService(self)
        self.scenes = SceneService(self)
        self.webhooks = WebhookService(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> SwitchBotClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.async_close()

    async def async_close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> ClientSession:
        if self._session is None:
            self._session = ClientSession()
        return self._session

    def _log_api_call(self, method: str, url: str, payload: Any = None, headers: dict | None = None, response_status: int | None = None, response_text: str | None = None) -> None:
        """Dump requests/responses when debug is on, with credentials masked."""
        if not self._config.debug:
            return

        safe_headers = dict(headers) if headers else {}
        for key in ("Authorization", "sign"):
            if key in safe_headers:
                safe_headers[key] = "***MASKED***"

        if response_status is None:
            LOGGER.debug("SwitchBot API Call: %s %s", method, url)
            LOGGER.debug("  Request Headers: %s", json.dumps(safe_headers))
            if payload is not None:
                LOGGER.debug("  Request Payload: %s", json.dumps(payload, ensure_ascii=False))
            return

        LOGGER.debug("SwitchBot API Response: %s %s -> %s", method, url, response_status)
        if response_text is not None:
            truncated = response_text[:1000] + "..." if len(response_text) > 1000 else response_text
            LOGGER.debug("  Response Body: %s", truncated)

    async def async_request(self, method: str, path: str, payload: Any = None) -> Any:
        """
        Send one request and return the body of its response envelope.

        Raises a SwitchBotTransportError subclass for HTTP/network failures and
        a SwitchBotAPIError subclass when the envelope statusCode is not 100.
        """
        url = f"{self._config.endpoint}{path}"
        headers = build_headers(self._config)
        body = None if payload is None else json.dumps(payload, ensure_ascii=False)

        self._log_api_call(method, url, payload, headers)

        try:
            async with self._get_session().request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=ClientTimeout(total=self._config.timeout),
            ) as resp:
                text = await resp.text()
                self._log_api_call(method, url, response_status=resp.status, response_text=text)
                _raise_for_http_status(resp.status, text, resp.headers.get("Retry-After"))
        except asyncio.TimeoutError as e:
            raise SwitchBotCommError(f"{method} {path} timeout") from e
        except ClientError as e:
            raise SwitchBotCommError(f"{method} {path} connection error: {e}") from e

        try:
            envelope = json.loads(text)
        except ValueError as e:
            # Server said 200 but body isn't JSON
            raise SwitchBotCommError(f"Invalid JSON from {path}: {text[:200]}") from e

        return unwrap_envelope(envelope)

    async def async_get(self, path: str) -> Any:
        return await self.async_request("GET", path)

    async def async_post(self, path: str, payload: Any = None) -> Any:
        return await self.async_request("POST", path, payload)

    async def async_delete(self, path: str, payload: Any = None) -> Any:
        return await self.async_request("DELETE", path, payload)


class DeviceService:
    """Device list, status and commands."""

    def __init__(self, client: SwitchBotClient) -> None:
        self._client = client

    async def async_list(self) -> tuple[list[Device], list[InfraredDevice]]:
        """Return (physical devices, virtual infrared remotes) of the account."""
        body = await self._client.async_get(DEVICES_PATH)
        if not isinstance(body, dict):
            raise SwitchBotDecodeError("device list body is not an object")

        devices = body.get("deviceList") or []
        remotes = body.get("infraredRemoteList") or []
        if not isinstance(devices, list) or not isinstance(remotes, list):
            raise SwitchBotDecodeError("device list body: deviceList/infraredRemoteList must be arrays")

        return (
            [Device.from_dict(d) for d in devices],
            [InfraredDevice.from_dict(d) for d in remotes],
        )

    async def async_status(self, device_id: str) -> DeviceStatus:
        body = await self._client.async_get(DEVICE_STATUS_PATH.format(id=device_id))
        return decode_device_status(body)

    async def async_command(self, device_id: str, command: Command) -> None:
        LOGGER.debug("Sending %s to %s", command.command, device_id)
        await self._client.async_post(
            DEVICE_COMMANDS_PATH.format(id=device_id), command.render()
        )


class SceneService:
    """Manual scenes."""

    def __init__(self, client: SwitchBotClient) -> None:
        self._client = client

    async def async_list(self) -> list[Scene]:
        body = await self._client.async_get(SCENES_PATH)
        if body is None:
            return []
        if not isinstance(body, list):
            raise SwitchBotDecodeError("scene list body is not an array")
        return [Scene.from_dict(s) for s in body]

    async def async_execute(self, scene_id: str) -> None:
        await self._client.async_post(SCENE_EXECUTE_PATH.format(id=scene_id))


class WebhookService:
    """Webhook subscription management."""

    def __init__(self, client: SwitchBotClient) -> None:
        self._client = client

    async def async_setup(self, url: str, device_list: str = WEBHOOK_DEVICE_LIST_ALL) -> None:
        if device_list != WEBHOOK_DEVICE_LIST_ALL:
            raise SwitchBotInvalidArgumentError('device_list only supports "ALL" for now')
        await self._client.async_post(
            WEBHOOK_SETUP_PATH,
            {"action": "setupWebhook", "url": url, "deviceList": device_list},
        )

    async def async_query_url(self) -> list[str]:
        """Return the webhook URLs configured for the account."""
        # urls is only meaningful for queryDetails; null here
        body = await self._client.async_post(WEBHOOK_QUERY_PATH, {"action": QUERY_URL, "urls": None})
        if body is None:
            return []
        if not isinstance(body, dict):
            raise SwitchBotDecodeError("queryUrl body is not an object")
        urls = body.get("urls")
        if urls is None:
            return []
        if not isinstance(urls, list) or not all(isinstance(u, str) for u in urls):
            raise SwitchBotDecodeError("queryUrl body: urls must be an array of strings")
        return urls

    async def async_query_details(self, url: str) -> list[WebhookConfig]:
        if not url:
            raise SwitchBotInvalidArgumentError("url needs to be specified for queryDetails")
        body = await self._client.async_post(WEBHOOK_QUERY_PATH, {"action": QUERY_DETAILS, "urls": [url]})
        if body is None:
            return []
        if not isinstance(body, list):
            raise SwitchBotDecodeError("queryDetails body is not an array")
        return [WebhookConfig.from_dict(c) for c in body]

    async def async_update(self, url: str, enable: bool) -> None:
        await self._client.async_post(
            WEBHOOK_UPDATE_PATH,
            {"action": "updateWebhook", "config": {"url": url, "enable": enable}},
        )

    async def async_delete(self, url: str) -> None:
        await self._client.async_delete(
            WEBHOOK_DELETE_PATH,
            {"action": "deleteWebhook", "url": url},
        )
