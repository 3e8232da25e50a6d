# switchbot_cloud/config.py
from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from .exceptions import SwitchBotInvalidArgumentError


class ClientConfig(BaseSettings):
    """
    Settings for SwitchBotClient, validated on construction.

    Values not passed as keyword arguments are read from ``SWITCHBOT_*``
    environment variables (SWITCHBOT_OPEN_TOKEN, SWITCHBOT_SECRET_KEY, ...).
    """

    open_token: str = Field(min_length=1, repr=False)
    secret_key: str = Field(default="", repr=False)  # empty -> requests are not signed
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)  # seconds, per request
    debug: bool = False  # log request/response dumps

    model_config = SettingsConfigDict(
        env_prefix="SWITCHBOT_",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    def __init__(self, **values: Any) -> None:
        try:
            super().__init__(**values)
        except ValidationError as e:
            raise SwitchBotInvalidArgumentError(f"invalid client config: {e}") from e

    @field_validator("endpoint")
    @classmethod
    def check_endpoint(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"invalid endpoint {value!r}")
        return value.rstrip("/")

    @property
    def signed(self) -> bool:
        return bool(self.secret_key)

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build the config from the environment alone."""
        return cls()
