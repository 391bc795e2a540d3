"""Environment-driven configuration using Pydantic Settings.

Values are read from ``VALHALLA_*`` environment variables or a ``.env`` file
and turned into a ``ClientConfig`` with ``ClientConfig.from_settings``.

Example:
    >>> from valhalla_client.config import get_settings
    >>> from valhalla_client import ClientConfig, ValhallaClient
    >>> client = ValhallaClient(ClientConfig.from_settings(get_settings()))
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from valhalla_client.constants import (
    DEFAULT_API_KEY_HEADER,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
)

LOGGER = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ValhallaSettings(BaseSettings):
    """Valhalla client settings.

    Example .env file:
        VALHALLA_ENDPOINT=https://valhalla.example.com
        VALHALLA_API_KEY=your_api_key
        VALHALLA_TIMEOUT=10
    """

    model_config = SettingsConfigDict(
        env_prefix="VALHALLA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Valhalla service base URL",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout in seconds",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify the server TLS certificate",
    )
    ca_bundle: Optional[str] = Field(
        default=None,
        description="CA bundle path used instead of the system store",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="API key sent with every request, for hosted services",
    )
    api_key_header: str = Field(
        default=DEFAULT_API_KEY_HEADER,
        description="Header carrying the API key",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the command-line tool",
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Ensure endpoint starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Valhalla endpoint must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Lazy initialization - only create settings when accessed
_settings: Optional[ValhallaSettings] = None
_settings_lock = threading.Lock()


def get_settings() -> ValhallaSettings:
    """Get or create the settings singleton (thread-safe).

    Returns:
        Settings loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings

    # First check without lock (fast path)
    if _settings is not None:
        return _settings

    with _settings_lock:
        # Double-check after acquiring lock
        if _settings is None:
            LOGGER.debug("Loading Valhalla settings from environment variables and .env file")
            try:
                _settings = ValhallaSettings()
            except ValidationError as e:
                LOGGER.error("Configuration validation failed: %s", e)
                raise

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = ["ValhallaSettings", "get_settings", "reset_settings"]
