"""Configuration management for the Valhalla client."""

from __future__ import annotations

from .settings import ValhallaSettings, get_settings, reset_settings

__all__ = ["ValhallaSettings", "get_settings", "reset_settings"]
