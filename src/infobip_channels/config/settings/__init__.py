"""Agregador de settings do SDK."""

from __future__ import annotations

from infobip_channels.config.settings.infobip import (
    DEFAULT_API_KEY_PREFIX,
    DEFAULT_USER_AGENT,
    InfobipSettings,
    get_infobip_settings,
    load_infobip_settings,
)

__all__ = [
    "DEFAULT_API_KEY_PREFIX",
    "DEFAULT_USER_AGENT",
    "InfobipSettings",
    "get_infobip_settings",
    "load_infobip_settings",
]
