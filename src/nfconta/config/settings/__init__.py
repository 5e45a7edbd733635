"""Agregador de settings do cliente NFConta."""

from __future__ import annotations

from nfconta.config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from nfconta.config.settings.nfhub import (
    DEFAULT_USER_AGENT,
    NFHubSettings,
    get_nfhub_settings,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "BaseSettings",
    "Environment",
    "NFHubSettings",
    "get_base_settings",
    "get_nfhub_settings",
]
