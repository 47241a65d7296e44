"""Settings do cliente, carregadas do ambiente ou montadas explicitamente."""

from __future__ import annotations

from gocardless_client.config.settings.client import (
    API_VERSION,
    LIVE_BASE_URL,
    SANDBOX_BASE_URL,
    ClientSettings,
    Environment,
    get_client_settings,
)

__all__ = [
    # Constants
    "API_VERSION",
    "LIVE_BASE_URL",
    "SANDBOX_BASE_URL",
    "ClientSettings",
    "Environment",
    "get_client_settings",
]
