"""Shared configuration, credential resolution and SDK glue."""

from chatproviders.core.config import Settings, get_settings
from chatproviders.core.credentials import (
    ProviderCredentials,
    ProviderSetting,
    resolve_provider_base_url_and_key,
)

__all__ = [
    "ProviderCredentials",
    "ProviderSetting",
    "Settings",
    "get_settings",
    "resolve_provider_base_url_and_key",
]
