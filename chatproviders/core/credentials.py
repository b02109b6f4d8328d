"""Credential resolution shared by all providers.

An API key is looked up in this order:

1. Explicit per-request keys, keyed by provider name (e.g. ``{"Google": "..."}``)
2. The server environment mapping handed in by the caller
3. The process environment
4. Application settings (``.env`` file)

Base URLs follow the same pattern, starting from the per-provider settings.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from chatproviders.core.config import get_settings

logger = logging.getLogger(__name__)


class ProviderSetting(BaseModel):
    """User-level settings for a single provider."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    enabled: Optional[bool] = Field(None, description="Whether the provider is enabled")
    base_url: Optional[str] = Field(
        None,
        alias="baseUrl",
        description="Override for the provider API base URL",
    )


@dataclass(frozen=True)
class ProviderCredentials:
    """Resolved base URL and API key for one provider."""

    base_url: Optional[str]
    api_key: Optional[str]

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return f"ProviderCredentials(base_url={self.base_url!r}, api_key={masked!r})"


def _first_non_empty(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value:
            return value
    return None


def _settings_value(key: str) -> Optional[str]:
    if not key:
        return None
    value = getattr(get_settings(), key.lower(), None)
    return value if isinstance(value, str) else None


def resolve_provider_base_url_and_key(
    provider_name: str,
    *,
    api_keys: Optional[Mapping[str, str]] = None,
    provider_settings: Optional[ProviderSetting] = None,
    server_env: Optional[Mapping[str, str]] = None,
    default_base_url_key: str = "",
    default_api_token_key: str = "",
    default_base_url: Optional[str] = None,
) -> ProviderCredentials:
    """Resolve the base URL and API key for a provider.

    Args:
        provider_name: Provider name used to index ``api_keys``.
        api_keys: Explicit provider name -> API key mapping.
        provider_settings: Settings for this provider only.
        server_env: Environment mapping supplied by the hosting server.
        default_base_url_key: Env var holding the base URL ("" skips env lookup).
        default_api_token_key: Env var holding the API key.
        default_base_url: Base URL used when nothing else is configured.

    Returns:
        ProviderCredentials with ``None`` for anything not found.
    """
    server_env = server_env or {}

    base_url = _first_non_empty(
        provider_settings.base_url if provider_settings else None,
        server_env.get(default_base_url_key) if default_base_url_key else None,
        os.environ.get(default_base_url_key) if default_base_url_key else None,
        default_base_url,
    )
    if base_url:
        base_url = base_url.rstrip("/")

    api_key = _first_non_empty(
        (api_keys or {}).get(provider_name),
        server_env.get(default_api_token_key) if default_api_token_key else None,
        os.environ.get(default_api_token_key) if default_api_token_key else None,
        _settings_value(default_api_token_key),
    )

    if not api_key:
        logger.debug("No API key found for provider %s", provider_name)

    return ProviderCredentials(base_url=base_url, api_key=api_key)
