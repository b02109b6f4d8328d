"""Provider registry that assembles the model list shown to users."""

import logging
from typing import Iterable, Mapping, Optional

from chatproviders.core.credentials import ProviderSetting
from chatproviders.discovery.base import ModelDescriptor
from chatproviders.exceptions import ChatProvidersError
from chatproviders.providers.base import BaseProvider
from chatproviders.providers.google import GoogleProvider

logger = logging.getLogger(__name__)


def default_providers() -> list[BaseProvider]:
    return [GoogleProvider()]


def _dedupe(models: Iterable[ModelDescriptor]) -> list[ModelDescriptor]:
    """Drop repeated (provider, name) pairs, keeping the first occurrence."""
    seen: set[tuple[str, str]] = set()
    unique: list[ModelDescriptor] = []
    for model in models:
        key = (model.provider, model.name)
        if key in seen:
            continue
        seen.add(key)
        unique.append(model)
    return unique


class LLMManager:
    """Registry of chat providers keyed by provider name."""

    def __init__(self, providers: Optional[Iterable[BaseProvider]] = None) -> None:
        self._providers: dict[str, BaseProvider] = {}
        for provider in providers if providers is not None else default_providers():
            self.register_provider(provider)

    def register_provider(self, provider: BaseProvider) -> None:
        if provider.name in self._providers:
            logger.warning("Provider %s already registered, replacing", provider.name)
        self._providers[provider.name] = provider

    def get_provider(self, name: str) -> Optional[BaseProvider]:
        return self._providers.get(name)

    def get_all_providers(self) -> list[BaseProvider]:
        return list(self._providers.values())

    def get_static_model_list(self) -> list[ModelDescriptor]:
        return [model for provider in self._providers.values() for model in provider.static_models]

    async def get_model_list_from_provider(
        self,
        provider: BaseProvider,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
        server_env: Optional[Mapping[str, str]] = None,
    ) -> list[ModelDescriptor]:
        """Static models followed by discovered ones for a single provider.

        Discovery failures are logged and the static list is returned alone.
        """
        settings = (provider_settings or {}).get(provider.name)
        try:
            dynamic = await provider.get_dynamic_models(api_keys, settings, server_env)
        except ChatProvidersError as e:
            logger.warning(
                "Falling back to static models for %s: %s",
                provider.name,
                str(e),
            )
            dynamic = []

        return _dedupe([*provider.static_models, *dynamic])

    async def update_model_list(
        self,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
        server_env: Optional[Mapping[str, str]] = None,
        provider_name: Optional[str] = None,
    ) -> list[ModelDescriptor]:
        """Build the model list for every enabled provider.

        Args:
            api_keys: Explicit provider name -> API key mapping.
            provider_settings: Provider name -> settings mapping.
            server_env: Environment mapping supplied by the hosting server.
            provider_name: Restrict the result to one provider.

        Returns:
            Combined list, providers in registration order.

        Raises:
            KeyError: If ``provider_name`` is not registered.
        """
        if provider_name is not None:
            if provider_name not in self._providers:
                raise KeyError(provider_name)
            providers = [self._providers[provider_name]]
        else:
            providers = list(self._providers.values())

        models: list[ModelDescriptor] = []
        for provider in providers:
            setting = (provider_settings or {}).get(provider.name)
            if setting is not None and setting.enabled is False:
                logger.debug("Skipping disabled provider %s", provider.name)
                continue
            models.extend(
                await self.get_model_list_from_provider(
                    provider, api_keys, provider_settings, server_env
                )
            )

        logger.info("Model list contains %d models", len(models))
        return models
