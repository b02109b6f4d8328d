"""Google (Gemini) chat provider."""

import logging
from typing import Mapping, Optional

from chatproviders.core.config import get_settings
from chatproviders.core.credentials import ProviderCredentials, ProviderSetting
from chatproviders.core.litellm_client import LanguageModel, create_google_generative_ai
from chatproviders.discovery.base import ModelDescriptor
from chatproviders.discovery.google_ai_studio import (
    GOOGLE_AI_STUDIO_API_BASE,
    GoogleAIStudioModelSource,
)
from chatproviders.discovery.static import GOOGLE_PROVIDER_NAME, GOOGLE_STATIC_MODELS
from chatproviders.exceptions import ConfigurationError
from chatproviders.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class GoogleProvider(BaseProvider):
    """Gemini models through Google AI Studio API keys."""

    name = GOOGLE_PROVIDER_NAME
    get_api_key_link = "https://aistudio.google.com/app/apikey"
    api_token_key = "GOOGLE_GENERATIVE_AI_API_KEY"
    static_models = GOOGLE_STATIC_MODELS

    @staticmethod
    def _api_root(credentials: ProviderCredentials) -> str:
        """Per-provider base URL, else GOOGLE_API_BASE_URL."""
        return credentials.base_url or get_settings().google_api_base_url

    async def get_dynamic_models(
        self,
        api_keys: Optional[Mapping[str, str]] = None,
        settings: Optional[ProviderSetting] = None,
        server_env: Optional[Mapping[str, str]] = None,
    ) -> list[ModelDescriptor]:
        """Fetch the Gemini models available to the resolved API key.

        Args:
            api_keys: Explicit provider name -> API key mapping.
            settings: Google provider settings.
            server_env: Environment mapping supplied by the hosting server.

        Returns:
            Filtered, normalized descriptors in listing order.

        Raises:
            ConfigurationError: If no API key resolves; no request is made.
            TransportError: If the listing endpoint returns an error status.
            FormatError: If the listing body is malformed.
        """
        credentials = self.get_provider_base_url_and_key(
            api_keys=api_keys,
            provider_settings=settings,
            server_env=server_env,
        )
        if not credentials.api_key:
            raise ConfigurationError(self.name)

        source = GoogleAIStudioModelSource(
            base_url=self._api_root(credentials),
            timeout=get_settings().discovery_timeout,
            provider=self.name,
        )
        return await source.list_models(credentials.api_key)

    def get_model_instance(
        self,
        model: str,
        server_env: Optional[Mapping[str, str]] = None,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
    ) -> LanguageModel:
        """Return a callable handle for ``model`` bound to the resolved key.

        The model name is passed through unchecked; unknown names fail when
        the handle is called. A non-default API root is handed to the handle
        as its ``api_base``, so completions go where the listing call goes.

        Raises:
            ConfigurationError: If no API key resolves.
        """
        credentials = self.get_provider_base_url_and_key(
            api_keys=api_keys,
            provider_settings=(provider_settings or {}).get(self.name),
            server_env=server_env,
        )
        if not credentials.api_key:
            raise ConfigurationError(self.name)

        logger.debug("Creating %s model handle for %s", self.name, model)
        api_root = self._api_root(credentials)
        google = create_google_generative_ai(
            api_key=credentials.api_key,
            base_url=None if api_root == GOOGLE_AI_STUDIO_API_BASE else api_root,
        )
        return google(model)
