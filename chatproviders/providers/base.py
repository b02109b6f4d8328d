"""Base class shared by all chat providers."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional

from chatproviders.core.credentials import (
    ProviderCredentials,
    ProviderSetting,
    resolve_provider_base_url_and_key,
)
from chatproviders.discovery.base import ModelDescriptor


class BaseProvider(ABC):
    """A vendor that offers chat models.

    Subclasses declare a static catalog and implement discovery and model
    instantiation on top of the shared credential lookup.
    """

    name: ClassVar[str]
    get_api_key_link: ClassVar[Optional[str]] = None
    api_token_key: ClassVar[str]
    base_url_key: ClassVar[str] = ""
    default_base_url: ClassVar[Optional[str]] = None
    static_models: ClassVar[tuple[ModelDescriptor, ...]] = ()

    def get_provider_base_url_and_key(
        self,
        *,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[ProviderSetting] = None,
        server_env: Optional[Mapping[str, str]] = None,
    ) -> ProviderCredentials:
        return resolve_provider_base_url_and_key(
            self.name,
            api_keys=api_keys,
            provider_settings=provider_settings,
            server_env=server_env,
            default_base_url_key=self.base_url_key,
            default_api_token_key=self.api_token_key,
            default_base_url=self.default_base_url,
        )

    @abstractmethod
    async def get_dynamic_models(
        self,
        api_keys: Optional[Mapping[str, str]] = None,
        settings: Optional[ProviderSetting] = None,
        server_env: Optional[Mapping[str, str]] = None,
    ) -> list[ModelDescriptor]:
        """Return models discovered from the vendor API."""

    @abstractmethod
    def get_model_instance(
        self,
        model: str,
        server_env: Optional[Mapping[str, str]] = None,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
    ) -> Any:
        """Return a callable model handle for ``model``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
