"""chatproviders: model catalogs and model handles for LLM chat providers."""

from chatproviders.discovery.base import ModelDescriptor
from chatproviders.exceptions import (
    ChatProvidersError,
    ConfigurationError,
    FormatError,
    TransportError,
)
from chatproviders.manager import LLMManager
from chatproviders.providers import BaseProvider, GoogleProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BaseProvider",
    "ChatProvidersError",
    "ConfigurationError",
    "FormatError",
    "GoogleProvider",
    "LLMManager",
    "ModelDescriptor",
    "TransportError",
]
