"""Chat providers."""

from chatproviders.providers.base import BaseProvider
from chatproviders.providers.google import GoogleProvider

__all__ = [
    "BaseProvider",
    "GoogleProvider",
]
