"""chatproviders exceptions."""

from __future__ import annotations

import httpx


class ChatProvidersError(Exception):
    """Base exception for all provider errors."""


class ConfigurationError(ChatProvidersError):
    """Raised when a provider has no usable API key."""

    provider: str

    def __init__(self, provider: str, message: str | None = None) -> None:
        self.provider = provider
        self.message = message or f"Missing API key configuration for {provider} provider"
        super().__init__(self.message)


class TransportError(ChatProvidersError):
    """Raised when the model listing endpoint returns a non-success status."""

    status_code: int
    status_text: str

    def __init__(self, message: str, *, status_code: int, status_text: str) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_text = status_text

    @classmethod
    def from_response(cls, response: httpx.Response, vendor: str = "Google") -> TransportError:
        status_text = response.reason_phrase or ""
        message = f"Failed to fetch models from {vendor} API: {response.status_code} {status_text}"
        return cls(message.rstrip(), status_code=response.status_code, status_text=status_text)


class FormatError(ChatProvidersError):
    """Raised when the model listing payload has an unexpected shape."""
