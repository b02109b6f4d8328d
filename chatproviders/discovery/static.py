"""Curated Gemini models.

Always available, even when the listing API is not reachable or no key is
configured for discovery.
"""

from chatproviders.discovery.base import ModelDescriptor

GOOGLE_PROVIDER_NAME = "Google"

# Ref: https://ai.google.dev/gemini-api/docs/models
GOOGLE_STATIC_MODELS: tuple[ModelDescriptor, ...] = (
    # Gemini 3
    ModelDescriptor(
        name="gemini-3-pro-preview",
        label="Gemini 3 Pro Preview",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=65536,
    ),
    # Gemini 2.5
    ModelDescriptor(
        name="gemini-2.5-pro",
        label="Gemini 2.5 Pro",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=2097152,
        max_completion_tokens=8192,
    ),
    ModelDescriptor(
        name="gemini-2.5-flash",
        label="Gemini 2.5 Flash",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    ),
    ModelDescriptor(
        name="gemini-2.5-flash-lite",
        label="Gemini 2.5 Flash Lite",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    ),
    # Gemini 2.0
    ModelDescriptor(
        name="gemini-2.0-flash",
        label="Gemini 2.0 Flash",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    ),
    # Latest aliases
    ModelDescriptor(
        name="gemini-flash-latest",
        label="Gemini Flash (Latest)",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    ),
    ModelDescriptor(
        name="gemini-flash-lite-latest",
        label="Gemini Flash Lite (Latest)",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    ),
    # Stable 1.5 fallbacks
    ModelDescriptor(
        name="gemini-1.5-pro",
        label="Gemini 1.5 Pro",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=2097152,
        max_completion_tokens=8192,
    ),
    ModelDescriptor(
        name="gemini-1.5-flash",
        label="Gemini 1.5 Flash",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    ),
)
