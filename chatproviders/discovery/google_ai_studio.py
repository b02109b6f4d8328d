"""Google AI Studio (Gemini API) model source adapter.

Discovers models via Google's /v1beta/models API endpoint and normalizes them
into chat-ready descriptors.
Ref: https://ai.google.dev/api/models
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from chatproviders.discovery.base import (
    MAX_CONTEXT_WINDOW,
    MIN_COMPLETION_TOKENS,
    ModelDescriptor,
    ModelListPayload,
    RawModelEntry,
)
from chatproviders.discovery.static import GOOGLE_PROVIDER_NAME
from chatproviders.exceptions import ConfigurationError, FormatError, TransportError

logger = logging.getLogger(__name__)

GOOGLE_AI_STUDIO_API_BASE = "https://generativelanguage.googleapis.com"

# Entries reporting fewer output tokens than this are not useful for chat
MIN_OUTPUT_TOKEN_LIMIT = 8000

DEFAULT_CONTEXT_WINDOW = 32000
GEMINI_3_COMPLETION_TOKENS = 65536
DEFAULT_COMPLETION_TOKENS = 8192


def canonical_name(raw_name: str) -> str:
    """Model name format: "models/gemini-1.5-pro" -> "gemini-1.5-pro"."""
    return raw_name.replace("models/", "", 1)


def is_supported_model(entry: RawModelEntry) -> bool:
    """Return True if a listed model should be offered for chat.

    Requires a usable output limit. Experimental and preview builds only pass
    for the 2.x/3.x generations or when named flash/pro.
    """
    if not entry.name:
        return False

    name = entry.name.lower()
    has_good_token_limit = (entry.output_token_limit or 0) >= MIN_OUTPUT_TOKEN_LIMIT
    if not has_good_token_limit:
        return False

    is_new_gen = "gemini-2" in name or "gemini-3" in name
    is_experimental = "exp" in name or "preview" in name

    is_stable = not is_experimental
    is_allowed_preview = is_experimental and is_new_gen
    is_flash = "flash" in name
    is_pro = "pro" in name

    return is_stable or is_allowed_preview or is_flash or is_pro


def derive_context_window(entry: RawModelEntry, name: str) -> int:
    """Context window from the listing, else guessed from the model name."""
    if entry.input_token_limit:
        context_window = entry.input_token_limit
    elif "gemini-3" in name:
        context_window = 1048576
    elif "gemini-2.5-pro" in name or "gemini-1.5-pro" in name:
        context_window = 2097152
    elif "gemini-2" in name or "flash" in name:
        context_window = 1048576
    else:
        context_window = DEFAULT_CONTEXT_WINDOW

    return min(context_window, MAX_CONTEXT_WINDOW)


def derive_completion_tokens(entry: RawModelEntry, name: str) -> int:
    """Completion allowance from the listing, else guessed from the model name.

    Values below MIN_COMPLETION_TOKENS are raised to it, including ones the
    API reported.
    """
    if entry.output_token_limit:
        completion_tokens = entry.output_token_limit
    elif "gemini-3" in name:
        completion_tokens = GEMINI_3_COMPLETION_TOKENS
    else:
        completion_tokens = DEFAULT_COMPLETION_TOKENS

    return max(completion_tokens, MIN_COMPLETION_TOKENS)


def format_label(display_name: Optional[str], name: str, context_window: int) -> str:
    return f"{display_name or name} ({context_window // 1000}k context)"


def to_model_descriptor(
    entry: RawModelEntry, provider: str = GOOGLE_PROVIDER_NAME
) -> ModelDescriptor:
    """Map a raw listing entry to a descriptor, filling in missing limits."""
    name = canonical_name(entry.name or "")
    context_window = derive_context_window(entry, name)

    return ModelDescriptor(
        name=name,
        label=format_label(entry.display_name, name, context_window),
        provider=provider,
        max_token_allowed=context_window,
        max_completion_tokens=derive_completion_tokens(entry, name),
    )


def parse_model_list(payload: object) -> list[RawModelEntry]:
    """Validate a listing body and return its entries.

    Raises:
        FormatError: If ``models`` is missing or not a list of objects.
    """
    try:
        return ModelListPayload.model_validate(payload).models
    except ValidationError as e:
        raise FormatError("Invalid response format from Google API") from e


class GoogleAIStudioModelSource:
    """Model source for Google AI Studio (Gemini API).

    Calls /v1beta/models endpoint to discover available Gemini models.
    Passes the API key as the ``key`` query parameter.
    """

    def __init__(
        self,
        base_url: str = GOOGLE_AI_STUDIO_API_BASE,
        timeout: Optional[float] = None,
        provider: str = GOOGLE_PROVIDER_NAME,
    ) -> None:
        """Initialize Google AI Studio model source.

        Args:
            base_url: API root, without the /v1beta suffix.
            timeout: HTTP timeout in seconds; None waits indefinitely.
            provider: Provider name stamped on returned descriptors.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.provider = provider

    async def list_models(self, api_key: str) -> list[ModelDescriptor]:
        """Fetch, filter and normalize models from /v1beta/models.

        Raises:
            ConfigurationError: If ``api_key`` is empty.
            TransportError: If the endpoint returns a non-success status.
            FormatError: If the body is not a valid model listing.
        """
        if not api_key:
            raise ConfigurationError(self.provider)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(
                f"{self.base_url}/v1beta/models",
                params={"key": api_key},
                headers={"Content-Type": "application/json"},
            )
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(
                    "HTTP error discovering Google AI Studio models: %s %s",
                    e.response.status_code,
                    e.response.text[:200] if e.response.text else "",
                )
                raise TransportError.from_response(e.response, vendor=self.provider) from e

            try:
                payload = response.json()
            except ValueError as e:
                raise FormatError("Invalid response format from Google API") from e

        entries = parse_model_list(payload)
        models = [
            to_model_descriptor(entry, self.provider)
            for entry in entries
            if is_supported_model(entry)
        ]

        logger.info(
            "Discovered %d of %d listed models from Google AI Studio",
            len(models),
            len(entries),
        )
        return models
