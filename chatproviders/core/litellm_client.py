"""
LiteLLM-backed model handles.

A handle is bound to one model id and one API key. Calling it performs a single
non-streaming completion through LiteLLM:

    google = create_google_generative_ai(api_key="...")
    model = google("gemini-2.5-flash")
    response = await model([{"role": "user", "content": "Hello"}])
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import litellm
from litellm import acompletion

logger = logging.getLogger(__name__)

# LiteLLM route prefix for the Gemini API (AI Studio keys)
GEMINI_PROVIDER = "gemini"


def get_litellm_model_name(provider: str, model_id: str) -> str:
    """Format model name with LiteLLM provider prefix."""
    prefix = f"{provider}/" if provider else ""
    if prefix and not model_id.startswith(prefix):
        return f"{prefix}{model_id}"
    return model_id


@dataclass(frozen=True)
class LanguageModel:
    """Callable handle for one model bound to one API key."""

    model_id: str
    provider: str
    api_key: str = field(repr=False)
    api_base: Optional[str] = None

    @property
    def litellm_model(self) -> str:
        return get_litellm_model_name(self.provider, self.model_id)

    async def __call__(
        self,
        messages: List[Dict[str, str]],
        **kwargs,
    ) -> Dict[str, Any]:
        """
        Execute a non-streaming completion.

        Args:
            messages: List of message dicts with "role" and "content"
            **kwargs: Additional arguments passed to litellm.acompletion

        Returns:
            Completion response

        Raises:
            litellm.exceptions.APIError and subclasses, unchanged
        """
        kwargs.pop("stream", None)
        completion_kwargs = {
            "model": self.litellm_model,
            "messages": messages,
            "stream": False,
            "api_key": self.api_key,
            **kwargs,
        }
        if self.api_base:
            completion_kwargs["api_base"] = self.api_base

        logger.debug("Completion request for model %s", self.litellm_model)
        return await acompletion(**completion_kwargs)


class GoogleGenerativeAI:
    """Client factory for Gemini models; call it with a model id."""

    def __init__(self, api_key: str, base_url: Optional[str] = None):
        self.api_key = api_key
        self.base_url = base_url

        litellm.suppress_debug_info = True

    def __call__(self, model_id: str) -> LanguageModel:
        return LanguageModel(
            model_id=model_id,
            provider=GEMINI_PROVIDER,
            api_key=self.api_key,
            api_base=self.base_url,
        )

    def __repr__(self) -> str:
        return f"GoogleGenerativeAI(base_url={self.base_url!r})"


def create_google_generative_ai(
    api_key: str, base_url: Optional[str] = None
) -> GoogleGenerativeAI:
    """Create a Gemini client configured with ``api_key``."""
    return GoogleGenerativeAI(api_key=api_key, base_url=base_url)
