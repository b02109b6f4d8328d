"""Model catalogs.

- Curated static list of Gemini models
- Discovery through the Google AI Studio model listing API
"""

from chatproviders.discovery.base import (
    MAX_CONTEXT_WINDOW,
    MIN_COMPLETION_TOKENS,
    ModelDescriptor,
    ModelListPayload,
    RawModelEntry,
)
from chatproviders.discovery.google_ai_studio import GoogleAIStudioModelSource
from chatproviders.discovery.static import GOOGLE_STATIC_MODELS

__all__ = [
    "GOOGLE_STATIC_MODELS",
    "MAX_CONTEXT_WINDOW",
    "MIN_COMPLETION_TOKENS",
    "ModelDescriptor",
    "ModelListPayload",
    "RawModelEntry",
    "GoogleAIStudioModelSource",
]
