"""Types shared by the model catalogs."""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Hard cap on any context window we advertise (2M tokens)
MAX_CONTEXT_WINDOW = 2_097_152

# Smallest completion allowance we advertise
MIN_COMPLETION_TOKENS = 4096


@dataclass(frozen=True)
class ModelDescriptor:
    """Descriptor for a model offered by a provider.

    Shared by the curated static catalogs and the dynamically discovered ones.
    """

    name: str  # Model identifier (e.g., "gemini-2.5-flash")
    label: str  # Display name shown in model pickers
    provider: str  # Provider name (e.g., "Google")
    max_token_allowed: int  # Total context window in tokens
    max_completion_tokens: int  # Max tokens for a single completion

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase names the chat UI expects."""
        return {
            "name": self.name,
            "label": self.label,
            "provider": self.provider,
            "maxTokenAllowed": self.max_token_allowed,
            "maxCompletionTokens": self.max_completion_tokens,
        }


class RawModelEntry(BaseModel):
    """One entry of a vendor model listing; every field may be absent."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(None, description="Resource name, e.g. 'models/gemini-2.5-pro'")
    display_name: Optional[str] = Field(None, alias="displayName")
    input_token_limit: Optional[int] = Field(None, alias="inputTokenLimit")
    output_token_limit: Optional[int] = Field(None, alias="outputTokenLimit")


class ModelListPayload(BaseModel):
    """Top-level body of a model listing response."""

    model_config = ConfigDict(extra="ignore")

    models: list[RawModelEntry]
