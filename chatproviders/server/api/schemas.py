"""Pydantic schemas for the model list API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from chatproviders.discovery.base import ModelDescriptor


class ModelInfo(BaseModel):
    """A single selectable model."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Model identifier", examples=["gemini-2.5-flash"])
    label: str = Field(..., description="Display name", examples=["Gemini 2.5 Flash"])
    provider: str = Field(..., description="Provider name", examples=["Google"])
    max_token_allowed: int = Field(
        ...,
        alias="maxTokenAllowed",
        description="Total context window in tokens",
        examples=[1048576],
    )
    max_completion_tokens: int = Field(
        ...,
        alias="maxCompletionTokens",
        description="Max tokens emitted by one completion",
        examples=[8192],
    )

    @classmethod
    def from_descriptor(cls, descriptor: ModelDescriptor) -> "ModelInfo":
        return cls.model_validate(descriptor.to_dict())


class ProviderInfo(BaseModel):
    """Provider metadata for the model picker."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Provider name", examples=["Google"])
    static_models: list[ModelInfo] = Field(default_factory=list, alias="staticModels")
    get_api_key_link: Optional[str] = Field(None, alias="getApiKeyLink")


class ModelListResponse(BaseModel):
    """Schema for the model list response."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_list: list[ModelInfo] = Field(default_factory=list, alias="modelList")
    providers: list[ProviderInfo] = Field(default_factory=list)
