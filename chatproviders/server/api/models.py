"""Model list API endpoints."""

import json
import logging
import os
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException
from pydantic import ValidationError

from chatproviders.core.config import get_settings
from chatproviders.core.credentials import ProviderSetting
from chatproviders.manager import LLMManager
from chatproviders.server.api.schemas import ModelInfo, ModelListResponse, ProviderInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{get_settings().api_prefix}/models", tags=["models"])


@lru_cache
def get_llm_manager() -> LLMManager:
    return LLMManager()


def _parse_json_cookie(raw: Optional[str], name: str) -> dict:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s cookie", name)
        return {}
    if not isinstance(value, dict):
        logger.warning("Ignoring %s cookie that is not a JSON object", name)
        return {}
    return value


def parse_api_keys(raw: Optional[str]) -> dict[str, str]:
    """Provider name -> API key from the ``apiKeys`` cookie."""
    return {
        str(name): key
        for name, key in _parse_json_cookie(raw, "apiKeys").items()
        if isinstance(key, str) and key
    }


def parse_provider_settings(raw: Optional[str]) -> dict[str, ProviderSetting]:
    """Provider name -> settings from the ``providers`` cookie."""
    settings: dict[str, ProviderSetting] = {}
    for name, value in _parse_json_cookie(raw, "providers").items():
        try:
            settings[str(name)] = ProviderSetting.model_validate(value)
        except ValidationError:
            logger.warning("Ignoring invalid settings for provider %s", name)
    return settings


async def _build_response(
    manager: LLMManager,
    api_keys_cookie: Optional[str],
    providers_cookie: Optional[str],
    provider_name: Optional[str] = None,
) -> ModelListResponse:
    models = await manager.update_model_list(
        api_keys=parse_api_keys(api_keys_cookie),
        provider_settings=parse_provider_settings(providers_cookie),
        server_env=dict(os.environ),
        provider_name=provider_name,
    )

    providers = manager.get_all_providers()
    if provider_name is not None:
        providers = [p for p in providers if p.name == provider_name]

    return ModelListResponse(
        model_list=[ModelInfo.from_descriptor(m) for m in models],
        providers=[
            ProviderInfo(
                name=p.name,
                static_models=[ModelInfo.from_descriptor(m) for m in p.static_models],
                get_api_key_link=p.get_api_key_link,
            )
            for p in providers
        ],
    )


@router.get("", response_model=ModelListResponse)
async def list_models(
    api_keys: Optional[str] = Cookie(None, alias="apiKeys"),
    providers: Optional[str] = Cookie(None),
    manager: LLMManager = Depends(get_llm_manager),
) -> ModelListResponse:
    """List static and discovered models for all enabled providers."""
    return await _build_response(manager, api_keys, providers)


@router.get("/{provider}", response_model=ModelListResponse)
async def list_provider_models(
    provider: str,
    api_keys: Optional[str] = Cookie(None, alias="apiKeys"),
    providers: Optional[str] = Cookie(None),
    manager: LLMManager = Depends(get_llm_manager),
) -> ModelListResponse:
    """List static and discovered models for a single provider."""
    if manager.get_provider(provider) is None:
        raise HTTPException(status_code=404, detail=f"Unknown provider: {provider}")
    return await _build_response(manager, api_keys, providers, provider_name=provider)
