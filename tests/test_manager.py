"""Tests for the provider manager."""

import logging
from unittest.mock import AsyncMock

import pytest

from chatproviders.core.credentials import ProviderSetting
from chatproviders.discovery.base import ModelDescriptor
from chatproviders.discovery.static import GOOGLE_STATIC_MODELS
from chatproviders.exceptions import ConfigurationError, FormatError
from chatproviders.manager import LLMManager
from chatproviders.providers import GoogleProvider


def descriptor(name: str, label: str = "") -> ModelDescriptor:
    return ModelDescriptor(
        name=name,
        label=label or name,
        provider="Google",
        max_token_allowed=1048576,
        max_completion_tokens=8192,
    )


@pytest.fixture
def google():
    provider = GoogleProvider()
    provider.get_dynamic_models = AsyncMock(return_value=[])
    return provider


@pytest.fixture
def manager(google):
    return LLMManager([google])


class TestRegistry:
    def test_default_providers(self):
        manager = LLMManager()
        assert [p.name for p in manager.get_all_providers()] == ["Google"]
        assert isinstance(manager.get_provider("Google"), GoogleProvider)
        assert manager.get_provider("Nope") is None

    def test_static_model_list(self, manager):
        assert manager.get_static_model_list() == list(GOOGLE_STATIC_MODELS)

    def test_register_replaces(self, manager, caplog):
        replacement = GoogleProvider()
        with caplog.at_level(logging.WARNING):
            manager.register_provider(replacement)

        assert manager.get_provider("Google") is replacement
        assert "already registered" in caplog.text


class TestUpdateModelList:
    @pytest.mark.asyncio
    async def test_static_then_dynamic(self, manager, google):
        google.get_dynamic_models.return_value = [descriptor("gemini-exp-1206")]

        models = await manager.update_model_list(api_keys={"Google": "k"})

        assert models[: len(GOOGLE_STATIC_MODELS)] == list(GOOGLE_STATIC_MODELS)
        assert models[-1].name == "gemini-exp-1206"
        google.get_dynamic_models.assert_awaited_once_with({"Google": "k"}, None, None)

    @pytest.mark.asyncio
    async def test_static_wins_on_duplicate_names(self, manager, google):
        google.get_dynamic_models.return_value = [
            descriptor("gemini-2.5-pro", "Gemini 2.5 Pro (1048k context)"),
            descriptor("gemini-2.5-pro-preview-06-05"),
        ]

        models = await manager.update_model_list()
        names = [m.name for m in models]

        assert names.count("gemini-2.5-pro") == 1
        assert next(m for m in models if m.name == "gemini-2.5-pro").label == "Gemini 2.5 Pro"
        assert names[-1] == "gemini-2.5-pro-preview-06-05"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [ConfigurationError("Google"), FormatError("bad")])
    async def test_falls_back_to_static(self, manager, google, error, caplog):
        google.get_dynamic_models.side_effect = error

        with caplog.at_level(logging.WARNING):
            models = await manager.update_model_list()

        assert models == list(GOOGLE_STATIC_MODELS)
        assert "Falling back to static models for Google" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self, manager, google):
        google.get_dynamic_models.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await manager.update_model_list()

    @pytest.mark.asyncio
    async def test_disabled_provider_skipped(self, manager, google):
        models = await manager.update_model_list(
            provider_settings={"Google": ProviderSetting(enabled=False)}
        )

        assert models == []
        google.get_dynamic_models.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_provider_settings_forwarded(self, manager, google):
        setting = ProviderSetting(enabled=True, base_url="https://proxy.example.com")
        env = {"GOOGLE_GENERATIVE_AI_API_KEY": "k"}

        await manager.update_model_list(
            provider_settings={"Google": setting}, server_env=env, provider_name="Google"
        )

        google.get_dynamic_models.assert_awaited_once_with(None, setting, env)

    @pytest.mark.asyncio
    async def test_unknown_provider(self, manager):
        with pytest.raises(KeyError):
            await manager.update_model_list(provider_name="Nope")
