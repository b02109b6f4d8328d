"""Tests for the model list API endpoints."""

import json
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from chatproviders.core.credentials import ProviderSetting
from chatproviders.discovery.base import ModelDescriptor
from chatproviders.discovery.static import GOOGLE_STATIC_MODELS
from chatproviders.exceptions import TransportError
from chatproviders.manager import LLMManager
from chatproviders.providers import GoogleProvider
from chatproviders.server.api.models import (
    get_llm_manager,
    parse_api_keys,
    parse_provider_settings,
)
from chatproviders.server.main import app

DISCOVERED = ModelDescriptor(
    name="gemini-2.5-flash-preview-09-2025",
    label="Gemini 2.5 Flash Preview (1048k context)",
    provider="Google",
    max_token_allowed=1048576,
    max_completion_tokens=65536,
)


@pytest.fixture
def google():
    provider = GoogleProvider()
    provider.get_dynamic_models = AsyncMock(return_value=[DISCOVERED])
    return provider


@pytest.fixture
def client(google):
    """Create a test client with the manager dependency overridden."""
    app.dependency_overrides[get_llm_manager] = lambda: LLMManager([google])
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_list_models(client, google):
    response = client.get("/api/v1/models")

    assert response.status_code == 200
    data = response.json()
    assert len(data["modelList"]) == len(GOOGLE_STATIC_MODELS) + 1
    assert data["modelList"][0] == GOOGLE_STATIC_MODELS[0].to_dict()
    assert data["modelList"][-1]["name"] == DISCOVERED.name
    assert data["modelList"][-1]["maxCompletionTokens"] == 65536

    assert data["providers"][0]["name"] == "Google"
    assert data["providers"][0]["getApiKeyLink"] == "https://aistudio.google.com/app/apikey"
    assert len(data["providers"][0]["staticModels"]) == len(GOOGLE_STATIC_MODELS)


def test_list_models_reads_cookies(client, google):
    api_keys_cookie = json.dumps({"Google": "cookie-key"})
    providers_cookie = json.dumps({"Google": {"baseUrl": "https://p.example.com"}})

    response = client.get(
        "/api/v1/models",
        headers={"Cookie": f"apiKeys={api_keys_cookie}; providers={providers_cookie}"},
    )

    assert response.status_code == 200
    api_keys, settings, server_env = google.get_dynamic_models.await_args.args
    assert api_keys == {"Google": "cookie-key"}
    assert settings.base_url == "https://p.example.com"
    assert isinstance(server_env, dict)


def test_list_models_discovery_failure(client, google):
    google.get_dynamic_models.side_effect = TransportError(
        "Failed to fetch models from Google API: 429 Too Many Requests",
        status_code=429,
        status_text="Too Many Requests",
    )

    response = client.get("/api/v1/models")

    assert response.status_code == 200
    assert [m["name"] for m in response.json()["modelList"]] == [
        m.name for m in GOOGLE_STATIC_MODELS
    ]


def test_list_provider_models(client):
    response = client.get("/api/v1/models/Google")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()["providers"]] == ["Google"]


def test_list_unknown_provider(client):
    response = client.get("/api/v1/models/Nope")

    assert response.status_code == 404
    assert "Unknown provider" in response.json()["detail"]


class TestCookieParsing:
    def test_parse_api_keys(self):
        assert parse_api_keys(json.dumps({"Google": "k", "OpenAI": "", "X": 1})) == {"Google": "k"}

    @pytest.mark.parametrize("raw", [None, "", "not json", "[1, 2]"])
    def test_parse_api_keys_malformed(self, raw):
        assert parse_api_keys(raw) == {}

    def test_parse_provider_settings(self):
        settings = parse_provider_settings(
            json.dumps({"Google": {"enabled": False}, "Broken": {"enabled": "maybe"}})
        )
        assert settings == {"Google": ProviderSetting(enabled=False)}
