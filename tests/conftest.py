"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from chatproviders.core.config import get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real credentials and cached settings out of tests."""
    monkeypatch.delenv("GOOGLE_GENERATIVE_AI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_BASE_URL", raising=False)
    monkeypatch.delenv("DISCOVERY_TIMEOUT", raising=False)
    monkeypatch.chdir("/")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _make_async_client(response=None, get_side_effect=None):
    mock_client = AsyncMock()
    if get_side_effect is not None:
        mock_client.get = AsyncMock(side_effect=get_side_effect)
    else:
        mock_client.get = AsyncMock(return_value=response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    return mock_client


def _make_response(payload=None, status_code=200, reason_phrase="OK", text=""):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.reason_phrase = reason_phrase
    mock_response.text = text
    mock_response.json.return_value = payload
    if status_code >= 400:
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            message=f"{status_code} {reason_phrase}",
            request=MagicMock(),
            response=mock_response,
        )
    else:
        mock_response.raise_for_status = MagicMock()
    return mock_response


@pytest.fixture
def make_async_client():
    """Factory for a mock httpx.AsyncClient usable as an async context manager."""
    return _make_async_client


@pytest.fixture
def make_response():
    """Factory for a mock httpx.Response."""
    return _make_response
