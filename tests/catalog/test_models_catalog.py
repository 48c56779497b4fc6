from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from chat_gateway.models import catalog
from chat_gateway.models.catalog import ModelsConfigService, _is_retryable, fetch_ollama_models
from chat_gateway.models.config import EndpointConfig


def endpoints(**configs):
    return {name: EndpointConfig.model_validate(cfg) for name, cfg in configs.items()}


class TestModelsConfigService:
    """Test suite for the models catalog service"""

    @pytest.mark.anyio
    async def test_static_defaults(self):
        service = ModelsConfigService(endpoints(
            openAI={"models": {"default": ["gpt-4o", "gpt-4o-mini"]}},
            anthropic={"models": {"default": ["claude-3-5-haiku-latest"]}},
        ))

        assert await service.get_models_config() == {
            "openAI": ["gpt-4o", "gpt-4o-mini"],
            "anthropic": ["claude-3-5-haiku-latest"],
        }

    @pytest.mark.anyio
    async def test_fetches_openai_models(self):
        service = ModelsConfigService(endpoints(
            openAI={"type": "openai", "models": {"default": ["gpt-4o"], "fetch": True},
                    "settings": {"api_key": "sk-test", "base_url": "https://api.example.com/v1"}},
        ))

        with patch.object(catalog, "fetch_openai_models", new=AsyncMock(return_value=["gpt-4o", "o3-mini"])) as fetch:
            result = await service.get_models_config()

        fetch.assert_awaited_once_with("https://api.example.com/v1", "sk-test", 10.0)
        assert result == {"openAI": ["gpt-4o", "o3-mini"]}

    @pytest.mark.anyio
    async def test_fetch_failure_falls_back_to_defaults(self, caplog):
        """
        Test: Live model listing failures do not break the catalog
        How: Make the ollama fetcher raise
        Ensures: Configured defaults are used and the failure is counted and logged
        """
        service = ModelsConfigService(endpoints(
            ollama={"type": "ollama", "models": {"default": ["llama3.1:8b"], "fetch": True}},
        ))

        with patch.object(catalog, "fetch_ollama_models", new=AsyncMock(side_effect=httpx.ConnectError("refused"))):
            result = await service.get_models_config()

        assert result == {"ollama": ["llama3.1:8b"]}
        assert service.get_stats()["fetch_failures"] == 1
        assert "ollama" in caplog.text

    @pytest.mark.anyio
    async def test_empty_fetch_keeps_defaults(self):
        service = ModelsConfigService(endpoints(
            ollama={"type": "ollama", "models": {"default": ["llama3.1:8b"], "fetch": True}},
        ))

        with patch.object(catalog, "fetch_ollama_models", new=AsyncMock(return_value=[])):
            assert await service.get_models_config() == {"ollama": ["llama3.1:8b"]}

    @pytest.mark.anyio
    async def test_static_endpoints_never_fetch(self):
        service = ModelsConfigService(endpoints(google={"models": {"default": ["gemini-1.5-pro"], "fetch": True}}))

        with patch.object(catalog, "fetch_openai_models", new=AsyncMock()) as fetch_openai, \
             patch.object(catalog, "fetch_ollama_models", new=AsyncMock()) as fetch_ollama:
            await service.get_models_config()

        fetch_openai.assert_not_awaited()
        fetch_ollama.assert_not_awaited()

    @pytest.mark.anyio
    async def test_cached_and_copied(self):
        service = ModelsConfigService(endpoints(openAI={"models": {"default": ["gpt-4o"]}}))

        first = await service.get_models_config()
        first["openAI"].append("tampered")
        second = await service.get_models_config()

        assert second == {"openAI": ["gpt-4o"]}
        assert service.get_stats()["loads"] == 1
        assert service.get_stats()["cache_hits"] == 1

    @pytest.mark.anyio
    async def test_clear_cache_reloads(self):
        service = ModelsConfigService(endpoints(openAI={"models": {"default": ["gpt-4o"]}}))

        await service.get_models_config()
        service.clear_cache()
        await service.get_models_config()

        assert service.get_stats()["loads"] == 2


class TestFetchers:

    @pytest.mark.anyio
    async def test_ollama_listing_shapes(self):
        client = MagicMock()
        client.list = AsyncMock(return_value={"models": [{"name": "phi4:latest"}, {"model": "llama3.1:8b"}, {}]})

        with patch.object(catalog, "AsyncClient", return_value=client):
            assert await fetch_ollama_models("http://ollama:11434") == ["llama3.1:8b", "phi4:latest"]

    @pytest.mark.parametrize("exc,expected", [
        (httpx.ConnectError("refused"), True),
        (httpx.ReadTimeout("slow"), True),
        (ValueError("bad"), False),
    ])
    def test_is_retryable(self, exc, expected):
        assert _is_retryable(exc) is expected
