from __future__ import annotations
from typing import Any, Dict, List, Optional
from os import getenv
import time
import logging

import httpx
from openai import AsyncOpenAI, APIError, APIConnectionError, APITimeoutError
from ollama import AsyncClient, ResponseError
from tenacity import retry, stop_after_attempt, wait_exponential_jitter, retry_if_exception

from chat_gateway.pipeline.endpoint.types import ModelsCatalog
from .config import EndpointConfig

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = {408, 409, 429, 500, 502, 503, 504}


class ModelsFetchError(RuntimeError): ...


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, (APITimeoutError, APIConnectionError)):
        return True
    if isinstance(exc, (httpx.TimeoutException, httpx.ConnectError, httpx.RemoteProtocolError)):
        return True
    if isinstance(exc, (APIError, ResponseError)):
        try:
            return int(getattr(exc, "status_code", 0) or 0) in RETRYABLE_STATUS
        except (TypeError, ValueError):
            return False
    return False


@retry(reraise=True, wait=wait_exponential_jitter(initial=0.5, max=4), stop=stop_after_attempt(3), retry=retry_if_exception(_is_retryable))
async def fetch_openai_models(base_url: Optional[str] = None, api_key: Optional[str] = None, timeout: float = 10.0) -> List[str]:
    async with AsyncOpenAI(base_url=base_url, api_key=api_key, timeout=timeout, max_retries=0) as client:
        page = await client.models.list()
    return sorted(model.id for model in page.data)


@retry(reraise=True, wait=wait_exponential_jitter(initial=0.5, max=4), stop=stop_after_attempt(3), retry=retry_if_exception(_is_retryable))
async def fetch_ollama_models(host: str = "http://localhost:11434", timeout: float = 10.0) -> List[str]:
    client = AsyncClient(host=host, timeout=timeout)
    response = await client.list()

    # older clients return plain dicts, newer ones return typed objects
    if isinstance(response, dict):
        entries = response.get("models", [])
    else:
        entries = getattr(response, "models", None) or []

    names = []
    for entry in entries:
        if isinstance(entry, dict):
            name = entry.get("model") or entry.get("name")
        else:
            name = getattr(entry, "model", None) or getattr(entry, "name", None)
        if name:
            names.append(name)
    return sorted(names)


class ModelsConfigService:
    """Builds the endpoint -> models catalog shared by every chat request.

    Configured defaults are always available; endpoints with ``models.fetch``
    enabled are queried once and fall back to their defaults on failure.
    """

    def __init__(self, endpoints: Dict[str, EndpointConfig]):
        self.endpoints = endpoints
        self._cache: Optional[ModelsCatalog] = None
        self._stats = {"loads": 0, "cache_hits": 0, "fetch_failures": 0, "last_load_ms": 0.0}

    async def get_models_config(self, request: Any = None) -> ModelsCatalog:
        if self._cache is None:
            self._cache = await self.load_models()
        else:
            self._stats["cache_hits"] += 1
        return {endpoint: list(models) for endpoint, models in self._cache.items()}

    async def load_models(self) -> ModelsCatalog:
        start_time = time.perf_counter()
        catalog: ModelsCatalog = {}

        for name, endpoint_cfg in self.endpoints.items():
            models = list(endpoint_cfg.models.default)
            if endpoint_cfg.models.fetch and endpoint_cfg.type != "static":
                try:
                    fetched = await self._fetch(name, endpoint_cfg)
                    if fetched:
                        models = fetched
                except ModelsFetchError as e:
                    self._stats["fetch_failures"] += 1
                    logger.warning(f"Using default models for '{name}': {e}")
            catalog[name] = models

        self._stats["loads"] += 1
        self._stats["last_load_ms"] = (time.perf_counter() - start_time) * 1000
        logger.info(f"Loaded models for {len(catalog)} endpoints")
        return catalog

    async def _fetch(self, name: str, endpoint_cfg: EndpointConfig) -> List[str]:
        settings = endpoint_cfg.settings
        timeout = float(settings.get("timeout", 10.0))
        try:
            if endpoint_cfg.type == "openai":
                api_key = settings.get("api_key") or getenv(settings.get("api_key_env", "OPENAI_API_KEY"))
                return await fetch_openai_models(settings.get("base_url"), api_key, timeout)
            if endpoint_cfg.type == "ollama":
                return await fetch_ollama_models(settings.get("host", "http://localhost:11434"), timeout)
        except Exception as e:
            raise ModelsFetchError(f"{endpoint_cfg.type} model listing failed for '{name}': {e}") from e
        raise ModelsFetchError(f"Unknown endpoint type: {endpoint_cfg.type}")

    def clear_cache(self):
        self._cache = None
        logger.info("Cleared models catalog cache")

    def get_stats(self) -> Dict[str, Any]:
        return dict(self._stats)
