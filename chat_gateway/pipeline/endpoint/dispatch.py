from __future__ import annotations
from functools import partial
from typing import Any, Dict, Optional
import logging

from chat_gateway.models.providers import agents, anthropic, assistants, bedrock, custom, google, openai, plugins
from chat_gateway.models.providers.base import Builder, EModelEndpoint, is_agents_endpoint
from .errors import UnknownProvider

logger = logging.getLogger(__name__)

# protocol-compatible variants share one builder
BUILDERS: Dict[EModelEndpoint, Any] = {
    EModelEndpoint.OPENAI: openai.build_options,
    EModelEndpoint.AZURE_OPENAI: openai.build_options,
    EModelEndpoint.GOOGLE: google.build_options,
    EModelEndpoint.ANTHROPIC: anthropic.build_options,
    EModelEndpoint.BEDROCK: bedrock.build_options,
    EModelEndpoint.CUSTOM: custom.build_options,
    EModelEndpoint.GPT_PLUGINS: plugins.build_options,
    EModelEndpoint.ASSISTANTS: assistants.build_options,
    EModelEndpoint.AZURE_ASSISTANTS: assistants.build_options,
    EModelEndpoint.AGENTS: agents.build_options,
}


def bind_request(builder: Any, request: Any) -> Builder:
    """Adapt a request-taking builder to the shared (endpoint, conversation, endpoint_type) signature."""
    return partial(builder, request)


def get_builder(endpoint: str, endpoint_type: Optional[str], request: Any = None) -> Builder:
    key = endpoint_type or endpoint
    provider = EModelEndpoint.lookup(key)
    if provider is None or provider not in BUILDERS:
        raise UnknownProvider(f"Unknown endpoint: {key}", details={"endpoint": endpoint, "endpointType": endpoint_type})

    builder = BUILDERS[provider]
    if is_agents_endpoint(provider.value):
        return bind_request(builder, request)
    return builder
