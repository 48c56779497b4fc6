from __future__ import annotations
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .base import ProviderOptions, remove_nullish, split_options

if TYPE_CHECKING:
    from chat_gateway.pipeline.endpoint.schemas import Conversation

LABEL_FIELDS = ("chatGptLabel", "promptPrefix", "tools", "agentOptions", "iconURL", "greeting", "spec", "maxContextTokens")

DEFAULT_AGENT_OPTIONS: Dict[str, Any] = {
    "agent": "functions",
    "skip_completion": True,
    "model": "gpt-4o-mini",
    "temperature": 0,
}


def plugin_keys(tools: Optional[List[Union[str, Dict[str, Any]]]]) -> List[str]:
    """Tools may be given as bare keys or as plugin records with a ``pluginKey``."""
    keys = []
    for tool in tools or []:
        key = tool.get("pluginKey") if isinstance(tool, dict) else tool
        if key:
            keys.append(key)
    return keys


def build_options(endpoint: str, conversation: Conversation, endpoint_type: Optional[str] = None) -> ProviderOptions:
    labels, model_options = split_options(conversation.compact(), LABEL_FIELDS)
    labels["tools"] = plugin_keys(labels.get("tools"))
    labels["agentOptions"] = {**DEFAULT_AGENT_OPTIONS, **(labels.get("agentOptions") or {})}
    return remove_nullish({
        "endpoint": endpoint,
        **labels,
        "modelOptions": model_options,
    })
