from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel


class EModelEndpoint(str, Enum):
    OPENAI = "openAI"
    AZURE_OPENAI = "azureOpenAI"
    GOOGLE = "google"
    ANTHROPIC = "anthropic"
    BEDROCK = "bedrock"
    CUSTOM = "custom"
    AGENTS = "agents"
    GPT_PLUGINS = "gptPlugins"
    ASSISTANTS = "assistants"
    AZURE_ASSISTANTS = "azureAssistants"

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["EModelEndpoint"]:
        try:
            return cls(value)
        except ValueError:
            return None


#the only endpoint allowed to declare tools in a preset
TOOLS_ENDPOINT = EModelEndpoint.GPT_PLUGINS

#builder-defined options record, opaque to the dispatcher
ProviderOptions = Dict[str, Any]

#shared builder signature: (endpoint, conversation, endpoint_type) -> options
Builder = Callable[[str, BaseModel, Optional[str]], ProviderOptions]


def is_agents_endpoint(endpoint: Optional[str]) -> bool:
    return endpoint == EModelEndpoint.AGENTS.value


def remove_nullish(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def split_options(params: Dict[str, Any], keys: tuple[str, ...]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate presentation fields from the model parameters sent upstream."""
    picked = {k: params.pop(k) for k in keys if k in params}
    return picked, params
