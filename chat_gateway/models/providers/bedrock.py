from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .base import ProviderOptions, remove_nullish, split_options

if TYPE_CHECKING:
    from chat_gateway.pipeline.endpoint.schemas import Conversation

LABEL_FIELDS = ("modelLabel", "promptPrefix", "resendFiles", "iconURL", "greeting", "spec", "maxContextTokens")


def build_options(endpoint: str, conversation: Conversation, endpoint_type: Optional[str] = None) -> ProviderOptions:
    # bedrock clients read model_parameters rather than modelOptions
    labels, model_parameters = split_options(conversation.compact(), LABEL_FIELDS)
    labels.setdefault("resendFiles", True)
    return remove_nullish({
        "endpoint": endpoint,
        "endpointType": endpoint_type,
        **labels,
        "model_parameters": model_parameters,
    })
