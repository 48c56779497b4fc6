from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .base import ProviderOptions, remove_nullish, split_options

if TYPE_CHECKING:
    from chat_gateway.pipeline.endpoint.schemas import Conversation

LABEL_FIELDS = ("examples", "modelLabel", "promptPrefix", "iconURL", "greeting", "spec", "maxContextTokens")


def build_options(endpoint: str, conversation: Conversation, endpoint_type: Optional[str] = None) -> ProviderOptions:
    labels, model_options = split_options(conversation.compact(), LABEL_FIELDS)
    return remove_nullish({
        "endpoint": endpoint,
        **labels,
        "modelOptions": model_options,
    })
