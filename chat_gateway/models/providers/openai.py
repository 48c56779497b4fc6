from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .base import ProviderOptions, remove_nullish, split_options

if TYPE_CHECKING:
    from chat_gateway.pipeline.endpoint.schemas import Conversation

#presentation fields; everything else is sent to the model
LABEL_FIELDS = (
    "modelLabel",
    "chatGptLabel",
    "promptPrefix",
    "resendFiles",
    "imageDetail",
    "iconURL",
    "greeting",
    "spec",
    "maxContextTokens",
)


def build_options(endpoint: str, conversation: Conversation, endpoint_type: Optional[str] = None) -> ProviderOptions:
    """Options for OpenAI and Azure OpenAI, which share one wire protocol."""
    labels, model_options = split_options(conversation.compact(), LABEL_FIELDS)
    labels.setdefault("resendFiles", True)
    return remove_nullish({
        "endpoint": endpoint,
        **labels,
        "modelOptions": model_options,
    })
