from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .base import EModelEndpoint, ProviderOptions, remove_nullish, split_options
from .openai import LABEL_FIELDS

if TYPE_CHECKING:
    from chat_gateway.pipeline.endpoint.schemas import Conversation


def build_options(endpoint: str, conversation: Conversation, endpoint_type: Optional[str] = None) -> ProviderOptions:
    # custom endpoints speak the OpenAI protocol under an operator-chosen name
    labels, model_options = split_options(conversation.compact(), LABEL_FIELDS)
    labels.setdefault("resendFiles", True)
    return remove_nullish({
        "endpoint": endpoint,
        "endpointType": endpoint_type or EModelEndpoint.CUSTOM.value,
        **labels,
        "modelOptions": model_options,
    })
