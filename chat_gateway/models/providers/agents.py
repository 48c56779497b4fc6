from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

from .base import ProviderOptions, remove_nullish, split_options

if TYPE_CHECKING:
    from chat_gateway.pipeline.endpoint.schemas import Conversation

USER_HEADER = "x-user-id"

LABEL_FIELDS = (
    "spec",
    "iconURL",
    "greeting",
    "agent_id",
    "instructions",
    "additional_instructions",
    "maxContextTokens",
    "resendFiles",
)


def request_user(request: Any) -> Optional[str]:
    headers = getattr(request, "headers", None) or {}
    return headers.get(USER_HEADER)


def build_options(request: Any, endpoint: str, conversation: Conversation, endpoint_type: Optional[str] = None) -> ProviderOptions:
    """Agents need the originating request; the dispatcher binds it before the call."""
    labels, model_parameters = split_options(conversation.compact(), LABEL_FIELDS)
    return remove_nullish({
        "endpoint": endpoint,
        "endpointType": endpoint_type,
        **labels,
        "user": request_user(request),
        "model_parameters": model_parameters,
    })
