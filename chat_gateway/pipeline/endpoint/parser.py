from __future__ import annotations
from typing import Any, Dict, Mapping, Optional
import logging

from pydantic import ValidationError

from chat_gateway.models.providers.base import EModelEndpoint
from .schemas import CONVERSATION_SCHEMAS, Conversation, GenericConversation

logger = logging.getLogger(__name__)

#routing and transport keys, never conversation parameters
NON_CONVERSATION_KEYS = ("endpoint", "endpointType", "endpoint_type", "files")


class ConversationParseError(ValueError): ...


def parse_compact_convo(endpoint: str, endpoint_type: Optional[str], conversation: Mapping[str, Any]) -> Conversation:
    """Normalize a raw conversation payload (client body or preset).

    The schema is chosen by ``endpoint_type`` when given, else ``endpoint``.
    Identifiers without a schema parse leniently; whether the provider exists
    is decided at dispatch.
    """
    if not isinstance(conversation, Mapping):
        raise ConversationParseError(f"Conversation must be a mapping, got {type(conversation).__name__}")

    key = EModelEndpoint.lookup(endpoint_type or endpoint)
    schema = CONVERSATION_SCHEMAS.get(key, GenericConversation) if key else GenericConversation

    payload: Dict[str, Any] = {k: v for k, v in conversation.items() if k not in NON_CONVERSATION_KEYS}
    payload["endpoint"] = endpoint
    if endpoint_type is not None:
        payload["endpointType"] = endpoint_type

    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        logger.debug(f"Conversation for '{endpoint}' failed validation: {e}")
        raise ConversationParseError(str(e)) from e
