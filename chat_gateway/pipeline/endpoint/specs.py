from __future__ import annotations
from typing import Optional
import logging

from chat_gateway.models.config import ModelSpecsConfig
from chat_gateway.models.providers.base import TOOLS_ENDPOINT
from .errors import InvalidSpec, NoSpecSelected, PresetParseError, SpecMismatch, ToolsNotAllowedForEndpoint
from .parser import ConversationParseError, parse_compact_convo
from .schemas import Conversation

logger = logging.getLogger(__name__)


def enforce_model_spec(
    conversation: Conversation,
    endpoint: str,
    endpoint_type: Optional[str],
    model_specs: Optional[ModelSpecsConfig],
) -> Conversation:
    """Replace the client conversation with the selected spec's preset when specs are enforced.

    Without an enforced catalog the conversation is returned untouched, even if
    it names a spec. Once a spec is enforced the client's parameters are
    discarded; only the preset is used.
    """
    if model_specs is None or not model_specs.enforced:
        return conversation

    spec_name = conversation.spec
    if not spec_name:
        raise NoSpecSelected()

    model_spec = model_specs.find(spec_name)
    if model_spec is None:
        raise InvalidSpec(details={"spec": spec_name})

    preset = model_spec.preset
    if endpoint != preset.endpoint:
        raise SpecMismatch(details={"spec": spec_name, "endpoint": endpoint, "expected": preset.endpoint})

    if preset.tools is not None and preset.endpoint != TOOLS_ENDPOINT.value:
        raise ToolsNotAllowedForEndpoint(details={"spec": spec_name, "endpoint": preset.endpoint})

    try:
        enforced = parse_compact_convo(endpoint, endpoint_type, preset.to_conversation())
    except ConversationParseError as e:
        logger.error(f"Model spec '{spec_name}' has an invalid preset: {e}")
        raise PresetParseError(details={"spec": spec_name}) from e

    logger.debug(f"Enforced model spec '{spec_name}' for endpoint '{endpoint}'")
    return enforced
