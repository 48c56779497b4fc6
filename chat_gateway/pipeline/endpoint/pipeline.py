from __future__ import annotations
from typing import Any, Mapping, Optional
import logging

from chat_gateway.models.config import ModelSpecsConfig
from .dispatch import get_builder
from .enrich import GetModelsConfig, ProcessFiles, enrich_endpoint_option
from .errors import ParseError
from .parser import ConversationParseError, parse_compact_convo
from .specs import enforce_model_spec
from .types import EndpointOption

logger = logging.getLogger(__name__)


class EndpointOptionPipeline:
    """Normalize a chat request into the endpoint option handed to downstream handlers.

    Steps run in order: parse the client conversation, enforce the model spec
    catalog (when enabled), dispatch to the endpoint's option builder, then
    attach the models catalog and the pending attachment task. Any
    ``EndpointOptionError`` is terminal and nothing is returned.
    """

    def __init__(
        self,
        get_models_config: GetModelsConfig,
        process_files: ProcessFiles,
        model_specs: Optional[ModelSpecsConfig] = None,
    ):
        self.get_models_config = get_models_config
        self.process_files = process_files
        self.model_specs = model_specs

    async def build(self, request: Any, body: Mapping[str, Any]) -> EndpointOption:
        endpoint = body.get("endpoint")
        endpoint_type = body.get("endpointType")

        try:
            conversation = parse_compact_convo(endpoint, endpoint_type, body)
        except ConversationParseError as e:
            logger.info(f"Rejected conversation for endpoint '{endpoint}': {e}")
            raise ParseError() from e

        conversation = enforce_model_spec(conversation, endpoint, endpoint_type, self.model_specs)

        builder = get_builder(endpoint, endpoint_type, request)
        option = EndpointOption(
            endpoint=endpoint,
            endpoint_type=endpoint_type,
            options=builder(endpoint, conversation, endpoint_type),
        )

        return await enrich_endpoint_option(
            option,
            request,
            body.get("files"),
            self.get_models_config,
            self.process_files,
        )
