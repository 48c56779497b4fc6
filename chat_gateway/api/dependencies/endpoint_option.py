"""
Endpoint option dependency.

Runs the endpoint option pipeline for a chat request and stores the result on
``request.state.endpoint_option`` for the handlers that follow. Failures raise
``EndpointOptionError``, which the registered exception handler reports.
"""

import time
from functools import partial
from fastapi import Depends, Request

from .state import get_file_store, get_gateway_config, get_models_service
from ..models.chat import ChatRequestBody
from chat_gateway.models.catalog import ModelsConfigService
from chat_gateway.models.config import GatewayConfig
from chat_gateway.models.services.files import FileStore, process_files
from chat_gateway.pipeline.endpoint import EndpointOption, EndpointOptionPipeline


async def build_endpoint_option(
    request: Request,
    body: ChatRequestBody,
    config: GatewayConfig = Depends(get_gateway_config),
    models_service: ModelsConfigService = Depends(get_models_service),
    file_store: FileStore = Depends(get_file_store),
) -> EndpointOption:
    request.state.build_started = time.time()

    pipeline = EndpointOptionPipeline(
        get_models_config=models_service.get_models_config,
        process_files=partial(process_files, file_store),
        model_specs=config.model_specs,
    )
    option = await pipeline.build(request, body.to_body())

    request.state.endpoint_option = option
    return option
