"""
Chat endpoint option API.

The endpoint option is built by the ``build_endpoint_option`` dependency; this
handler is the downstream consumer that awaits pending attachments.
"""

import time
from fastapi import APIRouter, Depends, Request

from ..models.chat import EndpointOptionResponse, EndpointOptionData
from ..dependencies.endpoint_option import build_endpoint_option
from chat_gateway.pipeline.endpoint import EndpointOption

router = APIRouter()

@router.post("/options", response_model=EndpointOptionResponse)
async def create_endpoint_option(
    request: Request,
    option: EndpointOption = Depends(build_endpoint_option),
):
    """
    Build the endpoint option for a chat request.

    This endpoint:
    1. Parses the conversation and enforces model specs when configured
    2. Builds the provider-specific options for the requested endpoint
    3. Waits for attachment processing and returns the combined result
    """
    attachments = None
    if option.attachments is not None:
        records = await option.attachments
        attachments = [record.to_dict() for record in records]

    processing_time = time.time() - getattr(request.state, "build_started", time.time())

    return EndpointOptionResponse(
        success=True,
        message="Endpoint option built successfully",
        data=EndpointOptionData(
            endpoint_option=option.to_dict(),
            attachments=attachments,
            processing_time=processing_time,
        ),
    )
