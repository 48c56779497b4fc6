"""
Models catalog endpoints.
"""

from fastapi import APIRouter, Depends, Request

from ..models.chat import ModelSpecsResponse
from ..dependencies.state import get_gateway_config, get_models_service
from chat_gateway.models.catalog import ModelsConfigService
from chat_gateway.models.config import GatewayConfig

router = APIRouter()

@router.get("/")
async def list_models(
    request: Request,
    models_service: ModelsConfigService = Depends(get_models_service),
):
    """Available models per endpoint, as attached to every endpoint option."""
    return await models_service.get_models_config(request)

@router.get("/specs", response_model=ModelSpecsResponse)
async def list_model_specs(config: GatewayConfig = Depends(get_gateway_config)):
    """Configured model specs and whether they are enforced."""
    specs = config.model_specs
    if specs is None:
        return ModelSpecsResponse(enforce=False, list=[])
    return ModelSpecsResponse(
        enforce=specs.enforce,
        list=[spec.model_dump(by_alias=True, exclude_none=True) for spec in specs.specs or ()],
    )
