"""
Health check endpoints for monitoring and diagnostics.

These endpoints help you monitor the gateway's health, dependencies,
and readiness - essential for production deployment.
"""

import time
from fastapi import APIRouter, Depends
from datetime import datetime

from ..models.common import HealthStatus
from ..dependencies.state import get_file_store, get_gateway_config, get_models_service
from chat_gateway.models.catalog import ModelsConfigService
from chat_gateway.models.config import GatewayConfig
from chat_gateway.models.services.files import FileStore

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()

@router.get("/", response_model=HealthStatus)
async def health_check(
    config: GatewayConfig = Depends(get_gateway_config),
    models_service: ModelsConfigService = Depends(get_models_service),
    file_store: FileStore = Depends(get_file_store),
):
    """
    Basic health check endpoint.

    Returns the status of the API and its dependencies.
    Useful for load balancers and monitoring systems.
    """

    uptime = time.time() - _server_start_time

    dependencies = {}

    file_stats = file_store.get_stats()
    dependencies["file_store"] = f"ok ({file_stats['file_count']} files)"

    models_stats = models_service.get_stats()
    if models_stats["loads"]:
        dependencies["models_catalog"] = f"ok ({models_stats['fetch_failures']} fetch failures)"
    else:
        dependencies["models_catalog"] = "not loaded"

    specs = config.model_specs
    if specs is None:
        dependencies["model_specs"] = "not configured"
    else:
        dependencies["model_specs"] = f"{len(specs.specs or ())} specs, enforce={specs.enforce}"

    return HealthStatus(
        status="healthy",
        version="1.0.0",
        uptime=uptime,
        dependencies=dependencies
    )

@router.get("/ready")
async def readiness_check(config: GatewayConfig = Depends(get_gateway_config)):
    """
    Readiness probe for Kubernetes/container deployments.

    Returns ready only when at least one endpoint is configured.
    """
    if not config.endpoints:
        return {"ready": False, "reason": "No endpoints configured"}

    return {"ready": True, "timestamp": datetime.utcnow().isoformat()}
