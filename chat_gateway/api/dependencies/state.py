"""
Access to application state created at startup.

The gateway config, models catalog service and file store are created once in
the app lifespan and shared read-only by every request.
"""

from chat_gateway.models.catalog import ModelsConfigService
from chat_gateway.models.config import GatewayConfig
from chat_gateway.models.services.files import FileStore


def get_gateway_config() -> GatewayConfig:
    """FastAPI dependency to get the loaded gateway config from app state."""
    from ..main import app_state
    return app_state["config"]

def get_models_service() -> ModelsConfigService:
    """FastAPI dependency to get the models catalog service from app state."""
    from ..main import app_state
    return app_state["models_service"]

def get_file_store() -> FileStore:
    """FastAPI dependency to get the file store from app state."""
    from ..main import app_state
    return app_state["file_store"]
