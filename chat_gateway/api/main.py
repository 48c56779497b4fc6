"""
FastAPI application entry point.

This is the main FastAPI application that coordinates all API routes and middleware.
It serves as the bridge between HTTP chat requests and the endpoint option pipeline.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from .errors import register_error_handlers
from .routers import chat, files, health, models
from chat_gateway.models.catalog import ModelsConfigService
from chat_gateway.models.config import load_config
from chat_gateway.models.services.files import FileStore

logger = logging.getLogger(__name__)

# Global application state
app_state = {}

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Loads the gateway config once at startup; the model spec catalog inside it
    is read-only for the rest of the process lifetime.
    """
    logger.info("Starting chat gateway...")

    config = load_config()
    app_state["config"] = config
    app_state["models_service"] = ModelsConfigService(config.endpoints)
    app_state["file_store"] = FileStore()

    logger.info("Chat gateway ready to accept requests")

    yield  # Server runs here

    logger.info("Shutting down chat gateway...")
    app_state.clear()

def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    This approach allows for easy testing and configuration management.
    """

    app = FastAPI(
        title="Chat Gateway API",
        description="Request normalization and dispatch for multi-provider chat",
        version="1.0.0",
        lifespan=lifespan
    )

    # Configure CORS middleware for frontend communication
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],  # Common frontend ports
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include API routers
    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(chat.router, prefix="/api/v1/chat", tags=["chat"])
    app.include_router(models.router, prefix="/api/v1/models", tags=["models"])
    app.include_router(files.router, prefix="/api/v1/files", tags=["files"])

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": "Chat Gateway API",
            "version": "1.0.0",
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "chat": "/api/v1/chat",
                "models": "/api/v1/models",
                "files": "/api/v1/files",
                "docs": "/docs",
                "redoc": "/redoc"
            }
        }

    return app

# Create the FastAPI app instance
app = create_app()
