"""
Exception handlers that turn pipeline failures into structured error responses.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .models.common import APIError
from chat_gateway.pipeline.endpoint import EndpointOptionError

logger = logging.getLogger(__name__)


async def endpoint_option_error_handler(request: Request, exc: EndpointOptionError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.info
    log(f"{request.method} {request.url.path} rejected: {exc.error_code}: {exc.text}")

    error = APIError(text=exc.text, error_code=exc.error_code, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=error.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EndpointOptionError, endpoint_option_error_handler)
