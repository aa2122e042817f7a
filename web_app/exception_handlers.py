"""Exception handlers translating errors into client responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from velox.errors import VeloxError, error_response

logger = logging.getLogger("velox.web")


async def velox_error_handler(request: Request, exc: VeloxError) -> JSONResponse:
    """Render a Velox error as its status code and generic message."""
    status_code, message = error_response(exc)
    return JSONResponse(content=message, status_code=status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies with 400."""
    logger.debug(f"Rejected request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        content="Invalid request body",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to app."""
    app.add_exception_handler(VeloxError, velox_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
