"""FastAPI application factory."""

from fastapi import FastAPI

from velox.context import AppContext
from .api import api_router
from .web import web_router
from .exception_handlers import register_exception_handlers
from .middleware.logging import LoggingMiddleware


def create_app(context: AppContext, lifespan=None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        context: Application context with config, store and service
        lifespan: Optional lifespan context manager

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Velox URL Shortener",
        description="URL shortening service backed by Redis",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.state.context = context

    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    # The API router goes first so /shorten and /health are not read as codes
    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
