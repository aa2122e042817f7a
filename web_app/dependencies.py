"""FastAPI dependencies for request handlers."""

from fastapi import Request

from velox.context import AppContext


def get_context(request: Request) -> AppContext:
    """Return the application context attached at startup."""
    return request.app.state.context
