"""API routes implementation."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from velox.common.url_builder import build_short_url
from velox.context import AppContext
from .schemas import ShortenRequest, ShortenedURL
from ..dependencies import get_context

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenedURL,
    responses={
        400: {"description": "Invalid URL or request body"},
        500: {"description": "Database error"},
        503: {"description": "Store unavailable"},
    },
    summary="Create short URL",
    description="Create a shortened URL for the given original URL.",
)
async def shorten_url(body: ShortenRequest, context: AppContext = Depends(get_context)):
    """Create a shortened URL."""
    mapping = await context.service.create_short_url(body.original)

    return ShortenedURL(
        original=mapping.original,
        shortened=build_short_url(mapping.short_code, context.config.base_url),
    )


@router.get("/shorten", include_in_schema=False)
async def shorten_method_not_allowed():
    """Answer GET /shorten with 405 instead of resolving "shorten" as a code."""
    return JSONResponse(
        content="Method not allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )


@router.get(
    "/health",
    responses={503: {"description": "Store unreachable"}},
    summary="Health check",
    description="Report whether a store connection can be obtained.",
)
async def health_check(context: AppContext = Depends(get_context)):
    """Health check endpoint for load balancers and monitoring."""
    if await context.service.health_check():
        return JSONResponse(content="Healthy")

    return JSONResponse(
        content="Unhealthy",
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
