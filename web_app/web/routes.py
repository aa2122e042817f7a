"""Welcome and redirect routes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, Response

from velox.context import AppContext
from ..dependencies import get_context

router = APIRouter()

WELCOME_MESSAGE = "Welcome to Velox URL Shortener!"


def permanent_redirect(location: str) -> Response:
    """Build a 308 whose Location header is exactly the stored URL.

    The value is sent as UTF-8 bytes without quoting. Control characters
    never reach here because the validator rejects them.
    """
    response = Response(status_code=status.HTTP_308_PERMANENT_REDIRECT)
    response.raw_headers.append((b"location", location.encode("utf-8")))
    return response


@router.get("/", include_in_schema=False)
async def index():
    """Serve the welcome message."""
    return JSONResponse(content=WELCOME_MESSAGE)


@router.get(
    "/{short_code}",
    status_code=status.HTTP_308_PERMANENT_REDIRECT,
    responses={404: {"description": "Short code not found"}},
    summary="Resolve short URL",
)
async def redirect_to_url(short_code: str, context: AppContext = Depends(get_context)):
    """Redirect to the original URL."""
    original_url = await context.service.get_original_url(short_code)

    if original_url is None:
        return JSONResponse(
            content="URL not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return permanent_redirect(original_url)
