"""Error taxonomy for the Velox URL shortener.

Every failure that can reach a client is one of three kinds:

- ``InvalidURLError``: the submitted URL failed to parse (400)
- ``StoreUnavailableError``: no store connection could be obtained (503)
- ``StoreQueryError``: a store command was sent but failed (500)

``error_response`` is the only place that turns an error into an HTTP
status and client-facing message.
"""

from typing import Tuple


class VeloxError(Exception):
    """Base class for all Velox errors."""

    status_code = 500
    public_message = "Internal server error"


class InvalidURLError(VeloxError):
    """The submitted string is not a well-formed absolute URL."""

    status_code = 400

    def __init__(self, message: str = "Invalid URL format"):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message


class StoreError(VeloxError):
    """Base class for key-value store failures."""


class StoreUnavailableError(StoreError):
    """A connection could not be obtained from the pool."""

    status_code = 503
    public_message = "Service temporarily unavailable"


class StoreQueryError(StoreError):
    """A command reached the store but failed."""

    status_code = 500
    public_message = "Database error"


def error_response(exc: VeloxError) -> Tuple[int, str]:
    """Map an error to its HTTP status code and client-facing message.

    Args:
        exc: The error to translate

    Returns:
        Tuple of (status_code, message)
    """
    return exc.status_code, exc.public_message
