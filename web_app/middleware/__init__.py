"""Middleware for the Velox web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
