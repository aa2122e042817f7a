"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    original: str = Field(..., description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"original": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class ShortenedURL(BaseModel):
    """Response after shortening a URL."""

    original: str = Field(..., description="The original long URL")
    shortened: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "original": "https://example.com/very/long/path",
                    "shortened": "http://localhost:8082/4fRk9Qa2",
                }
            ]
        }
    }
