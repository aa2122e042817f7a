"""Configuration management for the Velox URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8082",
        description="Base URL for generating short URLs"
    )

    # Redis settings
    redis_url: str = Field(
        default="redis://127.0.0.1:6379/0",
        description="Redis connection URL for the URL mapping store"
    )

    redis_max_connections: int = Field(
        default=16,
        ge=1,
        description="Maximum number of pooled Redis connections"
    )

    redis_connect_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Socket connect timeout for Redis in seconds"
    )

    # Server settings
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind to"
    )

    port: int = Field(
        default=8082,
        description="Port to listen on"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
        "frozen": True,
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
