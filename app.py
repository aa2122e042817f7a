#!/usr/bin/env python3
"""
Main entry point for the Velox URL shortener service.

Concurrency: requests are served concurrently on one event loop
(FastAPI + redis.asyncio). The Redis connection pool is the only shared
resource; each store command borrows a connection and returns it.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links
    REDIS_URL - Redis connection URL
    REDIS_MAX_CONNECTIONS - Redis connection pool size
    HOST - Host to bind to
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from velox.context import AppContext
from velox.database.redis_store import RedisStore
from velox.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    context = app.state.context
    logger = context.service.logger

    logger.info(f"Serving short URLs under {context.config.base_url}")

    yield

    logger.info("Shutting down URL shortener service...")
    await context.service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Velox URL Shortener")
    logger.info(f"Configuration: {config.model_dump()}")

    logger.info(f"Using Redis at {config.redis_url}")
    store = RedisStore(
        redis_url=config.redis_url,
        max_connections=config.redis_max_connections,
        connect_timeout=config.redis_connect_timeout,
        logger=logger.getChild("store"),
    )

    context = AppContext.build(config=config, store=store, logger=logger.getChild("service"))
    app = create_app(context, lifespan=lifespan)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server at http://{config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
