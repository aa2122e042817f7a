#!/usr/bin/env python3
"""
Command-line interface for the Velox URL shortener.

Talks to the Redis store directly, without going through the HTTP service.

Usage:
    velox-cli shorten <url>
    velox-cli get <short_code>
    velox-cli health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from config import load_config
from .common.logging_config import setup_logging
from .common.url_builder import build_short_url
from .database.base import KeyValueStore
from .database.redis_store import RedisStore
from .errors import VeloxError, error_response
from .service import URLShortenerService


def _print_error(message: str) -> None:
    print(json.dumps({"success": False, "error": message}, indent=2), file=sys.stderr)


class VeloxCLI:
    """Command-line interface for the URL shortener."""

    def __init__(self, store: KeyValueStore, base_url: str, verbose: bool = False):
        """Initialize CLI."""
        self.base_url = base_url
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service = URLShortenerService(store=store, logger=self.logger)

    async def cleanup(self):
        """Cleanup resources."""
        await self.service.close()

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        try:
            mapping = await self.service.create_short_url(url)
        except VeloxError as e:
            _print_error(error_response(e)[1])
            return 1

        print(json.dumps({
            "success": True,
            "original": mapping.original,
            "shortened": build_short_url(mapping.short_code, self.base_url),
        }, indent=2))
        return 0

    async def get(self, short_code: str) -> int:
        """Get original URL for a short code."""
        try:
            original_url = await self.service.get_original_url(short_code)
        except VeloxError as e:
            _print_error(error_response(e)[1])
            return 1

        if original_url is None:
            _print_error(f"Short code '{short_code}' not found")
            return 1

        print(json.dumps({
            "success": True,
            "code": short_code,
            "original": original_url,
        }, indent=2))
        return 0

    async def health(self) -> int:
        """Check store health."""
        healthy = await self.service.health_check()
        print(json.dumps({"success": True, "healthy": healthy}, indent=2))
        return 0 if healthy else 1


def build_parser() -> argparse.ArgumentParser:
    config = load_config()

    parser = argparse.ArgumentParser(
        prog="velox-cli",
        description="Velox URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Get original URL
  %(prog)s get 4fRk9Qa2

  # Check store health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--redis-url",
        default=config.redis_url,
        help=f"Redis connection URL (default: from REDIS_URL env or {config.redis_url})"
    )

    parser.add_argument(
        "--base-url",
        default=config.base_url,
        help=f"Base URL for short links (default: from BASE_URL env or {config.base_url})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    get_parser = subparsers.add_parser("get", help="Get original URL")
    get_parser.add_argument("short_code", help="Short code to lookup")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def run(args: argparse.Namespace, store: Optional[KeyValueStore] = None) -> int:
    """Execute the parsed command and return the exit code."""
    if store is None:
        store = RedisStore(redis_url=args.redis_url)

    cli = VeloxCLI(store=store, base_url=args.base_url, verbose=args.verbose)

    try:
        if args.command == "shorten":
            return await cli.shorten(args.url)
        if args.command == "get":
            return await cli.get(args.short_code)
        return await cli.health()
    finally:
        await cli.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
