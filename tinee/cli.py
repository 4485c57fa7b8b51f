"""
Command-line interface for the tinee service.

Usage:
    tinee serve
    tinee shorten <url> [--alias ALIAS]
    tinee resolve <alias>
    tinee init-db
    tinee health
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from .app import build_service, serve
from .config import Config, load_config
from .lib.common.logging_config import setup_logging
from .lib.database.postgres import PostgresLinkStore
from .lib.errors import InvalidAliasError, InvalidURLError, LinkNotFoundError, TineeError
from .lib.service import LinkService


class TineeCLI:
    """Command-line interface for tinee."""

    def __init__(self, config: Config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(
            level="DEBUG" if verbose else config.log_level,
            json_format=config.log_json,
            stream=sys.stderr,
        )
        self.service: Optional[LinkService] = None

    async def initialize(self):
        """Initialize store, cache and service."""
        self.logger.debug("Initializing tinee...")
        self.service = await build_service(self.config, self.logger)

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    async def shorten(self, url: str, alias: str = "") -> int:
        """Shorten a URL."""
        try:
            short_url = await self.service.shorten(url, alias)
        except (InvalidURLError, InvalidAliasError) as e:
            _print_json({"success": False, "error": str(e)}, file=sys.stderr)
            return 1
        except TineeError as e:
            _print_json({"success": False, "error": f"Unexpected error: {e}"}, file=sys.stderr)
            return 1

        _print_json({"success": True, "short_url": short_url})
        return 0

    async def resolve(self, alias: str) -> int:
        """Print the original URL for an alias."""
        try:
            link = await self.service.find_link(alias)
        except LinkNotFoundError:
            _print_json({"success": False, "error": f"Alias '{alias}' not found"}, file=sys.stderr)
            return 1
        except TineeError as e:
            _print_json({"success": False, "error": f"Unexpected error: {e}"}, file=sys.stderr)
            return 1

        _print_json({"success": True, "alias": alias, "url": link.url, "aliases": link.aliases})
        return 0

    async def init_db(self) -> int:
        """Create the PostgreSQL tables."""
        store = self.service.store
        if not isinstance(store, PostgresLinkStore):
            _print_json({"success": False, "error": "init-db requires the postgres store backend"}, file=sys.stderr)
            return 1

        try:
            await store.ensure_schema()
        except TineeError as e:
            _print_json({"success": False, "error": str(e)}, file=sys.stderr)
            return 1

        _print_json({"success": True, "message": "Tables created"})
        return 0

    async def health(self) -> int:
        """Print store and cache health."""
        health = await self.service.health_check()
        _print_json(health)
        return 0 if health["overall"] else 1


def _print_json(data: dict, file=None) -> None:
    print(json.dumps(data, indent=2), file=file or sys.stdout)


async def _run(args: argparse.Namespace, config: Config) -> int:
    cli = TineeCLI(config, verbose=args.verbose)
    await cli.initialize()
    try:
        if args.command == "shorten":
            return await cli.shorten(args.url, args.alias)
        if args.command == "resolve":
            return await cli.resolve(args.alias)
        if args.command == "init-db":
            return await cli.init_db()
        return await cli.health()
    finally:
        await cli.cleanup()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinee",
        description="tinee URL shortening service",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Run the HTTP server")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--alias", default="", help="Custom alias")

    resolve_parser = subparsers.add_parser("resolve", help="Get the original URL for an alias")
    resolve_parser.add_argument("alias", help="Alias to resolve")

    subparsers.add_parser("init-db", help="Create the PostgreSQL tables")
    subparsers.add_parser("health", help="Check store and cache health")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = load_config()

    if args.command == "serve":
        logger = setup_logging(
            level="DEBUG" if args.verbose else config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
        )
        serve(config, logger)
        return 0

    return asyncio.run(_run(args, config))


if __name__ == "__main__":
    sys.exit(main())
