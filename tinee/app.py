"""
Main entry point for the tinee service.

Concurrency: requests are served concurrently on one event loop per worker
(FastAPI + asyncpg connection pool + redis.asyncio). WORKERS > 1 runs that
many uvicorn processes, each with its own DB pool and its own in-memory
store when STORE_BACKEND=memory.

Environment variables:
    DOMAIN - Domain short URLs are composed with
    STORE_BACKEND - 'postgres' (default) or 'memory'
    DATABASE_URL - PostgreSQL connection URL
    DATABASE_CREATE_TABLES - Create tables on first connection
    REDIS_URL - Redis connection URL (optional)
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Config, load_config
from .lib.alias import AliasGenerator
from .lib.common.logging_config import setup_logging
from .lib.database.base import LinkCache, LinkStore
from .lib.database.cache import RedisLinkCache
from .lib.database.memory import MemoryLinkStore
from .lib.database.postgres import PostgresLinkStore
from .lib.errors import CacheError
from .lib.service import LinkService
from .web_app import create_app


def build_store(config: Config, logger: logging.Logger) -> LinkStore:
    """Create the link store selected by configuration."""
    if config.store_backend == "memory":
        logger.warning("Using in-memory link store; links are lost on restart")
        return MemoryLinkStore(logger=logger)

    logger.info("Using PostgreSQL link store")
    return PostgresLinkStore(
        dsn=config.database_url,
        pool_max_size=config.database_pool_max_size,
        create_tables=config.database_create_tables,
        logger=logger,
    )


async def build_cache(config: Config, logger: logging.Logger) -> Optional[LinkCache]:
    """Create and connect the Redis cache, or None when caching is disabled."""
    if not config.redis_url:
        logger.info("Redis caching disabled")
        return None

    cache = RedisLinkCache(
        redis_url=config.redis_url,
        ttl_seconds=config.cache_ttl_seconds,
        logger=logger,
    )
    try:
        await cache.connect()
    except CacheError as e:
        logger.error(f"{e} - caching disabled")
        await cache.close()
        return None
    return cache


async def build_service(config: Config, logger: logging.Logger) -> LinkService:
    """Wire store, cache and alias generator into a link service."""
    return LinkService(
        store=build_store(config, logger),
        domain=config.domain,
        cache=await build_cache(config, logger),
        alias_generator=AliasGenerator(),
        alias_generation_attempts=config.alias_generation_attempts,
        logger=logger,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting tinee service...")
    service = await build_service(config, logger)
    app.state.service = service
    logger.info("Service started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down tinee service...")
        await service.close()
        logger.info("Service stopped")


def create_server_app(config: Config, logger: logging.Logger) -> FastAPI:
    """Create the FastAPI app whose lifespan owns the service."""
    app = create_app(service_instance=None, config=config, lifespan=lifespan)
    app.state.logger = logger
    return app


def create_app_from_env() -> FastAPI:
    """App factory for uvicorn worker processes, configured from the environment."""
    config = load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    return create_server_app(config, logger)


def serve(config: Config, logger: logging.Logger) -> None:
    """Run the HTTP server until interrupted.

    With more than one worker, uvicorn spawns processes that each build
    their app through create_app_from_env, so they read configuration
    from the environment rather than from `config`.
    """
    if config.workers > 1:
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            "tinee.app:create_app_from_env",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
        return

    app = create_server_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    server = uvicorn.Server(uvicorn_config)

    logger.info(f"Starting server on {config.host}:{config.port}")
    server.run()


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("tinee URL shortening service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    try:
        serve(config, logger)
    except OSError as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
