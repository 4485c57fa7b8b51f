"""Redis cache layer for tinee."""

import json
import logging
from typing import Optional

import redis.asyncio as redis

from ..errors import CacheError
from .base import LinkCache
from .models import Link


class RedisLinkCache(LinkCache):
    """Redis cache for alias to link lookups."""

    KEY_PREFIX = "tinee:link:"

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis cache.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            ttl_seconds: TTL for cached links, 0 keeps them without expiry
            client: Existing client to use instead of connecting to redis_url
            logger: Optional logger instance
        """
        if client is None and redis_url is None:
            raise ValueError("Either redis_url or client is required")

        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or logging.getLogger(__name__)
        if client is None:
            client = redis.from_url(
                redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        self.client = client
        self.logger.info(f"Redis cache enabled with TTL={ttl_seconds}s")

    async def connect(self) -> None:
        """Verify the connection to Redis."""
        try:
            await self.client.ping()
        except redis.RedisError as e:
            raise CacheError(f"Failed to connect to Redis: {e}") from e
        self.logger.info("Connected to Redis")

    async def get(self, alias: str) -> Optional[Link]:
        """Get cached link.

        Args:
            alias: The alias

        Returns:
            Cached link or None
        """
        try:
            value = await self.client.get(self.get_cache_key(alias))
        except redis.RedisError as e:
            raise CacheError(f"Cache get error: {e}") from e

        if value is None:
            return None

        try:
            return Link.from_dict(json.loads(value))
        except (ValueError, KeyError, TypeError) as e:
            raise CacheError(f"Corrupt cache entry for '{alias}': {e}") from e

    async def set(self, alias: str, link: Link) -> None:
        """Cache link under alias.

        Args:
            alias: The alias
            link: Link to cache
        """
        value = json.dumps(link.to_dict())
        try:
            await self.client.set(
                self.get_cache_key(alias),
                value,
                ex=self.ttl_seconds or None,
            )
        except redis.RedisError as e:
            raise CacheError(f"Cache set error: {e}") from e

    async def health_check(self) -> bool:
        try:
            await self.client.ping()
            return True
        except redis.RedisError as e:
            self.logger.error(f"Cache health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        await self.client.aclose()
        self.logger.info("Redis connection closed")

    def get_cache_key(self, alias: str) -> str:
        """Generate cache key for alias."""
        return f"{self.KEY_PREFIX}{alias}"
