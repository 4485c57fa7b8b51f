"""Tests for the Redis cache layer."""

import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from tinee.lib.database.cache import RedisLinkCache
from tinee.lib.database.models import Link
from tinee.lib.errors import CacheError

LINK = Link(id="A", url="https://a.com", aliases=["abc12345", "mylink"])


@pytest.fixture
def client():
    """Redis client double."""
    return AsyncMock()


@pytest.fixture
def redis_cache(client, logger):
    return RedisLinkCache(client=client, ttl_seconds=60, logger=logger)


class TestRedisLinkCache:
    """Test Redis link cache."""
    
    async def test_miss(self, redis_cache, client):
        client.get.return_value = None
        
        assert await redis_cache.get("abc12345") is None
        client.get.assert_awaited_once_with("tinee:link:abc12345")
    
    async def test_hit(self, redis_cache, client):
        client.get.return_value = json.dumps(LINK.to_dict())
        
        assert await redis_cache.get("mylink") == LINK
    
    async def test_set(self, redis_cache, client):
        await redis_cache.set("abc12345", LINK)
        
        client.set.assert_awaited_once_with(
            "tinee:link:abc12345",
            json.dumps(LINK.to_dict()),
            ex=60,
        )
    
    async def test_set_without_ttl(self, client, logger):
        cache = RedisLinkCache(client=client, ttl_seconds=0, logger=logger)
        
        await cache.set("abc12345", LINK)
        
        assert client.set.await_args.kwargs["ex"] is None
    
    async def test_get_error(self, redis_cache, client):
        client.get.side_effect = redis.ConnectionError("down")
        
        with pytest.raises(CacheError):
            await redis_cache.get("abc12345")
    
    async def test_set_error(self, redis_cache, client):
        client.set.side_effect = redis.ConnectionError("down")
        
        with pytest.raises(CacheError):
            await redis_cache.set("abc12345", LINK)
    
    async def test_corrupt_entry(self, redis_cache, client):
        client.get.return_value = "{not json"
        
        with pytest.raises(CacheError):
            await redis_cache.get("abc12345")
    
    async def test_connect_error(self, redis_cache, client):
        client.ping.side_effect = redis.ConnectionError("down")
        
        with pytest.raises(CacheError):
            await redis_cache.connect()
        assert await redis_cache.health_check() is False
    
    async def test_health_check(self, redis_cache, client):
        client.ping.return_value = True
        
        assert await redis_cache.health_check() is True
    
    async def test_close(self, redis_cache, client):
        await redis_cache.close()
        
        client.aclose.assert_awaited_once()
    
    def test_requires_url_or_client(self):
        with pytest.raises(ValueError):
            RedisLinkCache()
    
    def test_cache_key(self, redis_cache):
        assert redis_cache.get_cache_key("mylink") == "tinee:link:mylink"
