"""Business logic service for tinee."""

import logging
from typing import Dict, Optional

from .alias import AliasGenerator
from .common.url_builder import build_short_url
from .common.validators import validate_custom_alias, validate_url
from .database.base import LinkCache, LinkStore
from .database.models import Link
from .errors import CacheError, InvalidAliasError, LinkNotFoundError


class LinkService:
    """Service layer for shortening URLs and resolving aliases.

    The service keeps no state between calls besides its configuration.
    Alias reservation is read-then-write: two concurrent calls claiming the
    same new URL or custom alias can both pass their checks, and only the
    store's uniqueness constraints stop the second write (it fails with
    StoreError).
    """

    def __init__(
        self,
        store: LinkStore,
        domain: str,
        cache: Optional[LinkCache] = None,
        alias_generator: Optional[AliasGenerator] = None,
        alias_generation_attempts: int = 5,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link service.

        Args:
            store: Link store
            domain: Domain short URLs are composed with
            cache: Optional alias cache
            alias_generator: Optional alias generator
            alias_generation_attempts: Aliases tried before giving up on collisions
            logger: Optional logger
        """
        if alias_generation_attempts < 1:
            raise ValueError("alias_generation_attempts must be at least 1")

        self.store = store
        self.domain = domain
        self.cache = cache
        self.generator = alias_generator or AliasGenerator()
        self.alias_generation_attempts = alias_generation_attempts
        self.logger = logger or logging.getLogger(__name__)

    async def shorten(self, url: str, custom_alias: str = "") -> str:
        """Shorten a URL, optionally registering a custom alias for it.

        Shortening a known URL reuses its link. Without a custom alias the
        generated alias is returned; with one, the alias is appended to the
        link unless it is already registered for it.

        Args:
            url: The original long URL
            custom_alias: Optional custom alias

        Returns:
            Short URL (domain/alias)

        Raises:
            InvalidURLError: If the URL is malformed
            InvalidAliasError: If the custom alias is malformed or taken by another URL
            StoreError: On store failures
        """
        validate_url(url)
        if custom_alias:
            validate_custom_alias(custom_alias)

        try:
            link = await self.store.find_by_url(url)
        except LinkNotFoundError:
            if custom_alias and await self._alias_owner(custom_alias) is not None:
                raise InvalidAliasError(f"Alias '{custom_alias}' is already taken") from None
            link = await self.create_link(url)

        if not custom_alias:
            return self.short_url(link.aliases[0])

        owner = await self._alias_owner(custom_alias)
        if owner is None:
            link.add_alias(custom_alias)
            await self.store.save(link)
            self.logger.info(f"Added alias {custom_alias} to link {link.id}")
        elif owner.id != link.id:
            raise InvalidAliasError(f"Alias '{custom_alias}' is already taken")

        return self.short_url(custom_alias)

    async def create_link(self, url: str) -> Link:
        """Create and persist a link with a freshly generated alias.

        Args:
            url: The original long URL

        Returns:
            The new link

        Raises:
            InvalidAliasError: If every generated alias collided
            StoreError: On store failures
        """
        for attempt in range(1, self.alias_generation_attempts + 1):
            alias = self.generator.generate()
            if await self._alias_owner(alias) is None:
                break
            self.logger.warning(f"Generated alias collision on attempt {attempt}: {alias}")
        else:
            raise InvalidAliasError(
                f"Unable to generate a unique alias after {self.alias_generation_attempts} attempts"
            )

        link = Link.new(url, alias)
        await self.store.save(link)
        self.logger.info(f"Created link {link.id}: {alias} -> {url}")
        return link

    async def link_by_alias(self, alias: str) -> Link:
        """Get the link owning an alias, reading through the cache.

        Args:
            alias: Generated or custom alias

        Returns:
            The link

        Raises:
            LinkNotFoundError: If no link owns the alias
            StoreError: On store failures
        """
        if self.cache is not None:
            try:
                cached = await self.cache.get(alias)
            except CacheError as e:
                self.logger.warning(f"Cache lookup failed for {alias}: {e}")
            else:
                if cached is not None:
                    self.logger.debug(f"Cache hit for {alias}")
                    return cached

        link = await self.store.find_by_alias(alias)

        if self.cache is not None:
            try:
                await self.cache.set(alias, link)
            except CacheError as e:
                self.logger.warning(f"Cache update failed for {alias}: {e}")

        return link

    async def find_link(self, alias: str) -> Link:
        """Get the link owning an alias straight from the store.

        Cached links can miss custom aliases appended after they were
        cached; their URL never changes. Use this when the alias list
        must be current.

        Raises:
            LinkNotFoundError: If no link owns the alias
            StoreError: On store failures
        """
        return await self.store.find_by_alias(alias)

    async def resolve_url(self, alias: str) -> str:
        """Get the original URL for an alias.

        Raises:
            LinkNotFoundError: If no link owns the alias
        """
        link = await self.link_by_alias(alias)
        return link.url

    def short_url(self, alias: str) -> str:
        return build_short_url(alias, self.domain)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()
        cache_healthy = await self.cache.health_check() if self.cache is not None else True

        return {
            "store": store_healthy,
            "cache": cache_healthy,
            "overall": store_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close store and cache connections."""
        await self.store.close()
        if self.cache is not None:
            await self.cache.close()

    async def _alias_owner(self, alias: str) -> Optional[Link]:
        """Return the link owning alias, or None if the alias is free."""
        try:
            return await self.store.find_by_alias(alias)
        except LinkNotFoundError:
            return None
