"""Abstract base classes for link stores and alias caches."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Link


class LinkStore(ABC):
    """Durable storage for links.

    Implementations signal absence with LinkNotFoundError and wrap every
    other failure in StoreError. Alias uniqueness must be enforced by the
    store itself: saving a link whose alias already belongs to another
    link raises StoreError.
    """

    @abstractmethod
    async def save(self, link: Link) -> None:
        """Insert or update a link by its identifier.

        Args:
            link: The link to persist

        Raises:
            StoreError: If the link could not be saved
        """
        pass

    @abstractmethod
    async def find_by_url(self, url: str) -> Link:
        """Find the link for an original URL.

        Args:
            url: The original long URL (exact match)

        Returns:
            The stored link

        Raises:
            LinkNotFoundError: If no link exists for the URL
            StoreError: On any other failure
        """
        pass

    @abstractmethod
    async def find_by_alias(self, alias: str) -> Link:
        """Find the link owning an alias.

        Args:
            alias: Generated or custom alias

        Returns:
            The stored link

        Raises:
            LinkNotFoundError: If no link owns the alias
            StoreError: On any other failure
        """
        pass

    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        return True

    async def close(self) -> None:
        """Release store resources."""
        pass


class LinkCache(ABC):
    """Best-effort alias to link cache. Never authoritative."""

    @abstractmethod
    async def get(self, alias: str) -> Optional[Link]:
        """Get a cached link.

        Args:
            alias: The alias to look up

        Returns:
            Cached link or None on a miss

        Raises:
            CacheError: If the cache could not be queried
        """
        pass

    @abstractmethod
    async def set(self, alias: str, link: Link) -> None:
        """Cache a link under an alias.

        Raises:
            CacheError: If the link could not be cached
        """
        pass

    async def health_check(self) -> bool:
        """Check if the cache is healthy."""
        return True

    async def close(self) -> None:
        """Release cache resources."""
        pass
