"""In-process link store and cache."""

import copy
import logging
from typing import Dict, Optional

from ..errors import LinkNotFoundError, StoreError
from .base import LinkCache, LinkStore
from .models import Link


class MemoryLinkStore(LinkStore):
    """Link store kept in process memory.

    Applies the same uniqueness rules as the PostgreSQL store: one link per
    URL, one link per alias, and a link's URL never changes. Links are
    copied on the way in and out so callers cannot mutate stored state.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, Link] = {}
        self._ids_by_url: Dict[str, str] = {}
        self._ids_by_alias: Dict[str, str] = {}

    async def save(self, link: Link) -> None:
        existing = self._links.get(link.id)
        if existing is not None and existing.url != link.url:
            raise StoreError(f"Link {link.id} already stores a different URL")

        owner = self._ids_by_url.get(link.url)
        if owner is not None and owner != link.id:
            raise StoreError(f"URL already stored by link {owner}")

        for alias in link.aliases:
            owner = self._ids_by_alias.get(alias)
            if owner is not None and owner != link.id:
                raise StoreError(f"Alias '{alias}' already stored by link {owner}")

        # Aliases are append-only
        stored = Link(id=link.id, url=link.url, aliases=list(existing.aliases) if existing is not None else [])
        for alias in link.aliases:
            stored.add_alias(alias)

        self._links[stored.id] = stored
        self._ids_by_url[stored.url] = stored.id
        for alias in stored.aliases:
            self._ids_by_alias[alias] = stored.id

        self.logger.debug(f"Saved link {stored.id} with aliases {stored.aliases}")

    async def find_by_url(self, url: str) -> Link:
        link_id = self._ids_by_url.get(url)
        if link_id is None:
            raise LinkNotFoundError(f"No link for URL {url}")
        return copy.deepcopy(self._links[link_id])

    async def find_by_alias(self, alias: str) -> Link:
        link_id = self._ids_by_alias.get(alias)
        if link_id is None:
            raise LinkNotFoundError(f"No link for alias '{alias}'")
        return copy.deepcopy(self._links[link_id])

    def __len__(self) -> int:
        return len(self._links)


class MemoryLinkCache(LinkCache):
    """Dict-backed alias cache without expiry."""

    def __init__(self):
        self._links: Dict[str, Link] = {}

    async def get(self, alias: str) -> Optional[Link]:
        link = self._links.get(alias)
        return copy.deepcopy(link) if link is not None else None

    async def set(self, alias: str, link: Link) -> None:
        self._links[alias] = copy.deepcopy(link)

    def __len__(self) -> int:
        return len(self._links)
