"""Pytest configuration and fixtures."""

import pytest

from tinee.lib.alias import AliasGenerator
from tinee.lib.common.logging_config import setup_logging
from tinee.lib.database.memory import MemoryLinkCache, MemoryLinkStore
from tinee.lib.database.models import Link
from tinee.lib.service import LinkService

DOMAIN = "tinee.io"


class SequenceAliasGenerator(AliasGenerator):
    """Alias generator returning predefined aliases, then random ones."""
    
    def __init__(self, aliases):
        super().__init__()
        self.aliases = list(aliases)
    
    def generate(self):
        if self.aliases:
            return self.aliases.pop(0)
        return super().generate()


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create empty in-memory link store."""
    return MemoryLinkStore(logger=logger)


@pytest.fixture
def cache():
    """Create empty in-memory alias cache."""
    return MemoryLinkCache()


@pytest.fixture
def alias_generator():
    """Create alias generator."""
    return AliasGenerator()


@pytest.fixture
def service(store, alias_generator, logger) -> LinkService:
    """Create service instance without cache."""
    return LinkService(
        store=store,
        domain=DOMAIN,
        cache=None,
        alias_generator=alias_generator,
        logger=logger,
    )


@pytest.fixture
def cached_service(store, cache, alias_generator, logger) -> LinkService:
    """Create service instance with in-memory cache."""
    return LinkService(
        store=store,
        domain=DOMAIN,
        cache=cache,
        alias_generator=alias_generator,
        logger=logger,
    )


@pytest.fixture
async def two_links(store):
    """Store links A and B with one generated alias each."""
    link_a = Link(id="A", url="https://a.com", aliases=["abc12345"])
    link_b = Link(id="B", url="https://b.com", aliases=["xyz98765"])
    await store.save(link_a)
    await store.save(link_b)
    return link_a, link_b


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def domain():
    """Domain used by test services."""
    return DOMAIN


@pytest.fixture
def sequence_generator():
    """Factory for alias generators returning predefined aliases first."""
    return SequenceAliasGenerator
