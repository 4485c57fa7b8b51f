"""Storage layer for tinee."""

from .base import LinkStore, LinkCache
from .models import Link
from .memory import MemoryLinkStore, MemoryLinkCache
from .postgres import PostgresLinkStore
from .cache import RedisLinkCache

__all__ = [
    "LinkStore",
    "LinkCache",
    "Link",
    "MemoryLinkStore",
    "MemoryLinkCache",
    "PostgresLinkStore",
    "RedisLinkCache",
]
