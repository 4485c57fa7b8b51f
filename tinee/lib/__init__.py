"""Core business logic for tinee."""

from .alias import AliasGenerator
from .service import LinkService

__all__ = ["AliasGenerator", "LinkService"]
