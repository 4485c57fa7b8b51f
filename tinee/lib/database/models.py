"""Data models for tinee."""

import uuid
from dataclasses import dataclass, field
from typing import List


@dataclass
class Link:
    """Binds an original URL to one or more aliases.
    
    The first alias is always the generated one; custom aliases are appended.
    """
    
    id: str
    url: str
    aliases: List[str] = field(default_factory=list)
    
    @classmethod
    def new(cls, url: str, alias: str) -> "Link":
        """Create a link with a fresh identifier and its generated alias."""
        return cls(id=str(uuid.uuid4()), url=url, aliases=[alias])
    
    def add_alias(self, alias: str) -> None:
        """Append an alias unless the link already has it."""
        if alias not in self.aliases:
            self.aliases.append(alias)
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "url": self.url,
            "aliases": list(self.aliases),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            url=data["url"],
            aliases=list(data.get("aliases", [])),
        )
