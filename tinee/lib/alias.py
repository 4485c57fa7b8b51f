"""Alias generation utilities."""

import secrets
import string

# Base62 characters (alphanumeric, case-sensitive)
ALIAS_ALPHABET = string.ascii_letters + string.digits

GENERATED_ALIAS_LENGTH = 8


class AliasGenerator:
    """Generate random aliases for links.
    
    Every character is drawn independently and uniformly from the base62
    alphabet using the operating system CSPRNG, so generated aliases are
    not guessable from previous ones. With 62**8 (about 2.2e14) possible
    aliases the chance that a new alias collides with one of n stored
    aliases is n / 2.2e14.
    """
    
    def __init__(self, length: int = GENERATED_ALIAS_LENGTH):
        """Initialize alias generator.
        
        Args:
            length: Length of generated aliases
        """
        if length < 1:
            raise ValueError("Alias length must be positive")
        self.length = length
    
    def generate(self) -> str:
        """Generate a random alias."""
        return "".join(secrets.choice(ALIAS_ALPHABET) for _ in range(self.length))
