"""Exceptions raised by the tinee core."""


class TineeError(Exception):
    """Base class for all tinee errors."""


class InvalidURLError(TineeError, ValueError):
    """The URL to shorten is not a well-formed http(s) URL."""


class InvalidAliasError(TineeError, ValueError):
    """The alias is malformed, already taken by another link, or could not be generated."""


class LinkNotFoundError(TineeError, LookupError):
    """No link is stored for the requested alias or URL."""


class StoreError(TineeError):
    """Unexpected link store failure."""


class CacheError(TineeError):
    """Unexpected alias cache failure."""
