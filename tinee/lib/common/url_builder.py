"""URL building utilities for tinee."""


def build_short_url(alias: str, domain: str) -> str:
    """Build complete short URL.
    
    Args:
        alias: The alias
        domain: Domain the short URL lives under (e.g., tinee.io or https://tinee.io)
        
    Returns:
        Short URL in the form domain/alias
    """
    return f"{domain.rstrip('/')}/{alias}"
