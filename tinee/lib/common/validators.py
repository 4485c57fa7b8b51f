"""Validation utilities for tinee."""

import ipaddress
import re
from typing import Tuple
from urllib.parse import urlsplit

from ..errors import InvalidAliasError, InvalidURLError

MAX_URL_LENGTH = 2048
MIN_CUSTOM_ALIAS_LENGTH = 4

_DOMAIN_LABEL = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?")
_TOP_LEVEL_LABEL = re.compile(r"[a-zA-Z]{2,63}")
_CUSTOM_ALIAS = re.compile(r"[a-zA-Z0-9]+")
_FORBIDDEN_CHARS = re.compile(r"[\s\x00-\x1f\x7f<>\"{}|\\^`]")
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _is_valid_host(host: str) -> bool:
    if _is_ipv4(host):
        return True
    
    labels = host.rstrip(".").split(".")
    if len(labels) < 2:
        return False
    
    if not all(_DOMAIN_LABEL.fullmatch(label) for label in labels):
        return False
    
    return bool(_TOP_LEVEL_LABEL.fullmatch(labels[-1]))


def _is_ipv4(host: str) -> bool:
    try:
        ipaddress.IPv4Address(host)
    except ValueError:
        return False
    return True


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"
    
    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"
    
    if _FORBIDDEN_CHARS.search(url):
        return False, "URL contains characters that are not allowed"
    
    try:
        result = urlsplit(url)
        # Accessing the port validates it
        port = result.port
    except ValueError as e:
        return False, f"Invalid URL format: {e}"
    
    if result.scheme.lower() not in ("http", "https"):
        return False, "URL must use http or https protocol"
    
    host = result.hostname
    if not host:
        return False, "URL must have a valid domain"
    
    if not _is_valid_host(host):
        return False, f"'{host}' is not a valid domain"
    
    if port == 0:
        return False, "URL port must be between 1 and 65535"
    
    for part in (result.path, result.query, result.fragment):
        if _MALFORMED_ESCAPE.search(part):
            return False, "URL contains a malformed percent-escape"
    
    return True, ""


def is_valid_alias(alias: str, min_length: int = MIN_CUSTOM_ALIAS_LENGTH) -> Tuple[bool, str]:
    """Validate a custom alias.
    
    Args:
        alias: The alias to validate
        min_length: Minimum length for the alias
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not alias or not isinstance(alias, str):
        return False, "Alias is required"
    
    if len(alias) < min_length:
        return False, f"Alias must be at least {min_length} characters"
    
    if not _CUSTOM_ALIAS.fullmatch(alias):
        return False, "Alias can only contain letters and numbers"
    
    return True, ""


def validate_url(url: str) -> None:
    """Raise InvalidURLError unless the URL is a well-formed http(s) URL."""
    is_valid, error = is_valid_url(url)
    if not is_valid:
        raise InvalidURLError(f"Invalid URL: {error}")


def validate_custom_alias(alias: str) -> None:
    """Raise InvalidAliasError unless the alias is alphanumeric and long enough."""
    is_valid, error = is_valid_alias(alias)
    if not is_valid:
        raise InvalidAliasError(f"Invalid alias: {error}")
