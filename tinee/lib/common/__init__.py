"""Common utilities for tinee."""

from .validators import (
    is_valid_url,
    is_valid_alias,
    validate_url,
    validate_custom_alias,
)
from .url_builder import build_short_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_alias",
    "validate_url",
    "validate_custom_alias",
    "build_short_url",
    "setup_logging",
    "get_logger",
]
