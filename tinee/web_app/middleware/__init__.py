"""Middleware for tinee web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
