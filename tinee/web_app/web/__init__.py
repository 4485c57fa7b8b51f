"""Browser-facing routes for tinee."""

from .routes import router as web_router

__all__ = ["web_router"]
