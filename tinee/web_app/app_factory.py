"""FastAPI application factory."""

from fastapi import FastAPI

from tinee import __version__

from .api import api_router
from .web import web_router
from .middleware import LoggingMiddleware


def create_app(
    service_instance,
    config,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        service_instance: Link service, or None when the lifespan builds it
        config: Configuration instance
        lifespan: Optional lifespan context manager
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="tinee",
        description="URL shortening service",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    
    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    
    app.add_middleware(LoggingMiddleware)
    
    # API routes are registered first so /{alias} does not shadow them
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Redirect"])
    
    return app
