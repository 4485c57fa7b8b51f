"""API routes implementation."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request, status

from tinee.lib.errors import InvalidAliasError, InvalidURLError, LinkNotFoundError, TineeError

from .schemas import (
    ErrorResponse,
    HealthResponse,
    LinkResponse,
    ShortenRequest,
    ShortenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/v1/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or alias"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Shorten URL",
    description="Shorten a URL. Optionally register a custom alias for it.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Shorten a URL."""
    service = request.app.state.service
    
    try:
        short_url = await service.shorten(body.url, body.alias)
    except (InvalidURLError, InvalidAliasError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except TineeError as e:
        logger.error(f"Shorten failed for {body.url}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error",
        )
    
    return ShortenResponse(short_url=short_url)


@router.get(
    "/v1/links/{alias}",
    response_model=LinkResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Alias not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Get link",
    description="Get the link an alias belongs to, with all of its aliases.",
)
async def get_link(request: Request, alias: str):
    """Get the link for an alias."""
    service = request.app.state.service
    
    try:
        link = await service.find_link(alias)
    except LinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Alias '{alias}' not found",
        )
    except TineeError as e:
        logger.error(f"Link lookup failed for {alias}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error",
        )
    
    return LinkResponse(**link.to_dict())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service and its collaborators are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
