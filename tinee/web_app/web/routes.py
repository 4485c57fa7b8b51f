"""Redirect routes."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from tinee.lib.errors import LinkNotFoundError, TineeError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{alias}", include_in_schema=False)
async def redirect_to_url(request: Request, alias: str):
    """Redirect to the original URL."""
    service = request.app.state.service
    
    try:
        url = await service.resolve_url(alias)
    except LinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Alias '{alias}' not found",
        )
    except TineeError as e:
        logger.error(f"Resolve failed for {alias}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error",
        )
    
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
