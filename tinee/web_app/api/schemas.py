"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""
    
    url: str = Field(..., description="The URL to shorten")
    alias: str = Field("", description="Optional custom alias")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                    "alias": ""
                },
                {
                    "url": "https://github.com/user/repo",
                    "alias": "myrepo"
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""
    
    short_url: str = Field(..., description="The complete short URL (domain/alias)")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"short_url": "tinee.io/aZ3kP9qL"}
            ]
        }
    }


class LinkResponse(BaseModel):
    """Response with link information."""
    
    id: str
    url: str
    aliases: List[str]


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Link store status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    detail: Optional[str] = Field(None, description="Error message")
