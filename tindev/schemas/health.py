"""Health check response schema."""
from datetime import datetime

from pydantic import Field

from tindev.schemas.base import BaseSchema


class HealthResponse(BaseSchema):
    """Service health status."""

    status: str = Field(..., description="healthy or degraded")
    version: str
    timestamp: datetime
    database: bool
    media: bool
