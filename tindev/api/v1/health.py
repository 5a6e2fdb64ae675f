"""Health check endpoint."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from tindev.api.dependencies import get_media_client
from tindev.core.config import settings
from tindev.database import check_db
from tindev.schemas.health import HealthResponse
from tindev.services.media import PublitioClient

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Check service health",
    response_description="Service health status",
)
async def health_check(
    media_client: PublitioClient = Depends(get_media_client),
) -> HealthResponse:
    """Check the health of the service and its dependencies."""
    db_status = await check_db()
    media_status = await media_client.health_check()

    return HealthResponse(
        status="healthy" if db_status and media_status else "degraded",
        version=settings.VERSION,
        timestamp=datetime.now(timezone.utc),
        database=db_status,
        media=media_status,
    )
