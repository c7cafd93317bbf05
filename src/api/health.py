"""Health and service information endpoints"""

from datetime import datetime, timezone

from fastapi import APIRouter

from src.api.models.file_models import AboutResponse, HealthResponse
from src.core.config import settings
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint

    Returns 200 while the process is serving requests.
    """
    response = HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=settings.app_name,
    )

    logger.debug("health_check", status=response.status)

    return response


@router.get("/about", response_model=AboutResponse)
async def about() -> AboutResponse:
    return AboutResponse(
        name=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
    )
