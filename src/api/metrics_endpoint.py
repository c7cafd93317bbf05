"""Prometheus metrics endpoint"""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from src.core.config import settings
from src.infrastructure.logging import get_logger
from src.infrastructure.metrics import get_metrics, get_metrics_content_type

logger = get_logger(__name__)

router = APIRouter(tags=["metrics"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Expose metrics in Prometheus text format"""
    if not settings.metrics_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    return Response(content=get_metrics(), media_type=get_metrics_content_type())
