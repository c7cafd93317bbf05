"""Metrics collection middleware for FastAPI"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from src.infrastructure.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    http_requests_in_progress
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Longer paths are truncated to keep label cardinality bounded
MAX_ENDPOINT_LENGTH = 50


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for collecting HTTP metrics"""

    def __init__(self, app: ASGIApp, api_prefix: str = "/api"):
        super().__init__(app)
        self.exclude_paths = {
            "/metrics",
            f"{api_prefix}/health",
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        # Virtual paths travel in the query string, so the route path is the label
        endpoint = self._normalize_endpoint(request.url.path)
        method = request.method

        http_requests_in_progress.labels(method=method, endpoint=endpoint).inc()
        start_time = time.time()
        status = "500"

        try:
            response = await call_next(request)
            status = str(response.status_code)

            duration = time.time() - start_time
            if duration > 1.0:
                logger.warning(
                    "slow_request",
                    method=method,
                    endpoint=endpoint,
                    duration_seconds=duration,
                    status=status
                )

            return response

        finally:
            duration = time.time() - start_time

            http_request_duration_seconds.labels(
                method=method, endpoint=endpoint, status=status
            ).observe(duration)
            http_requests_total.labels(
                method=method, endpoint=endpoint, status=status
            ).inc()
            http_requests_in_progress.labels(method=method, endpoint=endpoint).dec()

    def _normalize_endpoint(self, path: str) -> str:
        if path.endswith("/") and len(path) > 1:
            path = path[:-1]

        if len(path) > MAX_ENDPOINT_LENGTH:
            return path[:MAX_ENDPOINT_LENGTH] + "..."

        return path
