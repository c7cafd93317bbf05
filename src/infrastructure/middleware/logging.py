import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.logging import bind_context, clear_context, get_logger
from src.infrastructure.middleware.correlation import get_correlation_id

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each browse request with the virtual path it asked for"""

    def __init__(self, app, api_prefix: str = "/api"):
        super().__init__(app)
        self.exclude_paths = {
            f"{api_prefix}/health",
            "/metrics",
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        start_time = time.time()
        request_id = get_correlation_id()

        bind_context(
            correlation_id=request_id,
            request_method=request.method,
            request_path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )
        # Raw client value; the store logs the sanitized form
        requested_path = request.query_params.get("path")
        if requested_path:
            bind_context(virtual_path=requested_path)

        logger.info("http_request_started")

        try:
            response = await call_next(request)

            duration_ms = self._elapsed_ms(start_time)
            logger.info(
                "http_request_completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

            if request_id:
                response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"

            return response

        except Exception as e:
            logger.error(
                "http_request_failed",
                duration_ms=self._elapsed_ms(start_time),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        finally:
            clear_context()

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.time() - start_time) * 1000, 2)
