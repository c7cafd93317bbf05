import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.exceptions import (BadRequestError, BaseAPIException,
                                 InternalServerError)
from src.infrastructure.middleware.correlation import get_correlation_id

logger = structlog.get_logger(__name__)


def _error_json(exc: BaseAPIException, correlation_id) -> JSONResponse:
    error_response = exc.to_error_response(correlation_id=correlation_id)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(),
        headers={"X-Correlation-ID": correlation_id} if correlation_id else {},
    )


async def base_api_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    correlation_id = get_correlation_id()

    logger.warning(
        "api_exception",
        error=exc.error,
        message=exc.message,
        status_code=exc.status_code,
        virtual_path=exc.path,
        correlation_id=correlation_id,
        path=request.url.path,
    )

    return _error_json(exc, correlation_id)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    correlation_id = get_correlation_id()

    fields = [
        ".".join(str(loc) for loc in error["loc"]) for error in exc.errors()
    ]

    logger.warning(
        "validation_error",
        fields=fields,
        correlation_id=correlation_id,
        path=request.url.path,
    )

    validation_error = BadRequestError(
        error="Request validation failed",
        message=f"Invalid parameters: {', '.join(fields)}",
        path=request.query_params.get("path"),
    )

    return _error_json(validation_error, correlation_id)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    correlation_id = get_correlation_id()

    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        correlation_id=correlation_id,
        path=request.url.path,
    )

    http_error = BaseAPIException(
        error=str(exc.detail),
        message=str(exc.detail),
        status_code=exc.status_code,
    )

    return _error_json(http_error, correlation_id)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    correlation_id = get_correlation_id()

    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        correlation_id=correlation_id,
        path=request.url.path,
        exc_info=True,
    )

    return _error_json(InternalServerError(), correlation_id)
