from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import metrics_endpoint
from src.api.exception_handlers import (base_api_exception_handler,
                                        general_exception_handler,
                                        http_exception_handler,
                                        validation_exception_handler)
from src.api.router import api_router
from src.core.config import settings
from src.core.exceptions import BaseAPIException
from src.infrastructure.filesystem import DirectoryStore, NotFoundError
from src.infrastructure.filesystem.directory_store import use_system_collation
from src.infrastructure.logging import get_logger, setup_logging
from src.infrastructure.middleware.correlation import CorrelationIDMiddleware
from src.infrastructure.middleware.logging import LoggingMiddleware
from src.infrastructure.middleware.metrics import MetricsMiddleware
from src.infrastructure.sample_data import seed_sample_data

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    use_system_collation()
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
        data_root=str(settings.data_root),
    )

    if settings.seed_sample_data:
        seed_sample_data(settings.data_root)

    store = DirectoryStore(settings.data_root)
    try:
        await store.initialize()
    except NotFoundError:
        logger.error("data_root_missing", data_root=str(settings.data_root))
        raise
    app.state.directory_store = store

    yield

    logger.info("application_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware, api_prefix=settings.api_prefix)
app.add_middleware(MetricsMiddleware, api_prefix=settings.api_prefix)
app.add_middleware(CorrelationIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BaseAPIException, base_api_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.get("/", response_model=Dict[str, Any])
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": settings.app_description,
        "status": "running",
        "environment": settings.environment,
        "endpoints": {
            "api": settings.api_prefix,
            "docs": "/docs",
            "health": f"{settings.api_prefix}/health",
            "metrics": "/metrics",
        },
    }


# Include metrics endpoints at root level (no prefix)
app.include_router(metrics_endpoint.router)

# Include API routes with prefix
app.include_router(api_router, prefix=settings.api_prefix)
