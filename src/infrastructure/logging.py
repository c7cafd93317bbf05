import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import Processor

from src.core.config import settings
from src.infrastructure.logging_processors import (
    add_service_context,
    add_request_context,
    sanitize_sensitive_data,
    add_caller_info,
    format_exception_info,
    set_log_severity,
    MetricsProcessor
)


def setup_logging(log_level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Route structlog and stdlib logging through one handler.

    Args:
        log_level: Overrides LOG_LEVEL (the CLI passes WARNING)
        stream: Output stream, stdout when omitted
    """
    level = getattr(logging, (log_level or settings.log_level).upper())

    # Correlation ID and virtual path come in through contextvars
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        add_request_context,
        structlog.processors.add_log_level,
        set_log_severity,
    ]
    if settings.is_development:
        shared_processors.append(add_caller_info)
    shared_processors += [
        format_exception_info,
        structlog.processors.TimeStamper(fmt="iso"),
        # Redaction runs last before rendering
        sanitize_sensitive_data,
        MetricsProcessor(),
    ]

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.rich_traceback
        )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)
