"""Request middleware."""

from .correlation import CorrelationIDMiddleware, get_correlation_id
from .logging import LoggingMiddleware
from .metrics import MetricsMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "get_correlation_id",
    "LoggingMiddleware",
    "MetricsMiddleware",
]
