"""Prometheus metrics collection and registry"""

from prometheus_client import (
    Counter, Histogram, Gauge, Info,
    REGISTRY,
    generate_latest, CONTENT_TYPE_LATEST
)

from src.core.config import settings


metrics_registry = REGISTRY  # Use default registry for compatibility

# ====================
# Service Information
# ====================

service_info = Info(
    "report_dashboard_service",
    "Report dashboard service information",
    registry=metrics_registry
)

service_info.info({
    "version": settings.app_version,
    "environment": settings.environment,
    "service": "report-dashboard"
})

# ====================
# HTTP Metrics
# ====================

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=metrics_registry
)

http_requests_total = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status"],
    registry=metrics_registry
)

http_requests_in_progress = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests in progress",
    ["method", "endpoint"],
    registry=metrics_registry
)

# ====================
# Filesystem Metrics
# ====================

filesystem_operations_total = Counter(
    "filesystem_operations_total",
    "Total number of virtual filesystem operations",
    ["operation", "outcome"],
    registry=metrics_registry
)

archive_size_bytes = Histogram(
    "archive_size_bytes",
    "Size of generated directory archives in bytes",
    buckets=(1024, 10240, 102400, 1048576, 10485760, 104857600),
    registry=metrics_registry
)

# ====================
# Logging Metrics
# ====================

log_messages_total = Counter(
    "log_messages_total",
    "Total number of log messages",
    ["level", "logger"],
    registry=metrics_registry
)


def record_filesystem_operation(operation: str, outcome: str) -> None:
    filesystem_operations_total.labels(operation=operation, outcome=outcome).inc()


def get_metrics() -> bytes:
    """Generate metrics in Prometheus format"""
    return generate_latest(metrics_registry)


def get_metrics_content_type() -> str:
    """Get content type for metrics endpoint"""
    return CONTENT_TYPE_LATEST
