"""Demo report tree for an empty data root."""
import json
from pathlib import Path
from typing import Dict, Union

from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

SAMPLE_DIRECTORIES = [
    "test_pipeline_results/job_12345/unit_tests",
    "test_pipeline_results/job_12345/integration_tests",
    "test_pipeline_results/job_12345/performance_tests",
    "test_pipeline_results/job_12346",
    "test_pipeline_results/job_12347",
    "reports/daily",
    "reports/monthly",
    "config",
    "logs",
]


def generate_test_summary() -> str:
    return (
        "Test Summary\n"
        "============\n"
        "Total Tests: 150\n"
        "Passed: 145\n"
        "Failed: 5\n"
        "Skipped: 0\n"
    )


def generate_unit_test_log() -> str:
    return (
        "Unit Test Log - Job 12345\n"
        "=========================\n"
        "Runner: Jest\n"
        "Coverage Target: 80%\n"
        "\n"
        "Test Suites: 5 passed, 5 total\n"
        "Tests:       150 passed, 150 total\n"
        "Time:        12.4 s\n"
    )


def generate_integration_test_log() -> str:
    return (
        "Integration Test Log - Job 12345\n"
        "================================\n"
        "Test Results:\n"
        "  [PASS] API health check\n"
        "  [PASS] Database connectivity\n"
        "  [PASS] User registration flow\n"
        "  [PASS] Login flow\n"
        "  [PASS] File upload\n"
        "  [PASS] Report generation\n"
        "  [PASS] Notification delivery\n"
        "  [PASS] Cache invalidation\n"
        "\n"
        "Total Tests: 8\n"
        "Passed: 8\n"
        "Failed: 0\n"
        "Duration: 24 seconds\n"
    )


def generate_performance_test_log() -> str:
    return (
        "Performance Test Log - Job 12345\n"
        "================================\n"
        "Tool: Apache JMeter\n"
        "Virtual Users: 100\n"
        "Ramp-up: 60 seconds\n"
        "Average Response Time: 182 ms\n"
        "95th Percentile: 410 ms\n"
        "Error Rate: 0.2%\n"
    )


def generate_test_results_xml() -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<testsuites tests="100" failures="2">\n'
        '  <testsuite name="Unit Tests" tests="100" failures="2">\n'
        '    <testcase classname="auth" name="rejects expired token"/>\n'
        '    <testcase classname="auth" name="refreshes session">\n'
        '      <failure message="expected 200, got 401"/>\n'
        '    </testcase>\n'
        '  </testsuite>\n'
        '</testsuites>\n'
    )


def generate_build_log() -> str:
    return (
        "Build Log - Job 12346\n"
        "=====================\n"
        "[INFO] Installing dependencies\n"
        "[INFO] Compiled successfully\n"
        "[INFO] Bundle size: 1.2 MB\n"
        "Status: SUCCESS\n"
    )


def generate_deployment_log() -> str:
    return (
        "Deployment Log - Job 12346\n"
        "==========================\n"
        "Target: staging\n"
        "[INFO] Pushing image\n"
        "[INFO] Rolling update started\n"
        "Deployment completed successfully!\n"
    )


def generate_security_scan_log() -> str:
    return (
        "Security Scan Log - Job 12347\n"
        "=============================\n"
        "Scanner: OWASP ZAP\n"
        "High: 0\n"
        "Medium: 2\n"
        "Low: 5\n"
        "Overall Security Score: B+\n"
    )


def generate_config_file() -> str:
    return json.dumps(
        {
            "environment": "staging",
            "database": {"host": "db.staging.local", "port": 5432},
            "api": {"baseUrl": "https://api.staging.local", "timeout": 30},
        },
        indent=2,
    )


def generate_pipeline_settings() -> str:
    return (
        "# Pipeline Configuration\n"
        "stages:\n"
        "  - build\n"
        "  - test\n"
        "  - deploy\n"
    )


def generate_environment_vars() -> str:
    return (
        "NODE_ENV=test\n"
        "DATABASE_URL=postgres://localhost:5432/test\n"
        "LOG_LEVEL=debug\n"
    )


def generate_application_log() -> str:
    return (
        "2024-01-15 09:00:00 INFO  Application started on port 3000\n"
        "2024-01-15 09:00:01 INFO  Connected to database\n"
        "2024-01-15 09:05:12 WARN  Slow query detected (1.2s)\n"
    )


def generate_error_log() -> str:
    return (
        "2024-01-15 10:12:03 ERROR Database connection timeout after 30s\n"
        "2024-01-15 11:47:55 ERROR SMTP connection failed: connection refused\n"
        "2024-01-15 13:02:19 ERROR Rate limit exceeded for client 10.0.0.7\n"
    )


def generate_daily_report(date: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f"<head><title>Daily Test Report - {date}</title></head>\n"
        "<body>\n"
        f"<h1>Daily Test Report - {date}</h1>\n"
        "<p>Total Tests: 150</p>\n"
        "<p>Success Rate: 96.7%</p>\n"
        "</body>\n"
        "</html>\n"
    )


def generate_monthly_summary(month: str) -> str:
    return (
        f"# Monthly Test Summary - {month}\n"
        "\n"
        "## Overview\n"
        "\n"
        "- Total Builds: 124\n"
        "- Success Rate: 94%\n"
    )


def sample_files() -> Dict[str, str]:
    """Relative path to content for every demo file."""
    return {
        "test_pipeline_results/job_12345/test_summary.log": generate_test_summary(),
        "test_pipeline_results/job_12345/unit_tests/unit_test.log": generate_unit_test_log(),
        "test_pipeline_results/job_12345/unit_tests/results.xml": generate_test_results_xml(),
        "test_pipeline_results/job_12345/integration_tests/integration_test.log":
            generate_integration_test_log(),
        "test_pipeline_results/job_12345/performance_tests/performance_test.log":
            generate_performance_test_log(),
        "test_pipeline_results/job_12346/build.log": generate_build_log(),
        "test_pipeline_results/job_12346/deployment.log": generate_deployment_log(),
        "test_pipeline_results/job_12347/security_scan.log": generate_security_scan_log(),
        "reports/daily/2024-01-15.html": generate_daily_report("2024-01-15"),
        "reports/daily/2024-01-16.html": generate_daily_report("2024-01-16"),
        "reports/monthly/january_2024.md": generate_monthly_summary("January 2024"),
        "config/config.json": generate_config_file(),
        "config/pipeline.yml": generate_pipeline_settings(),
        "config/test.env": generate_environment_vars(),
        "logs/application.log": generate_application_log(),
        "logs/error.log": generate_error_log(),
    }


def seed_sample_data(root: Union[str, Path], force: bool = False) -> int:
    """
    Populate the data root with demo reports.

    Args:
        root: Data root directory
        force: Write even when the root already has content

    Returns:
        Number of files written; 0 when the root was left untouched
    """
    root = Path(root)

    if root.is_dir() and any(root.iterdir()) and not force:
        logger.debug("sample_data_skipped", reason="root_not_empty")
        return 0

    for directory in SAMPLE_DIRECTORIES:
        (root / directory).mkdir(parents=True, exist_ok=True)

    files = sample_files()
    for relative, content in files.items():
        (root / relative).write_text(content, encoding="utf-8")

    logger.info("sample_data_created", files=len(files))
    return len(files)
