"""
Prometheus metrics definitions and utilities.

This module defines the Prometheus metrics used throughout the catalog for
monitoring HTTP requests and the outcome of form submissions and deletes.
"""

from prometheus_client import REGISTRY, Counter, Gauge, Histogram


def _get_or_create_counter(name: str, doc: str, labels: list[str] | None = None):
    """
    Get existing counter or create new one.

    Prevents duplicate registration errors during development with --reload.
    """
    try:
        return Counter(name, doc, labels or [])
    except ValueError:
        return REGISTRY._names_to_collectors[name]


def _get_or_create_gauge(name: str, doc: str, labels: list[str] | None = None):
    """Get existing gauge or create new one."""
    try:
        return Gauge(name, doc, labels or [])
    except ValueError:
        return REGISTRY._names_to_collectors[name]


def _get_or_create_histogram(
    name: str, doc: str, labels: list[str] | None = None, buckets=None
):
    """Get existing histogram or create new one."""
    try:
        if buckets:
            return Histogram(name, doc, labels or [], buckets=buckets)
        return Histogram(name, doc, labels or [])
    except ValueError:
        return REGISTRY._names_to_collectors[name]


# HTTP Request Metrics
http_requests_total = _get_or_create_counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = _get_or_create_histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

http_requests_in_progress = _get_or_create_gauge(
    "http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method", "endpoint"],
)

# Catalog Metrics
catalog_mutations_total = _get_or_create_counter(
    "catalog_mutations_total",
    "Total records created, updated or deleted",
    ["entity", "operation"],  # operation: create, update, delete
)

catalog_form_rejections_total = _get_or_create_counter(
    "catalog_form_rejections_total",
    "Total form submissions re-rendered with field errors",
    ["entity"],
)

catalog_deletions_blocked_total = _get_or_create_counter(
    "catalog_deletions_blocked_total",
    "Total deletes refused because dependent records exist",
    ["entity"],
)

# Application Metrics
app_errors_total = _get_or_create_counter(
    "app_errors_total",
    "Total application errors",
    ["error_type", "handler"],
)

app_info = _get_or_create_gauge(
    "app_info",
    "Application information",
    ["version", "python_version", "environment"],
)
