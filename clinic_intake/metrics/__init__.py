# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the intake service."""
from prometheus_client import Counter, Histogram

SUBMISSIONS = Counter(
    "intake_submissions_total",
    "Form submissions processed, by outcome",
    ["form", "outcome"],
)
EMAIL_DELIVERY = Histogram(
    "email_delivery_seconds",
    "Time spent waiting on the email provider",
    ["form"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
