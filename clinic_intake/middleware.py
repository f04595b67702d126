# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware: request ID propagation, Prometheus metrics, access log.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from clinic_intake.core.logging import get_logger
from clinic_intake.metrics import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

logger = get_logger(__name__)

KNOWN_PATHS: set[str] = {
    "/appointments", "/contact", "/api/appointments", "/api/contact",
}

SKIP_PATHS: tuple[str, ...] = (
    "/health", "/health/ready", "/metrics", "/openapi.json", "/docs", "/redoc",
)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID for tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Track request count, latency and errors; log one line per request."""

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = time.time() - start

        path = request.url.path
        if path in SKIP_PATHS:
            return response

        # unknown paths share one label to keep cardinality bounded
        endpoint = path if path in KNOWN_PATHS else "{other}"
        status = str(response.status_code)
        REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(duration)
        if response.status_code >= 400:
            HTTP_ERRORS.labels(method=request.method, endpoint=endpoint, status=status).inc()

        logger.info(
            "%s %s %s in %dms", request.method, path, status, int(duration * 1000),
            extra={"request_id": getattr(request.state, "request_id", None)},
        )
        return response
