"""
HelloAPI - Request Logging Middleware
======================================

What:  One log line per HTTP request, written when the response is ready.
How:   Measures time around call_next and logs method, path, status,
       duration, request ID and client IP. The same values go into `extra`
       so a JSON formatter can pick them up as fields.
When:  After RequestIDMiddleware (uses the request ID for correlation).

Example line:
    2026-01-15T12:00:00 [INFO] helloapi.access: GET /user/alice 200 0.8ms [a1b2c3d4] from 127.0.0.1

What we DON'T log: request bodies (POST /data echoes arbitrary client data).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from helloapi.middleware.request_id import request_id_var

logger = logging.getLogger("helloapi.access")

# Probed every few seconds by orchestrators; logging them drowns real traffic
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Logged information:
        - Request: method, path, client IP
        - Response: status code, duration in milliseconds
        - Correlation: request ID from RequestIDMiddleware
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path in QUIET_PATHS:
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
