"""
HelloAPI - Recovery Middleware
===============================

What:  Converts any exception escaping a route handler into an HTTP 500.
How:   Wraps call_next in try/except; logs the traceback server-side and
       returns a generic JSON error carrying the request ID.

Application errors (HelloAPIError subclasses) never reach this layer: the
exception handlers in main.py answer them first. Only unexpected faults
end up here, and one failing request never takes the server down.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from helloapi.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Catch-all for unexpected errors raised while handling a request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            # Stack trace stays in the log, never in the response body
            return JSONResponse(
                status_code=500,
                content={
                    "error": "internal_server_error",
                    "message": "An unexpected error occurred. Please try again or contact support.",
                    "request_id": rid,
                },
            )
