"""
HelloAPI - Request ID Middleware
=================================

What:  Assigns a short ID to each incoming request and adds it to the response.
How:   Reuses the client's X-Request-ID header when present, otherwise creates
       one from a UUID. Stores it in a ContextVar and in request.state.
When:  Outermost middleware (runs before all other processing).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local storage for the current request ID.
# Concurrent requests run in the same thread, so threading.local would not work.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """First 8 characters of a random UUID4."""
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Check if client sent X-Request-ID header
        2. If present: use it
        3. If absent: generate a new short UUID
        4. Store in ContextVar for use by loggers and error handlers
        5. Add to response headers for client to capture
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
