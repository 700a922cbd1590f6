"""
HelloAPI - Custom Exception Hierarchy
======================================

What:  Application-specific exceptions mapped to HTTP status codes.
How:   Each exception carries a message and an optional context dict.
       Handlers registered in main.py turn them into JSON responses.

Exception Hierarchy:
    HelloAPIError (base)
    ├── ClientInputError     → 400 Bad Request
    └── RouteNotFoundError   → 404 Not Found

Anything else raised by a handler is caught by RecoveryMiddleware and
reported as 500.
"""

from typing import Any, Dict, Optional


class HelloAPIError(Exception):
    """
    Base exception for all HelloAPI application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ClientInputError(HelloAPIError):
    """
    Raised when the client sent a request body that cannot be used.

    When:    POST /data with a body that is not a JSON object.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Expecting value: line 1 column 1 (char 0)"}
    """

    def __init__(
        self,
        message: str = "Invalid request body",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RouteNotFoundError(HelloAPIError):
    """
    Raised when no registered route matches the request method and path.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        method: str = "GET",
        path: str = "/",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["method"] = method
        ctx["path"] = path
        super().__init__(message=f"No route for {method} {path}", context=ctx)
        self.method = method
        self.path = path
