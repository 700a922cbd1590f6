"""
HelloAPI - Pydantic Response Schemas
=====================================

What:  Pydantic models describing every JSON body the API returns.
How:   Routes declare them as `response_model`; FastAPI serializes the
       returned model and publishes the shape in the OpenAPI document.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class HelloResponse(BaseModel):
    """Returned by GET /."""
    message: str = Field(default="Hello, World!")
    status: str = Field(default="success")


class UserGreeting(BaseModel):
    """Returned by GET /user/{name}."""
    message: str = Field(description="Greeting built from the path segment")
    user: str = Field(description="The path segment, unchanged")

    @classmethod
    def for_name(cls, name: str) -> "UserGreeting":
        return cls(message=f"Hello, {name}!", user=name)


class SearchResponse(BaseModel):
    """
    Returned by GET /search.

    `limit` is echoed as the raw query-string value. It is never parsed as an
    integer, so `?limit=abc` comes back as "abc".
    """
    query: str = Field(description="Value of the `q` query parameter")
    limit: str = Field(description="Value of the `limit` query parameter")


class DataReceived(BaseModel):
    """Returned by POST /data when the body is a JSON object or `null`."""
    message: str = Field(default="Data received successfully")
    data: Optional[Dict[str, Any]] = Field(description="The decoded request body; null for a `null` body")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(default="healthy")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ClientErrorResponse(BaseModel):
    """
    Body of a 400 from POST /data.

    Example:
        {"error": "Expecting value: line 1 column 1 (char 0)"}
    """
    error: str = Field(description="Why the request body was rejected")


class ErrorResponse(BaseModel):
    """
    Body of 404 and 500 responses.

    Fields:
        error: Machine-readable error code ("not_found", "internal_server_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
