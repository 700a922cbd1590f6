# Middleware package init
"""
HelloAPI - Middleware Package
==============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Recovery] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. Recovery: Turn any unhandled handler exception into a 500 response,
       so the access log still sees (and records) the failed request

    The order is reversed for responses:
    Response ← [Request ID] ← [Logging] ← [Recovery] ← Route Handler
"""
