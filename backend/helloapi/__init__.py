"""
HelloAPI - Application Package Initializer
===========================================

What: Marks the `helloapi` directory as a Python package.
Who:  Used by uvicorn (`uvicorn helloapi.main:app`), pytest and the console script.

Architecture Note:
    The server is a single FastAPI application with a thin layout:

    ┌─────────────────────────────────────┐
    │        Middleware (cross-cutting)   │  ← request ID, access log, recovery
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← one module per endpoint group
    ├─────────────────────────────────────┤
    │        Schemas (response shapes)    │  ← Pydantic models
    └─────────────────────────────────────┘

    There is no service or persistence layer: every handler maps the
    request straight to a response.
"""

__version__ = "1.0.0"
