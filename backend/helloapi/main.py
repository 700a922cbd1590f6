"""
HelloAPI - FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn helloapi.main:app) or by run().
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Req ID      │→│ Logging  │→│  Recovery       │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  GET /   GET /user/{name}   GET /search             │
    │  POST /data                 GET /health             │
    │                                                     │
    │  Exception Handlers:                                │
    │  ClientInputError→400 │ no route→404 │ other→500    │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from helloapi import __version__
from helloapi.config import settings
from helloapi.exceptions import ClientInputError, RouteNotFoundError
from helloapi.middleware.logging import RequestLoggingMiddleware
from helloapi.middleware.recovery import RecoveryMiddleware
from helloapi.middleware.request_id import RequestIDMiddleware, request_id_var
from helloapi.routes import ROUTERS

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (Docker captures stdout)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing logging config
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Code before yield runs on startup, code after yield on shutdown."""
    setup_logging()
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    logger.info("%s shutting down...", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _not_found_response(exc: RouteNotFoundError) -> JSONResponse:
    rid = request_id_var.get("")
    return JSONResponse(
        status_code=404,
        content={
            "error": "not_found",
            "message": exc.message,
            "request_id": rid,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ClientInputError       → 400 {"error": message}
        RouteNotFoundError     → 404
        HTTPException 404/405  → 404 (a method mismatch is "no route" too)
        HTTPException other    → same status, same error body shape

    Exceptions with no handler here fall through to RecoveryMiddleware (500).
    """

    @app.exception_handler(ClientInputError)
    async def handle_client_input_error(request: Request, exc: ClientInputError):
        """Client sent a body we cannot use. The message says why."""
        rid = request_id_var.get("")
        logger.warning("[%s] Client input error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RouteNotFoundError)
    async def handle_route_not_found(request: Request, exc: RouteNotFoundError):
        return _not_found_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return _not_found_response(
                RouteNotFoundError(method=request.method, path=request.url.path)
            )
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "http_error",
                "message": str(exc.detail),
                "request_id": rid,
            },
            headers=exc.headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    Tests call this directly to get a fresh app per test.
    """
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Demo HTTP server with five example JSON endpoints.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → Recovery → routes

    app.add_middleware(RecoveryMiddleware)

    if settings.access_log:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for router in ROUTERS:
        app.include_router(router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `helloapi.main:app` to be importable
app = create_app()


def run() -> None:
    """Console-script entry point: serve `app` on settings.host:settings.port."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
