"""
NetDemo — FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own Counter.
Who:   uvicorn (`uvicorn netdemo.main:app`), `python -m netdemo`, and the
       test suite (a fresh app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  /hello  /401  /square  /users  /incr               │
    │                                                     │
    │  State:  app.state.counter (Counter, starts at 0)   │
    │                                                     │
    │  Exception Handlers (plain-text bodies):            │
    │  Validation→400 │ Method→405 │ Serialization→500    │
    │  HTTPException (404 page not found) │ other→500     │
    └─────────────────────────────────────────────────────┘

Only the five literal paths are served: trailing-slash redirects and the
generated /docs, /redoc and /openapi.json routes are switched off.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from netdemo import __version__
from netdemo.config import settings
from netdemo.exceptions import (
    NetDemoError,
    ValidationError,
    MethodNotAllowedError,
    SerializationError,
)
from netdemo.middleware.request_id import RequestIDMiddleware, request_id_var
from netdemo.middleware.logging import RequestLoggingMiddleware
from netdemo.routes import greeting, square, users, counter
from netdemo.services.counter_service import Counter

logger = logging.getLogger(__name__)

NOT_FOUND_TEXT = "404 page not found\n"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout, level from settings.log_level.
    Called once during app startup, before anything logs.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce the listener address.
    Shutdown: log the final counter value; it is not persisted anywhere.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("NetDemo %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.server_host, settings.server_port)
    logger.info("=" * 60)

    yield

    logger.info("NetDemo shutting down (counter was %d)...", app.state.counter.value)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Every handler answers with a plain-text body, matching the rest of the
    API. The message of a NetDemoError is the body; its context is logged.

    Handler hierarchy:
        ValidationError         → 400
        MethodNotAllowedError   → 405
        SerializationError      → 500 (serializer's error text)
        NetDemoError (base)     → exc.status_code
        HTTPException           → exc.status_code (404 → "404 page not found")
        Exception (fallback)    → 500 generic text
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(MethodNotAllowedError)
    async def handle_method_not_allowed(request: Request, exc: MethodNotAllowedError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s %s rejected: %s", rid, request.method, request.url.path, exc.message)
        return PlainTextResponse(exc.message, status_code=405)

    @app.exception_handler(SerializationError)
    async def handle_serialization_error(request: Request, exc: SerializationError):
        rid = request_id_var.get("")
        logger.error("[%s] Serialization error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(NetDemoError)
    async def handle_netdemo_error(request: Request, exc: NetDemoError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the log only, never into the response."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return PlainTextResponse("Internal Server Error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each call returns an independent app with its own Counter at 0.
    """
    app = FastAPI(
        title="NetDemo",
        description="Five demonstration endpoints: text, status, headers, JSON, request body.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Application State ─────────────────────────────────────────────────
    app.state.counter = Counter()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(greeting.router)
    app.include_router(square.router)
    app.include_router(users.router)
    app.include_router(counter.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `netdemo.main:app` to be importable
app = create_app()
