"""
FastAPI application for Softball Stats API.

Serves normalized NCAA D1 softball rankings and stat leaderboards:
- msgspec JSON serialization
- CORS for the browser front-end
- One shared upstream client (and rate limiter) per process
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from ..core.config import get_settings
from ..providers.base import InvalidCategory, UpstreamTransportError
from ..services.stats import close_stats_service, get_stats_service
from .errors import (
    APIError,
    api_error_handler,
    invalid_category_handler,
    upstream_error_handler,
)
from .routers import rankings, stats

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return msgspec.json.encode(content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.

    Startup opens the shared upstream client; shutdown closes it.
    """
    logger.info("Starting Softball Stats API...")
    await get_stats_service().open()

    yield

    logger.info("Shutting down Softball Stats API...")
    await close_stats_service()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Normalized NCAA Division I softball rankings and stat leaders",
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        lifespan=lifespan,
    )

    # CORS middleware - the front-end is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add timing header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        return response

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(InvalidCategory, invalid_category_handler)
    app.add_exception_handler(UpstreamTransportError, upstream_error_handler)

    @app.exception_handler(HTTP_404_NOT_FOUND)
    async def not_found_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=HTTP_404_NOT_FOUND,
            content={"error": {"code": "NOT_FOUND", "message": "Endpoint not found"}},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with consistent format."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        show_detail = settings.debug and settings.environment != "production"
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "detail": str(exc) if show_detail else None,
                }
            },
        )

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(tz=timezone.utc).isoformat()}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
        }

    app.include_router(rankings.router, prefix=settings.api_prefix, tags=["rankings"])
    app.include_router(stats.router, prefix=settings.api_prefix, tags=["stats"])

    return app


# Create app instance
app = create_app()
