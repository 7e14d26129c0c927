"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, quote_pdf.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quote_pdf.api.deps.dependencies import get_service_cache
from quote_pdf.configs import Settings, get_settings
from quote_pdf.observability.logger import configure_logging
from quote_pdf.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from . import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)
    logger.info("Service cache ready (environment=%s)", cache.settings.environment)

    yield

    # Shutdown
    await cache.aclose()
    logger.info("Service cache cleared")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (defaults to the environment)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    get_service_cache().configure(settings)

    app = FastAPI(
        title="Quote PDF API",
        description="Renders stored quotes to branded PDF documents",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Origins are configured explicitly; none are allowed by default
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Outermost last: correlation ID is set before request logging runs
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "quote_pdf.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
