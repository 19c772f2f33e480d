"""Main FastAPI application entry point.

This module initializes the FastAPI application with its routers, middleware
and lifecycle events for the Trending News Aggregator.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from news_aggregator.api.dependencies import build_trending_service, create_http_client
from news_aggregator.core.config import settings
from news_aggregator.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events.

    Creates the shared HTTP client and the process-wide trending service on
    startup, and closes the client on shutdown. The cache lives exactly as
    long as the process.

    Args:
        app: FastAPI application instance
    """
    setup_logging()

    logger.info("=" * 80)
    logger.info(f"Starting {settings.api_title}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Cache TTL: {settings.cache_ttl_seconds:.0f}s")
    logger.info(f"Per-source timeout: {settings.source_timeout_ms} ms")
    logger.info("=" * 80)

    http_client = create_http_client(settings)
    app.state.http_client = http_client
    app.state.trending_service = build_trending_service(http_client, settings)

    for adapter in app.state.trending_service.orchestrator.adapters:
        if adapter.enabled and not adapter.is_configured:
            logger.warning(f"{adapter.source_name} API key not set; source will be skipped")

    logger.info("Application startup complete")

    yield

    logger.info(f"Shutting down {settings.api_title}")

    try:
        await http_client.aclose()
        logger.info("HTTP client closed")
    except Exception as e:
        logger.error(f"Error closing HTTP client: {e}")

    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=(
        "Aggregates short-lived news items from REST news APIs and RSS/Atom "
        "feeds into one normalized, recency-ranked list, filtered by an "
        "optional category and served from a time-bounded cache."
    ),
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api_cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Add GZip compression middleware
app.add_middleware(
    GZipMiddleware,
    minimum_size=1000,  # Only compress responses larger than 1KB
)


# Import and include routers
from news_aggregator.api.routers import health, trending  # noqa: E402

app.include_router(trending.router, tags=["trending"])
app.include_router(health.router, prefix="/api/v1", tags=["health"])


@app.get("/")
async def root():
    """Root endpoint providing API information.

    Returns:
        Basic API information and links to documentation
    """
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "status": "operational",
        "trending": "/trending",
        "docs": "/docs",
        "redoc": "/redoc",
        "openapi": "/openapi.json",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "news_aggregator.main:app",
        host=settings.api_host,
        port=settings.port,
        log_level="info",
    )
