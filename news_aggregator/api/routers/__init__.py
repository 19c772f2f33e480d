"""API routers package.

This package contains all FastAPI routers for the application.
"""

from news_aggregator.api.routers import health, trending

__all__ = [
    "trending",
    "health",
]
