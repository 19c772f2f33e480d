"""Health check API router."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, status

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.api.dependencies import TrendingServiceDep
from news_aggregator.core.config import settings

router = APIRouter()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Service health check",
    description="Report service status, configured news sources and cache usage.",
)
async def health_check(trending_service: TrendingServiceDep) -> dict[str, Any]:
    """Report which sources will be queried and how full the cache is.

    Unconfigured sources are listed but do not degrade the status.
    """
    adapters = trending_service.orchestrator.adapters

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.api_version,
        "environment": settings.environment,
        "sources": {
            adapter.source_name: _source_status(adapter)
            for adapter in adapters
        },
        "cache": trending_service.cache.stats(),
    }


def _source_status(adapter: NewsSourceAdapter) -> str:
    if not adapter.enabled:
        return "disabled"
    if not adapter.is_configured:
        return "missing_api_key"
    return "configured"
