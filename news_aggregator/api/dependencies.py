"""Dependency injection for FastAPI routes.

This module builds the adapters and the trending pipeline from settings and
exposes the process-wide TrendingService to route handlers.
"""

from typing import Annotated, Optional

import httpx
from fastapi import Depends, Request

from news_aggregator.adapters.news_sources import (
    CurrentsAdapter,
    GNewsAdapter,
    GuardianAdapter,
    HackerNewsAdapter,
    MediaStackAdapter,
    NewsAPIAdapter,
    NewsSourceAdapter,
    RedditAdapter,
    SouthIndiaNewsAdapter,
    TamilNaduNewsAdapter,
    WorldNewsAdapter,
)
from news_aggregator.core.config import Settings, settings as default_settings
from news_aggregator.services.aggregator import Aggregator
from news_aggregator.services.cache import TrendingCache
from news_aggregator.services.fetch_orchestrator import FetchOrchestrator
from news_aggregator.services.trending import TrendingService


# ============================================================================
# Builders
# ============================================================================


def create_http_client(config: Optional[Settings] = None) -> httpx.AsyncClient:
    """Create the shared outbound HTTP client.

    Args:
        config: Settings to read timeouts and User-Agent from

    Returns:
        Configured async client; the caller closes it
    """
    config = config or default_settings
    return httpx.AsyncClient(
        timeout=config.http_timeout_seconds,
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=True,
    )


def get_news_sources(
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[Settings] = None,
) -> list[NewsSourceAdapter]:
    """Get the list of news source adapters in registration order.

    Args:
        client: Shared HTTP client
        config: Settings providing API keys and limits

    Returns:
        List of news source adapters
    """
    config = config or default_settings
    common = {
        "client": client,
        "timeout": config.http_timeout_seconds,
        "max_articles": config.max_articles_per_source,
    }
    return [
        NewsAPIAdapter(api_key=config.newsapi_key, **common),
        RedditAdapter(**common),
        HackerNewsAdapter(**common),
        GuardianAdapter(api_key=config.guardian_api_key, **common),
        WorldNewsAdapter(api_key=config.worldnews_api_key, **common),
        MediaStackAdapter(api_key=config.mediastack_api_key, **common),
        GNewsAdapter(api_key=config.gnews_api_key, **common),
        CurrentsAdapter(**common),
        TamilNaduNewsAdapter(**common),
        SouthIndiaNewsAdapter(**common),
    ]


def build_trending_service(
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[Settings] = None,
) -> TrendingService:
    """Assemble the cache-fronted aggregation pipeline.

    Args:
        client: Shared HTTP client for all adapters
        config: Settings for timeouts, cache and result size

    Returns:
        Configured trending service
    """
    config = config or default_settings
    return TrendingService(
        orchestrator=FetchOrchestrator(
            get_news_sources(client, config),
            timeout_seconds=config.source_timeout_seconds,
        ),
        aggregator=Aggregator(max_results=config.trending_max_results),
        cache=TrendingCache(
            ttl_seconds=config.cache_ttl_seconds,
            single_flight=config.cache_single_flight,
        ),
    )


# ============================================================================
# Request Dependencies
# ============================================================================


def get_trending_service(request: Request) -> TrendingService:
    """Get the process-wide trending service created at startup.

    Returns:
        Trending service stored on the application state
    """
    return request.app.state.trending_service  # type: ignore[no-any-return]


TrendingServiceDep = Annotated[TrendingService, Depends(get_trending_service)]
