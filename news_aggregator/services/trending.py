"""Trending articles service.

This module provides the TrendingService, which answers one trending request
by consulting the cache and, on a miss, running the fetch and aggregation
pipeline.
"""

from typing import Optional

from news_aggregator.core.exceptions import AggregationError
from news_aggregator.models.article import Article
from news_aggregator.services.aggregator import Aggregator
from news_aggregator.services.cache import TrendingCache
from news_aggregator.services.fetch_orchestrator import FetchOrchestrator
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class TrendingService:
    """Cache-fronted aggregation pipeline.

    Attributes:
        orchestrator: Concurrent fetch across all sources
        aggregator: Merge/filter/sort stage
        cache: Category-keyed TTL cache
    """

    def __init__(
        self,
        orchestrator: FetchOrchestrator,
        aggregator: Aggregator,
        cache: TrendingCache,
    ) -> None:
        self.orchestrator = orchestrator
        self.aggregator = aggregator
        self.cache = cache

    async def get_trending(self, category: Optional[str] = None) -> list[Article]:
        """Return the trending list for a category.

        Args:
            category: Optional category filter; None or "" means unfiltered

        Returns:
            Up to ``aggregator.max_results`` articles, newest first

        Raises:
            AggregationError: If merging, filtering or sorting fails
        """
        category = category or ""
        return await self.cache.get_or_compute(
            category,
            lambda: self._aggregate(category),
        )

    async def _aggregate(self, category: str) -> list[Article]:
        results = await self.orchestrator.fetch_all(category)
        try:
            articles = self.aggregator.process(results, category)
        except Exception as e:
            raise AggregationError(
                f"Failed to aggregate articles for category: {category or 'all'}"
            ) from e

        logger.info(
            f"Computed {len(articles)} trending articles "
            f"for category: {category or 'all'}"
        )
        return articles
