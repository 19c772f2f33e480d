"""Concurrent fetch across every registered news source.

This module provides the FetchOrchestrator, which runs all adapters in
parallel for one request, gives each its own time budget, and collects
whatever succeeded. It never raises: the worst case is every source empty.
"""

import asyncio
import time
from collections.abc import Sequence

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.core.constants import DEFAULT_SOURCE_TIMEOUT_SECONDS
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class FetchOrchestrator:
    """Fan out one aggregation request to all news sources.

    Results are keyed by ``source_name`` and ordered by adapter ``priority``
    (highest first), keeping registration order among equal priorities.

    Attributes:
        adapters: Registered adapters in priority order
        timeout_seconds: Independent budget for each adapter
    """

    def __init__(
        self,
        adapters: Sequence[NewsSourceAdapter],
        timeout_seconds: float = DEFAULT_SOURCE_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            adapters: News source adapters in registration order
            timeout_seconds: Per-adapter time budget in seconds
        """
        self.adapters = sorted(adapters, key=lambda adapter: -adapter.priority)
        self.timeout_seconds = timeout_seconds

        logger.info(
            f"Initialized FetchOrchestrator with {len(self.adapters)} sources "
            f"and a {timeout_seconds:.1f}s budget per source"
        )

    async def fetch_all(self, category: str = "") -> dict[str, list[Article]]:
        """Fetch from every adapter concurrently.

        Args:
            category: Optional category filter forwarded to each adapter

        Returns:
            Mapping from source name to that source's articles, in
            priority order; failed or timed-out sources map to an empty list
        """
        start_time = time.perf_counter()

        results = await asyncio.gather(
            *(self._fetch_source(adapter, category) for adapter in self.adapters)
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Total fetch time: {elapsed_ms:.0f} ms "
            f"({sum(len(articles) for articles in results)} articles "
            f"from {len(self.adapters)} sources)"
        )

        collected: dict[str, list[Article]] = {}
        for adapter, articles in zip(self.adapters, results, strict=True):
            collected.setdefault(adapter.source_name, []).extend(articles)
        return collected

    async def _fetch_source(
        self,
        adapter: NewsSourceAdapter,
        category: str,
    ) -> list[Article]:
        """Fetch from one adapter within its time budget.

        A timeout cancels the adapter's task, and with it any in-flight
        request, then substitutes an empty result.
        """
        source_name = adapter.source_name
        start_time = time.perf_counter()

        try:
            articles = await asyncio.wait_for(
                adapter.fetch(category),
                timeout=self.timeout_seconds,
            )
        except TimeoutError:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.warning(
                f"{source_name} fetch timed out after {elapsed_ms:.0f} ms "
                f"(budget {self.timeout_seconds * 1000:.0f} ms)"
            )
            return []
        except Exception as e:
            logger.warning(f"Error fetching {source_name}: {e}", exc_info=True)
            return []

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"{source_name} fetch took {elapsed_ms:.0f} ms "
            f"and returned {len(articles)} articles."
        )
        return list(articles)
