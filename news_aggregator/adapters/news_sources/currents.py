"""Currents API adapter (disabled)."""

from typing import Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class CurrentsAdapter(NewsSourceAdapter):
    """Placeholder for the Currents API.

    Currents rate-limits so aggressively (HTTP 429) that it was retired from
    the aggregation. The adapter stays registered so the source is visible in
    logs and health output, but never touches the network.
    """

    enabled = False

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="Currents",
            client=client,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        logger.warning("Skipping Currents fetch due to rate limiting issues.")
        return []
