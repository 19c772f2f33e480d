"""Mediastack live news adapter."""

from typing import Any, Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class MediaStackAdapter(NewsSourceAdapter):
    """Adapter for the Mediastack ``/v1/news`` endpoint.

    Mediastack takes a comma-separated ``categories`` list; a single
    category is passed as-is. Requires ``MEDIASTACK_API_KEY``.
    """

    API_URL = "https://api.mediastack.com/v1/news"
    requires_api_key = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="MediaStack",
            client=client,
            api_key=api_key,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        params: dict[str, Any] = {
            "access_key": self.api_key,
            "languages": "en",
            "limit": self.max_articles,
        }
        if category:
            params["categories"] = category

        payload = await self._get_json(self.API_URL, params)

        # Mediastack reports quota and key problems as a 200 without "data"
        if not isinstance(payload, dict) or not payload.get("data"):
            logger.warning("Media Stack API returned no data.")
            return []

        return self._map_items(self._extract_list(payload, "data"), self._to_article)

    def _to_article(self, item: dict[str, Any]) -> Article:
        return Article(
            source="Media Stack",
            title=item.get("title"),
            url=item.get("url"),
            published_at=item.get("published_at"),
            description=item.get("description"),
            image=item.get("image"),
        )
