"""GNews top-headlines adapter."""

from typing import Any, Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.models.article import Article


class GNewsAdapter(NewsSourceAdapter):
    """Adapter for gnews.io ``top-headlines``.

    The category maps to a GNews ``topic``. Requires ``GNEWS_API_KEY``.
    """

    API_URL = "https://gnews.io/api/v4/top-headlines"
    requires_api_key = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="GNews",
            client=client,
            api_key=api_key,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        params: dict[str, Any] = {
            "lang": "en",
            "max": self.max_articles,
            "apikey": self.api_key,
        }
        if category:
            params["topic"] = category

        payload = await self._get_json(self.API_URL, params)
        return self._map_items(self._extract_list(payload, "articles"), self._to_article)

    def _to_article(self, item: dict[str, Any]) -> Article:
        return Article(
            source="GNews",
            title=item.get("title"),
            url=item.get("url"),
            published_at=item.get("publishedAt"),
            description=item.get("description"),
            image=item.get("image"),
        )
