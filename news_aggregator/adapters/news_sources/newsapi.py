"""NewsAPI.org top-headlines adapter."""

from typing import Any, Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.models.article import Article


class NewsAPIAdapter(NewsSourceAdapter):
    """Adapter for the NewsAPI.org ``top-headlines`` endpoint.

    The category is passed through as NewsAPI's ``category`` enum
    (business, entertainment, general, health, science, sports, technology).
    Requires ``NEWSAPI_KEY``.
    """

    API_URL = "https://newsapi.org/v2/top-headlines"
    requires_api_key = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="NewsAPI",
            client=client,
            api_key=api_key,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        params: dict[str, Any] = {
            "language": "en",
            "pageSize": self.max_articles,
            "apiKey": self.api_key,
        }
        if category:
            params["category"] = category

        payload = await self._get_json(self.API_URL, params)
        return self._map_items(self._extract_list(payload, "articles"), self._to_article)

    def _to_article(self, item: dict[str, Any]) -> Article:
        return Article(
            source="NewsAPI",
            title=item.get("title"),
            url=item.get("url"),
            published_at=item.get("publishedAt"),
            description=item.get("description"),
            image=item.get("urlToImage"),
        )
