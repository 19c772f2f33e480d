"""World News API search adapter."""

from typing import Any, Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.models.article import Article


class WorldNewsAdapter(NewsSourceAdapter):
    """Adapter for worldnewsapi.com ``search-news``.

    Requires ``WORLDNEWS_API_KEY``. Publication dates arrive as
    ``YYYY-MM-DD HH:MM:SS`` in UTC.
    """

    API_URL = "https://api.worldnewsapi.com/search-news"
    requires_api_key = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="WorldNews",
            client=client,
            api_key=api_key,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        params: dict[str, Any] = {
            "api-key": self.api_key,
            "number": self.max_articles,
            "language": "en",
        }
        if category:
            params["category"] = category

        payload = await self._get_json(self.API_URL, params)
        return self._map_items(self._extract_list(payload, "news"), self._to_article)

    def _to_article(self, item: dict[str, Any]) -> Article:
        return Article(
            source="World News API",
            title=item.get("title"),
            url=item.get("url"),
            published_at=item.get("publish_date"),
            description=item.get("text") or item.get("summary") or "",
            image=item.get("image_url") or item.get("image"),
        )
