"""The Guardian Open Platform content search adapter."""

from typing import Any, Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.models.article import Article


class GuardianAdapter(NewsSourceAdapter):
    """Adapter for The Guardian content API.

    The category maps to a Guardian ``section`` (e.g. "technology",
    "sport"). Requires ``GUARDIAN_API_KEY``.
    """

    API_URL = "https://content.guardianapis.com/search"
    requires_api_key = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="Guardian",
            client=client,
            api_key=api_key,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        params: dict[str, Any] = {
            "api-key": self.api_key,
            "page-size": self.max_articles,
            "show-fields": "trailText,thumbnail",
        }
        if category:
            params["section"] = category

        payload = await self._get_json(self.API_URL, params)
        results = self._extract_list(payload, "response", "results")
        return self._map_items(results, self._to_article)

    def _to_article(self, item: dict[str, Any]) -> Article:
        fields = item.get("fields") or {}
        return Article(
            source="The Guardian",
            title=item.get("webTitle"),
            url=item.get("webUrl"),
            published_at=item.get("webPublicationDate"),
            description=fields.get("trailText"),
            image=fields.get("thumbnail"),
        )
