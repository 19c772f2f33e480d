"""Hacker News top stories adapter.

The Firebase API only lists story IDs, so each story is a separate request.
Item requests run concurrently; a failed item is dropped without failing the
batch.
"""

import asyncio
from typing import Any, Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.core.exceptions import SourceFetchError
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class HackerNewsAdapter(NewsSourceAdapter):
    """Adapter for the Hacker News front page.

    Hacker News has no categories; the category is ignored and left to the
    aggregator's keyword filter.
    """

    API_BASE_URL = "https://hacker-news.firebaseio.com/v0"
    ITEM_PAGE_URL = "https://news.ycombinator.com/item?id={id}"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="HackerNews",
            client=client,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        story_ids = await self._get_json(f"{self.API_BASE_URL}/topstories.json")
        if not isinstance(story_ids, list):
            raise SourceFetchError("Unexpected HackerNews response schema: topstories is not a list")

        top_ids = story_ids[: self.max_articles]
        results = await asyncio.gather(
            *(self._fetch_story(story_id) for story_id in top_ids),
            return_exceptions=True,
        )

        stories: list[dict[str, Any]] = []
        for story_id, result in zip(top_ids, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(f"Dropping HackerNews item {story_id}: {result}")
                continue
            if isinstance(result, dict):
                stories.append(result)

        return self._map_items(stories, self._to_article)

    async def _fetch_story(self, story_id: Any) -> Any:
        return await self._get_json(f"{self.API_BASE_URL}/item/{story_id}.json")

    def _to_article(self, story: dict[str, Any]) -> Article:
        return Article(
            source="Hacker News",
            title=story.get("title"),
            url=story.get("url") or self.ITEM_PAGE_URL.format(id=story.get("id")),
            published_at=story.get("time"),
            description="",
        )
