"""Reddit subreddit top-posts adapter.

Uses the public Atom feed rather than the JSON API, which answers anonymous
requests with 403.
"""

import re
import xml.etree.ElementTree as ET
from typing import Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.adapters.news_sources.rss import (
    NAMESPACES,
    atom_entries,
    element_text,
    media_url,
)
from news_aggregator.core.exceptions import SourceFetchError
from news_aggregator.models.article import Article
from news_aggregator.utils.images import extract_image_url


class RedditAdapter(NewsSourceAdapter):
    """Adapter for a subreddit's daily top posts.

    The category is used as the subreddit name; without one the adapter
    reads r/news. Categories that are not valid subreddit names yield no
    articles and no request.
    """

    FEED_URL = "https://www.reddit.com/r/{subreddit}/top/.rss"
    DEFAULT_SUBREDDIT = "news"
    SUBREDDIT_PATTERN = re.compile(r"[A-Za-z0-9_]{2,21}")

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="Reddit",
            client=client,
            timeout=timeout,
            max_articles=max_articles,
        )

    async def _fetch(self, category: str) -> list[Article]:
        subreddit = category or self.DEFAULT_SUBREDDIT
        if not self.SUBREDDIT_PATTERN.fullmatch(subreddit):
            raise SourceFetchError(f"Category is not a valid subreddit name: {subreddit!r}")

        root = await self._get_xml(
            self.FEED_URL.format(subreddit=subreddit),
            {"limit": self.max_articles, "t": "day"},
        )

        try:
            entries = atom_entries(root)
        except ValueError as e:
            raise SourceFetchError(str(e)) from e

        return self._map_items(entries, self._to_article)

    def _to_article(self, entry: ET.Element) -> Article:
        link = entry.find("atom:link", NAMESPACES)
        content = element_text(entry, "atom:content") or ""

        return Article(
            source="Reddit",
            title=element_text(entry, "atom:title"),
            url=link.get("href") if link is not None else "",
            published_at=element_text(entry, "atom:updated"),
            description=content,
            image=media_url(entry) or extract_image_url(content),
        )
