"""Regional RSS feed adapters for South Indian news.

Each adapter reads several state-scoped RSS feeds and merges them into one
list, tagging every article with its region code. Feeds are isolated from one
another: a feed that fails is logged and skipped.
"""

import asyncio
import xml.etree.ElementTree as ET
from typing import Optional

import httpx

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.adapters.news_sources.rss import element_text, rss_channel
from news_aggregator.core.constants import DEFAULT_FEED_CATEGORY, Region
from news_aggregator.core.exceptions import SourceFetchError
from news_aggregator.models.article import Article
from news_aggregator.utils.images import extract_image_url
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


SOUTH_INDIA_FEEDS: dict[str, list[str]] = {
    Region.TAMIL_NADU.value: [
        "https://www.thehindu.com/news/national/tamil-nadu/?service=rss",
        "https://www.dinamalar.com/rss_feed.asp?cat=1",
    ],
    Region.KERALA.value: [
        "https://www.thehindu.com/news/national/kerala/?service=rss",
        "https://malayalam.samayam.com/rssfeed.cms",
    ],
    Region.KARNATAKA.value: [
        "https://www.thehindu.com/news/national/karnataka/?service=rss",
        "https://kannada.oneindia.com/rss/news-karnataka-fb.xml",
    ],
    Region.ANDHRA_PRADESH.value: [
        "https://www.thehindu.com/news/national/andhra-pradesh/?service=rss",
        "https://telugu.samayam.com/rssfeed.cms",
    ],
    Region.TELANGANA.value: [
        "https://www.thehindu.com/news/national/telangana/?service=rss",
        "https://telugu.samayam.com/rssfeed.cms",
    ],
}


class RegionalFeedsAdapter(NewsSourceAdapter):
    """Adapter merging several region-scoped RSS feeds.

    The category is not sent upstream; regional items carry their own
    ``category`` tag (the feed's first ``<category>``, or "general") which
    the aggregator matches exactly.

    Attributes:
        feeds: Region code mapped to the feed URLs for that region
        extract_images: Recover images from item description markup
    """

    priority = 1

    def __init__(
        self,
        source_name: str,
        feeds: dict[str, list[str]],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
        extract_images: bool = False,
    ) -> None:
        """Initialize the regional feeds adapter.

        Args:
            source_name: Identifier for the news source
            feeds: Region code mapped to feed URLs
            client: Shared HTTP client
            timeout: Request timeout in seconds
            max_articles: Maximum number of items kept from each feed
            extract_images: Recover images from item description markup
        """
        super().__init__(
            source_name=source_name,
            client=client,
            timeout=timeout,
            max_articles=max_articles,
        )
        self.feeds = feeds
        self.extract_images = extract_images

    async def _fetch(self, category: str) -> list[Article]:
        targets = [(region, url) for region, urls in self.feeds.items() for url in urls]
        results = await asyncio.gather(
            *(self._fetch_feed(region, url) for region, url in targets),
            return_exceptions=True,
        )

        articles: list[Article] = []
        for (region, url), result in zip(targets, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(f"{self.source_name}: dropping {region} feed {url}: {result}")
                continue
            articles.extend(result)
        return articles

    async def _fetch_feed(self, region: str, url: str) -> list[Article]:
        """Fetch one feed; failures yield an empty list."""
        try:
            root = await self._get_xml(url)
            channel = rss_channel(root)
        except (SourceFetchError, ValueError) as e:
            logger.warning(f"{self.source_name}: skipping {region} feed {url}: {e}")
            return []

        site_name = element_text(channel, "title") or f"{region} News"
        return self._map_items(
            channel.findall("item"),
            lambda item: self._to_article(item, site_name, region),
        )

    def _to_article(self, item: ET.Element, site_name: str, region: str) -> Article:
        description = element_text(item, "description") or ""
        return Article(
            source=site_name,
            title=element_text(item, "title"),
            url=element_text(item, "link"),
            published_at=element_text(item, "pubDate"),
            description=description,
            category=element_text(item, "category") or DEFAULT_FEED_CATEGORY,
            region=region,
            image=extract_image_url(description) if self.extract_images else None,
        )


class SouthIndiaNewsAdapter(RegionalFeedsAdapter):
    """All five South Indian states, merged ahead of every other source."""

    priority = 2

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="SouthIndiaNews",
            feeds=SOUTH_INDIA_FEEDS,
            client=client,
            timeout=timeout,
            max_articles=max_articles,
        )


class TamilNaduNewsAdapter(RegionalFeedsAdapter):
    """Tamil Nadu feeds, with images recovered from item descriptions."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        super().__init__(
            source_name="TamilNaduNews",
            feeds={Region.TAMIL_NADU.value: SOUTH_INDIA_FEEDS[Region.TAMIL_NADU.value]},
            client=client,
            timeout=timeout,
            max_articles=max_articles,
            extract_images=True,
        )
