"""Merge, filter and rank fetched articles.

This module provides the Aggregator, which turns the per-source results of
one fetch into the final trending list: images recovered, category applied,
newest first, truncated to the top N.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from news_aggregator.core.constants import DEFAULT_MAX_RESULTS
from news_aggregator.models.article import Article
from news_aggregator.utils.images import recover_image
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)

# Sort key for articles without a usable timestamp
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def matches_category(article: Article, category: str) -> bool:
    """Check an article against a requested category.

    Tagged articles match on exact, case-insensitive tag equality. Untagged
    articles match when the category appears in the title, the description
    or the source name.

    Args:
        article: Article to test
        category: Requested category (any case)

    Returns:
        True if the article belongs in the category
    """
    wanted = category.lower()

    if article.category:
        return article.category.lower() == wanted

    return (
        wanted in article.title.lower()
        or wanted in article.description.lower()
        or wanted in article.source.lower()
    )


def recency_key(article: Article) -> tuple[bool, datetime]:
    """Sort key placing undated articles after every dated one."""
    return (article.published_at is not None, article.published_at or _OLDEST)


class Aggregator:
    """Produce the ranked trending list from per-source results.

    Attributes:
        max_results: Number of articles kept after sorting
    """

    def __init__(self, max_results: int = DEFAULT_MAX_RESULTS) -> None:
        self.max_results = max_results

    def process(
        self,
        results: Mapping[str, Iterable[Article]],
        category: str = "",
    ) -> list[Article]:
        """Merge, filter, sort and truncate articles.

        The output is deterministic for identical input: sorting is stable,
        so articles with equal (or missing) timestamps keep merge order.

        Args:
            results: Articles per source, in merge order
            category: Optional category filter

        Returns:
            At most ``max_results`` articles, newest first
        """
        merged = [
            article
            for articles in results.values()
            for article in articles
            if isinstance(article, Article)
        ]

        articles = [recover_image(article) for article in merged if article.title]

        if category:
            articles = [article for article in articles if matches_category(article, category)]

        articles.sort(key=recency_key, reverse=True)
        top_articles = articles[: self.max_results]

        logger.debug(
            f"Aggregated {len(merged)} articles into {len(top_articles)} "
            f"for category: {category or 'all'}"
        )
        return top_articles
