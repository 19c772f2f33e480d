"""News source adapters."""

from news_aggregator.adapters.news_sources.base import NewsSourceAdapter
from news_aggregator.adapters.news_sources.currents import CurrentsAdapter
from news_aggregator.adapters.news_sources.gnews import GNewsAdapter
from news_aggregator.adapters.news_sources.guardian import GuardianAdapter
from news_aggregator.adapters.news_sources.hacker_news import HackerNewsAdapter
from news_aggregator.adapters.news_sources.mediastack import MediaStackAdapter
from news_aggregator.adapters.news_sources.newsapi import NewsAPIAdapter
from news_aggregator.adapters.news_sources.reddit import RedditAdapter
from news_aggregator.adapters.news_sources.regional import (
    RegionalFeedsAdapter,
    SouthIndiaNewsAdapter,
    TamilNaduNewsAdapter,
)
from news_aggregator.adapters.news_sources.worldnews import WorldNewsAdapter

__all__ = [
    "NewsSourceAdapter",
    "NewsAPIAdapter",
    "RedditAdapter",
    "HackerNewsAdapter",
    "GuardianAdapter",
    "WorldNewsAdapter",
    "MediaStackAdapter",
    "GNewsAdapter",
    "CurrentsAdapter",
    "RegionalFeedsAdapter",
    "TamilNaduNewsAdapter",
    "SouthIndiaNewsAdapter",
]
