"""Core functionality for the news aggregator."""

from news_aggregator.core.config import settings
from news_aggregator.core.exceptions import (
    AggregationError,
    NewsAggregatorError,
    SourceConfigurationError,
    SourceFetchError,
)

__all__ = [
    "settings",
    "NewsAggregatorError",
    "SourceFetchError",
    "SourceConfigurationError",
    "AggregationError",
]
