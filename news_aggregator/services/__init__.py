"""Aggregation pipeline services."""

from news_aggregator.services.aggregator import Aggregator
from news_aggregator.services.cache import CacheEntry, TrendingCache
from news_aggregator.services.fetch_orchestrator import FetchOrchestrator
from news_aggregator.services.trending import TrendingService

__all__ = [
    "Aggregator",
    "CacheEntry",
    "TrendingCache",
    "FetchOrchestrator",
    "TrendingService",
]
