"""Domain and API models."""

from news_aggregator.models.article import Article

__all__ = ["Article"]
