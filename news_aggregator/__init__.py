"""Trending News Aggregator.

Aggregates short-lived news items from REST APIs and RSS/Atom feeds into one
normalized, recency-ranked list with a time-bounded cache.
"""

__version__ = "1.0.0"
