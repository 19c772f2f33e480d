"""Custom exception hierarchy for the news aggregator.

Adapter-level errors never leave the adapter that raised them; they exist so
the adapter boundary can tell a skipped source from a broken one when it logs.
"""


class NewsAggregatorError(Exception):
    """Base exception for all news aggregator errors.

    All custom exceptions in the system should inherit from this base class
    to allow for consistent error handling at the API boundary.
    """

    pass


class SourceFetchError(NewsAggregatorError):
    """Errors while fetching or parsing an upstream news source.

    Raised inside an adapter on network failures, malformed payloads or an
    unexpected response schema. Converted to an empty result at the adapter
    boundary.
    """

    pass


class SourceConfigurationError(NewsAggregatorError):
    """A news source is missing the configuration it needs.

    Raised when a credentialed provider has no API key configured. The
    adapter skips the source instead of failing.
    """

    pass


class AggregationError(NewsAggregatorError):
    """Unexpected faults in the aggregation pipeline.

    Raised when merging, filtering or sorting fails as a whole. Surfaces as an
    HTTP 500 at the API boundary.
    """

    pass
