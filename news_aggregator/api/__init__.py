"""HTTP API for the news aggregator."""
