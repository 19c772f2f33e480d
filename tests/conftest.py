"""Pytest configuration and shared fixtures.

This module provides common fixtures for all tests: article factories and
HTTP clients backed by ``httpx.MockTransport`` so no test reaches the
network.
"""

import os

# Keep test runs from writing log files or picking up real credentials
os.environ["LOG_FILE"] = ""
os.environ["LOG_FORMAT"] = "text"
for _key in (
    "NEWSAPI_KEY",
    "GUARDIAN_API_KEY",
    "WORLDNEWS_API_KEY",
    "MEDIASTACK_API_KEY",
    "GNEWS_API_KEY",
):
    os.environ[_key] = ""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from news_aggregator.models.article import Article


@pytest.fixture
def make_article() -> Callable[..., Article]:
    """Provide a factory for articles with sensible defaults.

    Returns:
        Function building an Article from keyword overrides
    """

    def _make(**overrides: Any) -> Article:
        fields: dict[str, Any] = {
            "source": "Test Source",
            "title": "Test Article",
            "url": "https://example.com/article",
            "published_at": "2024-01-01T10:00:00Z",
            "description": "",
        }
        fields.update(overrides)
        return Article(**fields)

    return _make


@pytest_asyncio.fixture
async def mock_http() -> AsyncGenerator[Callable[..., httpx.AsyncClient], None]:
    """Provide a factory for HTTP clients served by a request handler.

    Yields:
        Function taking ``handler(request) -> httpx.Response`` and returning
        an AsyncClient that routes every request to it
    """
    clients: list[httpx.AsyncClient] = []

    def _client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _client

    for client in clients:
        await client.aclose()
