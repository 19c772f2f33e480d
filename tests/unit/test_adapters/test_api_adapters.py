"""Unit tests for the JSON API news source adapters."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from news_aggregator.adapters.news_sources import (
    CurrentsAdapter,
    GNewsAdapter,
    GuardianAdapter,
    MediaStackAdapter,
    NewsAPIAdapter,
    WorldNewsAdapter,
)
from news_aggregator.core.exceptions import SourceFetchError
from news_aggregator.models.article import Article


@pytest.mark.asyncio
async def test_newsapi_maps_articles_and_sends_category(mock_http):
    """Test NewsAPI request parameters and response mapping."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "status": "ok",
                "articles": [
                    {
                        "title": "Chip shortage eases",
                        "url": "https://example.com/chips",
                        "publishedAt": "2024-01-02T10:00:00Z",
                        "description": "Supply recovers",
                        "urlToImage": "https://example.com/chips.jpg",
                    },
                    {
                        "title": "No image here",
                        "url": "https://example.com/plain",
                        "publishedAt": "2024-01-01T08:00:00Z",
                        "description": None,
                        "urlToImage": None,
                    },
                ],
            },
        )

    adapter = NewsAPIAdapter(api_key="secret", client=mock_http(handler))
    articles = await adapter.fetch("technology")

    assert len(articles) == 2
    assert seen[0].url.params["category"] == "technology"
    assert seen[0].url.params["apiKey"] == "secret"
    assert seen[0].url.params["language"] == "en"

    first = articles[0]
    assert first.source == "NewsAPI"
    assert first.title == "Chip shortage eases"
    assert first.published_at == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
    assert first.image == "https://example.com/chips.jpg"

    second = articles[1]
    assert second.description == ""
    assert second.image is None


@pytest.mark.asyncio
async def test_newsapi_omits_category_when_empty(mock_http):
    """Test that no category parameter is sent for unfiltered requests."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"articles": []})

    adapter = NewsAPIAdapter(api_key="secret", client=mock_http(handler))
    assert await adapter.fetch("") == []
    assert "category" not in seen[0].url.params


@pytest.mark.asyncio
async def test_missing_api_key_skips_without_network(mock_http):
    """Test that an unconfigured credentialed source is skipped."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("network must not be touched")

    for adapter_cls in (NewsAPIAdapter, GuardianAdapter, WorldNewsAdapter, MediaStackAdapter, GNewsAdapter):
        adapter = adapter_cls(api_key="", client=mock_http(handler))
        assert adapter.is_configured is False
        assert await adapter.fetch("sports") == []


@pytest.mark.asyncio
async def test_http_error_returns_empty(mock_http):
    """Test that an error status is converted to an empty result."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"message": "rate limited"})

    adapter = GNewsAdapter(api_key="secret", client=mock_http(handler))
    assert await adapter.fetch("world") == []


@pytest.mark.asyncio
async def test_transport_error_returns_empty(mock_http):
    """Test that a connection failure is converted to an empty result."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = NewsAPIAdapter(api_key="secret", client=mock_http(handler))
    assert await adapter.fetch() == []


@pytest.mark.asyncio
async def test_malformed_payload_returns_empty(mock_http):
    """Test that invalid JSON and unexpected schemas yield empty results."""

    def bad_json(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    def wrong_schema(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"unexpected": True})

    assert await NewsAPIAdapter(api_key="k", client=mock_http(bad_json)).fetch() == []
    assert await NewsAPIAdapter(api_key="k", client=mock_http(wrong_schema)).fetch() == []


def test_extract_list_reports_missing_path():
    """Test schema errors raised inside the adapter boundary."""
    adapter = GuardianAdapter(api_key="k")

    with pytest.raises(SourceFetchError, match="response.results"):
        adapter._extract_list({"response": {}}, "response", "results")


@pytest.mark.asyncio
async def test_items_without_title_are_dropped(mock_http):
    """Test that incomplete items are omitted rather than emitted partially."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "articles": [
                    {"title": "", "url": "https://example.com/a"},
                    {"title": None, "url": "https://example.com/b"},
                    "not an object",
                    {"title": "Kept", "url": "https://example.com/c"},
                ]
            },
        )

    adapter = GNewsAdapter(api_key="secret", client=mock_http(handler))
    articles = await adapter.fetch()

    assert [article.title for article in articles] == ["Kept"]


@pytest.mark.asyncio
async def test_out_of_range_date_does_not_drop_batch(mock_http):
    """Test that one item with a date overflowing UTC keeps the rest."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "articles": [
                    {"title": "Good", "publishedAt": "2024-01-02T10:00:00Z"},
                    {"title": "Bad", "publishedAt": "0001-01-01T00:00:00+01:00"},
                ]
            },
        )

    adapter = NewsAPIAdapter(api_key="secret", client=mock_http(handler))
    articles = await adapter.fetch()

    assert [article.title for article in articles] == ["Good", "Bad"]
    assert articles[1].published_at is None


def test_map_items_skips_items_that_overflow():
    """Test that arithmetic overflow while mapping drops only that item."""
    adapter = GNewsAdapter(api_key="secret")

    def mapper(item):
        if item == "overflow":
            raise OverflowError("date value out of range")
        return Article(source="GNews", title=item)

    articles = adapter._map_items(["first", "overflow", "last"], mapper)

    assert [article.title for article in articles] == ["first", "last"]


@pytest.mark.asyncio
async def test_guardian_maps_fields_and_section(mock_http):
    """Test Guardian section parameter and nested field mapping."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "response": {
                    "status": "ok",
                    "results": [
                        {
                            "webTitle": "Match report",
                            "webUrl": "https://theguardian.com/sport/1",
                            "webPublicationDate": "2024-01-02T09:30:00Z",
                            "fields": {
                                "trailText": "A close game",
                                "thumbnail": "https://media.guim.co.uk/1.jpg",
                            },
                        },
                        {
                            "webTitle": "No fields",
                            "webUrl": "https://theguardian.com/sport/2",
                            "webPublicationDate": "2024-01-01T09:30:00Z",
                        },
                    ],
                }
            },
        )

    adapter = GuardianAdapter(api_key="secret", client=mock_http(handler))
    articles = await adapter.fetch("sport")

    assert seen[0].url.params["section"] == "sport"
    assert seen[0].url.params["api-key"] == "secret"
    assert articles[0].source == "The Guardian"
    assert articles[0].description == "A close game"
    assert articles[0].image == "https://media.guim.co.uk/1.jpg"
    assert articles[1].description == ""
    assert articles[1].image is None


@pytest.mark.asyncio
async def test_worldnews_parses_space_separated_dates(mock_http):
    """Test World News date format and description fallback."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "news": [
                    {
                        "title": "Summit ends",
                        "url": "https://example.com/summit",
                        "publish_date": "2024-01-02 10:00:00",
                        "summary": "Leaders agree",
                        "image_url": "https://example.com/summit.jpg",
                    }
                ]
            },
        )

    adapter = WorldNewsAdapter(api_key="secret", client=mock_http(handler))
    [article] = await adapter.fetch()

    assert article.source == "World News API"
    assert article.published_at == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
    assert article.description == "Leaders agree"
    assert article.image == "https://example.com/summit.jpg"


@pytest.mark.asyncio
async def test_mediastack_without_data_returns_empty(mock_http):
    """Test Mediastack error payloads delivered with a 200 status."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": {"code": "usage_limit_reached"}})

    adapter = MediaStackAdapter(api_key="secret", client=mock_http(handler))
    assert await adapter.fetch("business") == []


@pytest.mark.asyncio
async def test_mediastack_sends_categories(mock_http):
    """Test Mediastack categories parameter and mapping."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "data": [
                    {
                        "title": "Markets rally",
                        "url": "https://example.com/markets",
                        "published_at": "2024-01-02T10:00:00+00:00",
                        "description": "Stocks up",
                        "image": None,
                    }
                ]
            },
        )

    adapter = MediaStackAdapter(api_key="secret", client=mock_http(handler))
    [article] = await adapter.fetch("business")

    assert seen[0].url.params["categories"] == "business"
    assert seen[0].url.params["access_key"] == "secret"
    assert article.source == "Media Stack"


@pytest.mark.asyncio
async def test_gnews_sends_topic(mock_http):
    """Test GNews topic parameter."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"articles": []})

    adapter = GNewsAdapter(api_key="secret", client=mock_http(handler))
    await adapter.fetch("science")

    assert seen[0].url.params["topic"] == "science"
    assert seen[0].url.params["apikey"] == "secret"


@pytest.mark.asyncio
async def test_max_articles_caps_output(mock_http):
    """Test that adapters keep at most max_articles items."""

    def handler(request: httpx.Request) -> httpx.Response:
        items = [{"title": f"Story {i}", "url": f"https://example.com/{i}"} for i in range(25)]
        return httpx.Response(200, json={"articles": items})

    adapter = NewsAPIAdapter(api_key="secret", client=mock_http(handler), max_articles=5)
    articles = await adapter.fetch()

    assert [article.title for article in articles] == [f"Story {i}" for i in range(5)]


@pytest.mark.asyncio
async def test_unexpected_error_in_fetch_is_contained():
    """Test that bugs inside an adapter never escape fetch."""
    adapter = NewsAPIAdapter(api_key="secret")

    with patch.object(adapter, "_fetch", new_callable=AsyncMock) as mock_fetch:
        mock_fetch.side_effect = RuntimeError("boom")
        assert await adapter.fetch("technology") == []
        mock_fetch.assert_awaited_once_with("technology")


@pytest.mark.asyncio
async def test_currents_is_disabled(mock_http):
    """Test that the retired Currents source never touches the network."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("network must not be touched")

    adapter = CurrentsAdapter(client=mock_http(handler))

    assert adapter.enabled is False
    assert await adapter.fetch("technology") == []
