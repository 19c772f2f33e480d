"""Unit tests for the Hacker News adapter."""

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from news_aggregator.adapters.news_sources import HackerNewsAdapter


def story(story_id: int, **overrides):
    data = {
        "id": story_id,
        "type": "story",
        "title": f"Story {story_id}",
        "url": f"https://example.com/{story_id}",
        "time": 1704189600 + story_id,
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_fetches_top_stories(mock_http):
    """Test ID listing, item mapping and the item-page URL fallback."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v0/topstories.json":
            return httpx.Response(200, json=[1, 2, 3])
        story_id = int(request.url.path.rsplit("/", 1)[-1].removesuffix(".json"))
        if story_id == 2:
            return httpx.Response(200, json=story(2, url=None))
        return httpx.Response(200, json=story(story_id))

    adapter = HackerNewsAdapter(client=mock_http(handler))
    articles = await adapter.fetch("technology")

    assert [article.title for article in articles] == ["Story 1", "Story 2", "Story 3"]
    assert articles[0].source == "Hacker News"
    assert articles[0].description == ""
    assert articles[0].published_at == datetime(2024, 1, 2, 10, 0, 1, tzinfo=timezone.utc)
    assert articles[1].url == "https://news.ycombinator.com/item?id=2"


@pytest.mark.asyncio
async def test_only_top_ids_are_fetched(mock_http):
    """Test that the ID list is cut to max_articles before fan-out."""
    item_requests: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v0/topstories.json":
            return httpx.Response(200, json=list(range(1, 500)))
        item_requests.append(request.url.path)
        return httpx.Response(200, json=story(1))

    adapter = HackerNewsAdapter(client=mock_http(handler), max_articles=10)
    await adapter.fetch()

    assert len(item_requests) == 10


@pytest.mark.asyncio
async def test_item_failures_are_dropped_individually(mock_http):
    """Test that one failed or deleted item does not fail the batch."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/v0/topstories.json":
            return httpx.Response(200, json=[1, 2, 3, 4])
        if path == "/v0/item/2.json":
            return httpx.Response(500)
        if path == "/v0/item/3.json":
            return httpx.Response(200, content=b"null")
        if path == "/v0/item/4.json":
            raise httpx.ReadTimeout("slow item", request=request)
        return httpx.Response(200, json=story(1))

    adapter = HackerNewsAdapter(client=mock_http(handler))
    articles = await adapter.fetch()

    assert [article.title for article in articles] == ["Story 1"]


@pytest.mark.asyncio
async def test_item_requests_run_concurrently():
    """Test that item fetches overlap instead of running one by one."""
    in_flight = 0
    peak = 0

    async def fake_story(story_id):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return story(story_id)

    async def fake_get_json(url, params=None):
        return [1, 2, 3, 4, 5]

    adapter = HackerNewsAdapter()
    adapter._get_json = fake_get_json
    adapter._fetch_story = fake_story

    articles = await adapter.fetch()

    assert len(articles) == 5
    assert peak == 5


@pytest.mark.asyncio
async def test_top_stories_failure_returns_empty(mock_http):
    """Test that a failing ID listing yields an empty result."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": "Permission denied"})

    adapter = HackerNewsAdapter(client=mock_http(handler))
    assert await adapter.fetch() == []
