"""Unit tests for the Article model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from news_aggregator.models.article import Article


def test_serializes_with_public_field_names():
    """Test camel-case publishedAt in the JSON form."""
    article = Article(
        source="GNews",
        title="Headline",
        url="https://example.com/h",
        publishedAt="2024-01-02T10:00:00Z",
    )

    data = article.model_dump(mode="json", by_alias=True)

    assert data["publishedAt"].startswith("2024-01-02T10:00:00")
    assert "published_at" not in data
    assert article.published_at == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)


def test_optional_fields_are_normalized():
    """Test mapping of missing optional provider fields."""
    article = Article(
        source="Reddit",
        title="  Padded title  ",
        url=None,
        description=None,
        image="",
        category="  Technology ",
        region="",
    )

    assert article.title == "Padded title"
    assert article.url == ""
    assert article.description == ""
    assert article.image is None
    assert article.category == "technology"
    assert article.region is None
    assert article.published_at is None


@pytest.mark.parametrize("title", ["", "   ", None])
def test_blank_title_is_rejected(title):
    """Test that an article cannot be built without a title."""
    with pytest.raises(ValidationError):
        Article(source="Reddit", title=title)


def test_articles_are_immutable():
    """Test that articles cannot be modified in place."""
    article = Article(source="GNews", title="Headline")

    with pytest.raises(ValidationError):
        article.image = "https://example.com/x.jpg"
