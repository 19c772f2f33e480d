"""Canonical article model shared by every news source.

Adapters map their provider-specific payloads into ``Article``; the rest of
the pipeline only ever sees this shape.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from news_aggregator.utils.time import parse_timestamp


class Article(BaseModel):
    """A normalized news item.

    Instances are immutable; derive modified copies with ``model_copy``.
    Serialized with camel-case ``publishedAt`` to match the public API.

    Attributes:
        source: Display name of the origin provider or site
        title: Headline, never empty
        url: Canonical link
        published_at: Publication instant in UTC, None if unknown
        description: Free text, may contain markup
        image: Image URL, None until recovered
        category: Lower-cased category tag set by the source, if any
        region: Locality tag used for ordering only
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str
    title: str = Field(min_length=1)
    url: str = ""
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    description: str = ""
    image: str | None = None
    category: str | None = None
    region: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        """Strip surrounding whitespace so blank titles fail validation."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("url", "description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Map missing optional text to an empty string."""
        return "" if v is None else v

    @field_validator("published_at", mode="before")
    @classmethod
    def parse_published_at(cls, v: Any) -> datetime | None:
        """Normalize any provider timestamp format to UTC, or None."""
        return parse_timestamp(v)

    @field_validator("image", "region", mode="before")
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """Treat empty strings as absent."""
        return v or None

    @field_validator("category", mode="before")
    @classmethod
    def lower_category(cls, v: Any) -> Any:
        """Lower-case category tags; empty tags count as untagged."""
        if isinstance(v, str):
            return v.strip().lower() or None
        return v
