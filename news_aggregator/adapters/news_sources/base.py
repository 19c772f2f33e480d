"""Base news source adapter interface.

This module defines the abstract base class for all news source adapters,
providing a consistent ``fetch(category)`` interface and the error boundary
that turns any source failure into an empty result.
"""

import json
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterable, Mapping
from contextlib import asynccontextmanager
from typing import Any, Callable, Optional

import httpx
from pydantic import ValidationError

from news_aggregator.core.exceptions import SourceConfigurationError, SourceFetchError
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class NewsSourceAdapter(ABC):
    """Abstract base class for news source adapters.

    Subclasses implement ``_fetch`` and may raise from it freely; ``fetch``
    is the public boundary and never raises.

    Attributes:
        source_name: Identifier for the news source (e.g., "NewsAPI")
        timeout: Request timeout in seconds when no shared client is injected
        max_articles: Maximum number of articles to keep
        priority: Fixed ordering rank; higher values are merged first
        enabled: False for sources that are registered but never queried
    """

    requires_api_key: bool = False
    enabled: bool = True
    priority: int = 0

    def __init__(
        self,
        source_name: str,
        client: Optional[httpx.AsyncClient] = None,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        max_articles: int = 10,
    ) -> None:
        """Initialize the news source adapter.

        Args:
            source_name: Identifier for the news source
            client: Shared HTTP client; a short-lived one is used when omitted
            api_key: Provider credential, for sources that need one
            timeout: Request timeout in seconds
            max_articles: Maximum number of articles to keep
        """
        self.source_name = source_name
        self.client = client
        self.api_key = api_key
        self.timeout = timeout
        self.max_articles = max_articles

    @property
    def is_configured(self) -> bool:
        """Whether the adapter has everything it needs to run."""
        return not self.requires_api_key or bool(self.api_key)

    async def fetch(self, category: str = "") -> list[Article]:
        """Fetch articles from the news source.

        Args:
            category: Optional category filter, passed to the provider in
                its own parameter form

        Returns:
            Articles from the source, or an empty list if the source is
            unconfigured or failed
        """
        try:
            if not self.is_configured:
                raise SourceConfigurationError(
                    f"{self.source_name} API key not set. Skipping {self.source_name} fetch."
                )
            articles = await self._fetch(category)
        except SourceConfigurationError as e:
            logger.warning(str(e))
            return []
        except SourceFetchError as e:
            logger.warning(f"Error fetching {self.source_name}: {e}")
            return []
        except Exception as e:
            logger.warning(
                f"Unexpected error fetching {self.source_name}: {e}",
                exc_info=True,
            )
            return []

        logger.info(
            f"{self.source_name} fetched {len(articles)} articles "
            f"for category: {category or 'all'}"
        )
        return articles

    @abstractmethod
    async def _fetch(self, category: str) -> list[Article]:
        """Fetch and map articles from the provider.

        Args:
            category: Optional category filter

        Returns:
            List of mapped articles

        Raises:
            SourceFetchError: If fetching or parsing fails
        """
        pass

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the shared client, or a short-lived one if none was injected."""
        if self.client is not None:
            yield self.client
            return

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            yield client

    async def _get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        """Issue a GET request and raise for non-2xx responses.

        Raises:
            SourceFetchError: On transport errors or error status codes
        """
        try:
            async with self._session() as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response
        except httpx.HTTPError as e:
            raise SourceFetchError(f"Request to {url} failed: {e}") from e

    async def _get_json(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET a JSON document.

        Raises:
            SourceFetchError: On transport errors or a malformed payload
        """
        response = await self._get(url, params)
        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise SourceFetchError(f"Malformed JSON from {url}: {e}") from e

    async def _get_xml(self, url: str, params: Optional[Mapping[str, Any]] = None) -> ET.Element:
        """GET an XML feed and return its root element.

        Raises:
            SourceFetchError: On transport errors or a malformed feed
        """
        response = await self._get(url, params)
        try:
            return ET.fromstring(response.content)
        except ET.ParseError as e:
            raise SourceFetchError(f"Malformed feed from {url}: {e}") from e

    def _extract_list(self, payload: Any, *keys: str) -> list[Any]:
        """Walk ``keys`` into a JSON payload and return the list found there.

        Raises:
            SourceFetchError: If the payload does not have the expected shape
        """
        node = payload
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                raise SourceFetchError(
                    f"Unexpected {self.source_name} response schema: missing '{'.'.join(keys)}'"
                )
            node = node[key]

        if not isinstance(node, list):
            raise SourceFetchError(
                f"Unexpected {self.source_name} response schema: '{'.'.join(keys)}' is not a list"
            )
        return node

    def _map_items(
        self,
        items: Iterable[Any],
        mapper: Callable[[Any], Optional[Article]],
    ) -> list[Article]:
        """Map raw provider items into articles, dropping any that fail.

        Args:
            items: Provider-native items
            mapper: Function building an Article (or None) from one item

        Returns:
            Up to ``max_articles`` mapped articles
        """
        articles: list[Article] = []

        for item in items:
            if len(articles) >= self.max_articles:
                break
            try:
                article = mapper(item)
            except (
                ValidationError,
                KeyError,
                TypeError,
                AttributeError,
                ValueError,
                OverflowError,
            ) as e:
                logger.debug(f"Skipping malformed {self.source_name} item: {e}")
                continue
            if article is not None:
                articles.append(article)

        return articles
