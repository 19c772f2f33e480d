"""Configuration management using Pydantic Settings.

This module provides centralized configuration for the aggregator, loading
provider credentials, timeouts, cache and logging settings from environment
variables or a ``.env`` file.
"""

import json
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    An empty API key disables the matching news source without failing the
    aggregation.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Provider Credentials
    newsapi_key: str = Field(default="", description="NewsAPI.org API key")
    guardian_api_key: str = Field(default="", description="The Guardian Open Platform key")
    worldnews_api_key: str = Field(default="", description="World News API key")
    mediastack_api_key: str = Field(default="", description="Mediastack access key")
    gnews_api_key: str = Field(default="", description="GNews API key")

    # Source Fetch Configuration
    source_timeout_ms: int = Field(
        default=3000,
        gt=0,
        description="Per-source time budget for one aggregation in milliseconds",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Transport-level timeout for outbound HTTP requests",
    )
    http_user_agent: str = Field(
        default="news-aggregator/1.0 (+https://github.com/)",
        description="User-Agent sent to upstream providers",
    )
    max_articles_per_source: int = Field(
        default=10,
        ge=1,
        description="Maximum articles kept from each source or feed",
    )

    # Aggregation Configuration
    trending_max_results: int = Field(
        default=10,
        ge=1,
        description="Number of articles returned by /trending",
    )

    # Cache Configuration
    cache_ttl_seconds: float = Field(
        default=300.0,
        ge=0,
        description="Freshness window for cached aggregates",
    )
    cache_single_flight: bool = Field(
        default=True,
        description="Collapse concurrent recomputes of the same category",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")
    log_file: str = Field(
        default="logs/news_aggregator.log",
        description="Log file path (empty disables file logging)",
    )
    log_max_bytes: int = Field(
        default=10485760,
        description="Maximum log file size in bytes",
    )
    log_backup_count: int = Field(default=5, description="Number of log backup files")

    # API Configuration
    api_title: str = Field(default="Trending News Aggregator", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")
    api_host: str = Field(default="0.0.0.0", description="API host")
    port: int = Field(default=3000, description="API port")
    api_cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="CORS allowed origins",
    )

    # Environment
    environment: str = Field(default="development", description="Environment name")

    @property
    def source_timeout_seconds(self) -> float:
        """Per-source budget converted to seconds for asyncio."""
        return self.source_timeout_ms / 1000

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """Parse CORS origins from JSON string or list."""
        if isinstance(v, str):
            return json.loads(v)  # type: ignore[no-any-return]
        return v  # type: ignore[no-any-return]


# Global settings instance
settings = Settings()
