"""Trending news API router.

This module provides the endpoint serving the aggregated, ranked article
list.
"""

from typing import Optional, Union

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from news_aggregator.api.dependencies import TrendingServiceDep
from news_aggregator.core.exceptions import AggregationError
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def internal_error_response() -> JSONResponse:
    """Generic 500 body; details stay in the server log."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


@router.get(
    "/trending",
    response_model=list[Article],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Trending articles across all sources",
    description=(
        "Aggregate the latest articles from every configured news source, "
        "optionally filtered by category, newest first. Results are cached "
        "per category for the configured TTL."
    ),
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "Unexpected fault in the aggregation pipeline",
            "content": {
                "application/json": {"example": {"error": "Internal Server Error"}}
            },
        }
    },
)
async def get_trending(
    trending_service: TrendingServiceDep,
    category: Optional[str] = Query(None, description="Optional category filter"),
) -> Union[list[Article], JSONResponse]:
    """Return up to the top N trending articles.

    Args:
        trending_service: Trending service (injected)
        category: Optional category filter

    Returns:
        Articles sorted by publication time, newest first, or a generic
        500 response if the pipeline fails unexpectedly
    """
    try:
        return await trending_service.get_trending(category)
    except AggregationError as e:
        logger.error(f"Aggregation failed in /trending: {e}", exc_info=True)
        return internal_error_response()
    except Exception as e:
        logger.error(f"Error in /trending: {e}", exc_info=True)
        return internal_error_response()
