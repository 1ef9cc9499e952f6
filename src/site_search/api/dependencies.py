"""Dependency injection for FastAPI."""

from typing import Annotated

import httpx
from fastapi import Query, Request

from ..config import settings
from ..rendering.templates import results_template
from ..search.providers import HttpSearchProvider, SearchProvider


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared search service client.

    Args:
        request: FastAPI request object

    Returns:
        HTTP client opened by the application lifespan
    """
    return request.app.state.http_client


async def get_search_provider(
    request: Request,
    q: Annotated[str, Query(description="Search query", min_length=1)],
) -> SearchProvider:
    """Get a provider for the requested query.

    Args:
        request: FastAPI request object
        q: Search query

    Returns:
        Provider querying the configured search service
    """
    client = await get_http_client(request)
    return HttpSearchProvider(client, settings.search_service_url, q)


async def get_results_template() -> str:
    """Get the configured result list template."""
    return results_template(settings.decouple_excerpt)
