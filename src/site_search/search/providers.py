"""Search providers delivering a search result through a completion callback."""

import asyncio
import json
from pathlib import Path
from typing import Any, Callable, Protocol

import aiofiles
import httpx
import structlog
from pydantic import ValidationError

from ..models.post import PostRecord
from ..models.search_result import SearchResult

logger = structlog.get_logger()

SearchCallback = Callable[[SearchResult], None]


class SearchPayloadError(ValueError):
    """Raised when a provider payload is not a search result object."""


class SearchUnavailableError(Exception):
    """Raised by a provider that gave up on a search without a result."""


class SearchProvider(Protocol):
    """Anything that can run one search and hand back its result.

    The callback may fire before or after ``search`` returns. A provider that
    knows no result will come raises :class:`SearchUnavailableError`.
    """

    async def search(self, callback: SearchCallback) -> None:
        """Start the search and call ``callback`` with its result once."""
        ...


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _create_minimal_post(raw_post: Any) -> PostRecord:
    """Create a post from whatever text fields a malformed record still has.

    The date is dropped, so the post renders without a publish date.
    """
    if not isinstance(raw_post, dict):
        return PostRecord(title="", url="")

    return PostRecord(
        title=_as_text(raw_post.get("title")),
        url=_as_text(raw_post.get("url")),
        excerpt=_as_text(raw_post.get("excerpt")),
    )


def parse_search_result(payload: Any, default_query: str = "") -> SearchResult:
    """Build a search result from a provider JSON payload.

    Args:
        payload: Decoded ``{"queryString": ..., "posts": [...]}`` object
        default_query: Query used when the payload carries none

    Returns:
        SearchResult with one post per payload entry, in order

    Raises:
        SearchPayloadError: If the payload is not a search result object
    """
    if not isinstance(payload, dict):
        raise SearchPayloadError(
            f"Expected a search result object, got {type(payload).__name__}"
        )

    query_string = payload.get("queryString")
    if not isinstance(query_string, str):
        query_string = default_query

    raw_posts = payload.get("posts")
    if raw_posts is None:
        raw_posts = []
    elif not isinstance(raw_posts, list):
        raise SearchPayloadError(
            f"Expected a list of posts, got {type(raw_posts).__name__}"
        )

    posts = []
    for index, raw_post in enumerate(raw_posts):
        try:
            posts.append(PostRecord.model_validate(raw_post))
        except ValidationError as e:
            logger.warning(
                "post_validation_failed",
                index=index,
                error=str(e),
            )
            posts.append(_create_minimal_post(raw_post))

    return SearchResult(query_string=query_string, posts=posts)


class StaticSearchProvider:
    """Provider handing over a result that is already known."""

    def __init__(self, result: SearchResult):
        self.result = result

    async def search(self, callback: SearchCallback) -> None:
        # Deliver on a later loop iteration, like a real backend would
        await asyncio.sleep(0)
        callback(self.result)


class JsonFileSearchProvider:
    """Provider reading a saved search result from a JSON file."""

    def __init__(self, path: str | Path, default_query: str = ""):
        """Initialize provider.

        Args:
            path: JSON file holding a ``{"queryString", "posts"}`` object
            default_query: Query used when the file carries none
        """
        self.path = Path(path)
        self.default_query = default_query

    async def search(self, callback: SearchCallback) -> None:
        """Read the file and call back with its result.

        Raises:
            SearchUnavailableError: If the file is unreadable or malformed
        """
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                payload = json.loads(await f.read())
            result = parse_search_result(payload, self.default_query)
        except (OSError, ValueError) as e:
            logger.error("search_file_failed", path=str(self.path), error=str(e))
            raise SearchUnavailableError(f"Cannot read search result file {self.path}") from e

        logger.info("search_file_loaded", path=str(self.path), posts=len(result.posts))
        callback(result)


class HttpSearchProvider:
    """Provider querying a remote search service over HTTP."""

    def __init__(self, client: httpx.AsyncClient, service_url: str, query: str):
        """Initialize provider.

        Args:
            client: Shared HTTP client
            service_url: Search endpoint, queried with ``?q=<query>``
            query: Search query
        """
        self.client = client
        self.service_url = service_url
        self.query = query

    async def search(self, callback: SearchCallback) -> None:
        """Query the search service and call back with its result.

        There is no retry.

        Raises:
            SearchUnavailableError: If the request or its payload fails
        """
        logger.info("search_request", url=self.service_url, query=self.query)

        try:
            response = await self.client.get(self.service_url, params={"q": self.query})
            response.raise_for_status()
            result = parse_search_result(response.json(), self.query)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "search_request_failed",
                url=self.service_url,
                query=self.query,
                error=str(e),
            )
            raise SearchUnavailableError(f"Search request for {self.query!r} failed") from e

        callback(result)
