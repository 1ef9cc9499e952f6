"""Runs a search and hands its presentation to the page."""

import asyncio
from typing import Callable

import structlog

from ..models.presentation import Loading, PresentationState
from ..models.search_result import SearchResult
from ..page.presenter import PagePresenter
from ..page.regions import Page
from ..rendering.selector import select_presentation
from ..rendering.templates import RESULTS_TEMPLATE
from .providers import SearchProvider, SearchUnavailableError

logger = structlog.get_logger()


async def run_search(
    provider: SearchProvider,
    on_complete: Callable[[PresentationState], None],
) -> PresentationState | None:
    """Run one search and present its result.

    The provider is called exactly once. Its callback completes a one-shot
    future that is awaited whether the callback fires during the search or
    later; only the first result counts. A provider that gives up raises
    SearchUnavailableError, and nothing is presented then. A provider that
    never calls back keeps the page in its initial state for good. There is
    no retry, timeout or cancellation.

    Args:
        provider: Search provider to query
        on_complete: Receives the presentation state of the result

    Returns:
        The presented state, or None when the provider gave up
    """
    loop = asyncio.get_running_loop()
    completion: asyncio.Future[SearchResult] = loop.create_future()
    provider_name = type(provider).__name__

    def handle_result(result: SearchResult) -> None:
        if completion.done():
            logger.warning("duplicate_search_callback", provider=provider_name)
            return
        completion.set_result(result)

    logger.info("search_started", provider=provider_name)
    try:
        await provider.search(handle_result)
    except SearchUnavailableError as e:
        if not completion.done():
            logger.warning("search_no_response", provider=provider_name, error=str(e))
            return None

    if not completion.done():
        logger.info("search_awaiting_callback", provider=provider_name)

    result = await completion
    state = select_presentation(result)
    on_complete(state)

    logger.info(
        "search_complete",
        query=result.query_string,
        total_results=len(result.posts),
        mode=state.mode,
    )
    return state


async def build_search_page(
    provider: SearchProvider,
    title: str = "Search",
    template: str = RESULTS_TEMPLATE,
) -> tuple[Page, PresentationState | None]:
    """Load a fresh search page and present one search on it.

    Args:
        provider: Search provider to query
        title: Document title of the page
        template: Result list template

    Returns:
        The page and the presented state, None when the provider gave up
    """
    page = Page(title=title)
    presenter = PagePresenter(page, template=template)
    presenter.present(Loading())

    state = await run_search(provider, presenter.present)
    return page, state
