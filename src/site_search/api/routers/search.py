"""Search page and search presentation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from ...config import settings
from ...models.post import DisplayPost
from ...models.presentation import Loading, Results
from ...page.regions import RegionName
from ...search.orchestrator import build_search_page
from ...search.providers import SearchProvider
from ...utils.logging import search_context
from ..dependencies import get_results_template, get_search_provider

router = APIRouter(prefix="/search", tags=["Search"])
page_router = APIRouter()


class SearchPresentationResponse(BaseModel):
    """Presentation chosen for a search."""

    model_config = ConfigDict(populate_by_name=True)

    mode: str = Field(..., description="loading, results or empty")
    query_string: str | None = Field(default=None, alias="queryString")
    posts: list[DisplayPost] = []
    html: str


@page_router.get("/search", response_class=HTMLResponse)
async def search_page(
    q: Annotated[str, Query(description="Search query", min_length=1)],
    provider: SearchProvider = Depends(get_search_provider),
    template: str = Depends(get_results_template),
) -> HTMLResponse:
    """Render the search page for a query.

    Args:
        q: Search query
        provider: Injected search provider
        template: Injected result list template

    Returns:
        The rendered search page
    """
    try:
        with search_context(q, "api"):
            page, _ = await build_search_page(
                provider, title=settings.page_title, template=template
            )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return HTMLResponse(page.render())


@router.get("", response_model=SearchPresentationResponse, response_model_by_alias=True)
async def search_presentation(
    q: Annotated[str, Query(description="Search query", min_length=1)],
    provider: SearchProvider = Depends(get_search_provider),
    template: str = Depends(get_results_template),
) -> SearchPresentationResponse:
    """Run a search and describe how its result is presented.

    Args:
        q: Search query
        provider: Injected search provider
        template: Injected result list template

    Returns:
        Presentation mode, render-ready posts and the result list markup
    """
    try:
        with search_context(q, "api"):
            page, state = await build_search_page(
                provider, title=settings.page_title, template=template
            )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if state is None:
        return SearchPresentationResponse(mode=Loading.mode, html="")

    if isinstance(state, Results):
        return SearchPresentationResponse(
            mode=state.mode,
            query_string=state.query_string,
            posts=state.model.posts,
            html=page[RegionName.SEARCH_RESULTS].content,
        )

    return SearchPresentationResponse(mode=state.mode, query_string=state.query_string, html="")
