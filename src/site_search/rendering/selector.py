"""Chooses how a search result is presented."""

from ..models.presentation import Empty, PresentationState, Results
from ..models.search_result import SearchResult
from .view_model import build_render_model


def select_presentation(result: SearchResult) -> PresentationState:
    """Pick the results or the empty presentation for a search result.

    Only the number of posts decides.
    """
    if result.posts:
        return Results(build_render_model(result))
    return Empty(result.query_string)
