"""Pydantic models for search results and their presentation."""

from .post import DisplayPost, PostRecord
from .presentation import Empty, Loading, PresentationState, Results
from .search_result import RenderModel, SearchResult

__all__ = [
    "PostRecord",
    "DisplayPost",
    "SearchResult",
    "RenderModel",
    "PresentationState",
    "Loading",
    "Results",
    "Empty",
]
