"""Search result and render model wrappers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .post import DisplayPost, PostRecord


class SearchResult(BaseModel):
    """Result set returned by the search provider for a single query."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query_string: str = Field(alias="queryString")
    posts: list[PostRecord] = []


class RenderModel(BaseModel):
    """Render-ready search result handed to the template engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query_string: str = Field(alias="queryString")
    posts: list[DisplayPost] = []

    def to_template_data(self) -> dict[str, Any]:
        """Get the template context, keyed the way the templates expect."""
        return {
            "queryString": self.query_string,
            "posts": [post.to_template_data() for post in self.posts],
        }
