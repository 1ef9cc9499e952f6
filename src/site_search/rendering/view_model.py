"""Builds the render model handed to the result templates."""

import structlog

from ..models.post import DisplayPost
from ..models.search_result import RenderModel, SearchResult
from .dates import format_post_date

logger = structlog.get_logger()


def build_render_model(result: SearchResult) -> RenderModel:
    """Attach a display date to every post of a search result.

    Posts keep their order. The query string is copied as is; escaping is
    left to the template engine.

    Args:
        result: Search result from the provider

    Returns:
        RenderModel for the results template
    """
    posts = [
        DisplayPost.from_record(record, format_post_date(record.date))
        for record in result.posts
    ]

    undated = sum(1 for post in posts if post.post_date is None)
    logger.debug(
        "render_model_built",
        query=result.query_string,
        posts=len(posts),
        undated=undated,
    )

    return RenderModel(query_string=result.query_string, posts=posts)
