"""Templates for the search result list."""

from functools import lru_cache
from typing import Any

from jinja2 import Environment, Template

_environment = Environment(autoescape=True)

# The excerpt and its trailing link sit inside the postDate block, so a post
# without a date renders its title link only.
RESULTS_TEMPLATE = (
    "{% for post in posts %}"
    '<div class="site-post-entry">'
    '<h4><a title="{{ post.title }}" href="{{ post.url }}">{{ post.title }}</a></h4>'
    "{% if post.postDate %}"
    '<div class="metabar">'
    "<em>"
    '<span class="sword"> posted on </span>'
    '<span class="date time published" title="{{ post.postDate }}">{{ post.postDate }}</span>'
    "</em>"
    "</div>"
    '{{ post.excerpt }} &nbsp;<a title="{{ post.title }}" href="{{ post.url }}">[&hellip;]</a>'
    "{% endif %}"
    "</div>"
    "{% endfor %}"
)

RESULTS_TEMPLATE_DECOUPLED = (
    "{% for post in posts %}"
    '<div class="site-post-entry">'
    '<h4><a title="{{ post.title }}" href="{{ post.url }}">{{ post.title }}</a></h4>'
    "{% if post.postDate %}"
    '<div class="metabar">'
    "<em>"
    '<span class="sword"> posted on </span>'
    '<span class="date time published" title="{{ post.postDate }}">{{ post.postDate }}</span>'
    "</em>"
    "</div>"
    "{% endif %}"
    '{{ post.excerpt }} &nbsp;<a title="{{ post.title }}" href="{{ post.url }}">[&hellip;]</a>'
    "</div>"
    "{% endfor %}"
)


def results_template(decouple_excerpt: bool = False) -> str:
    """Get the result list template.

    Args:
        decouple_excerpt: Render excerpts for posts without a publish date

    Returns:
        Template source
    """
    return RESULTS_TEMPLATE_DECOUPLED if decouple_excerpt else RESULTS_TEMPLATE


@lru_cache(maxsize=16)
def _compile(template: str) -> Template:
    return _environment.from_string(template)


def render(template: str, data: dict[str, Any]) -> str:
    """Render a template with autoescaping.

    Args:
        template: Template source
        data: Template context

    Returns:
        Rendered markup
    """
    return _compile(template).render(**data)


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>.hidden { display: none; }</style>
</head>
<body>
<h1 id="pageTitle" class="page-title{% if not regions.pageTitle.visible %} hidden{% endif %}">Search results for <span id="titleQueryString">{{ regions.titleQueryString.content | safe }}</span></h1>
<div id="searchResults" class="search-results{% if not regions.searchResults.visible %} hidden{% endif %}">{{ regions.searchResults.content | safe }}</div>
<div id="noSearchResults" class="no-search-results{% if not regions.noSearchResults.visible %} hidden{% endif %}">
<p>Sorry, nothing matched <span id="queryString">{{ regions.queryString.content | safe }}</span>. Try a different search.</p>
</div>
</body>
</html>
"""
