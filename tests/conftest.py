"""Pytest fixtures for Site Search tests."""

import pytest


@pytest.fixture
def sample_post_data():
    """Sample post data for testing."""
    return {
        "title": "A",
        "url": "/a",
        "excerpt": "e1",
        "date": "2021-03-09",
    }


@pytest.fixture
def undated_post_data():
    """Sample post without a publish date."""
    return {
        "title": "Undated",
        "url": "/undated",
        "excerpt": "no date here",
    }


@pytest.fixture
def sample_search_result(sample_post_data):
    """Search result with a single dated post."""
    from site_search.models.post import PostRecord
    from site_search.models.search_result import SearchResult

    return SearchResult(
        query_string="cats",
        posts=[PostRecord(**sample_post_data)],
    )


@pytest.fixture
def empty_search_result():
    """Search result without any posts."""
    from site_search.models.search_result import SearchResult

    return SearchResult(query_string="zzz", posts=[])


@pytest.fixture
def page():
    """Fresh search page."""
    from site_search.page.regions import Page

    return Page(title="Search")
