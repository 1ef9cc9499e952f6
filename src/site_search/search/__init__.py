"""Search providers and the orchestrator that presents their results."""

from .orchestrator import build_search_page, run_search
from .providers import (
    HttpSearchProvider,
    JsonFileSearchProvider,
    SearchCallback,
    SearchPayloadError,
    SearchProvider,
    SearchUnavailableError,
    StaticSearchProvider,
    parse_search_result,
)

__all__ = [
    "run_search",
    "build_search_page",
    "SearchProvider",
    "SearchCallback",
    "SearchPayloadError",
    "SearchUnavailableError",
    "StaticSearchProvider",
    "JsonFileSearchProvider",
    "HttpSearchProvider",
    "parse_search_result",
]
