"""Site Search - renders search provider results into a search page."""

__version__ = "0.1.0"
