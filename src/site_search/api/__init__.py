"""HTTP API serving the search page."""

from .app import create_app

__all__ = ["create_app"]
