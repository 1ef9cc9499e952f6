"""Utility modules for Site Search."""

from .logging import search_context, setup_logging

__all__ = ["search_context", "setup_logging"]
