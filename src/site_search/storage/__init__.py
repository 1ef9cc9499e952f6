"""Persistence of rendered search pages."""

from .html_writer import HtmlWriter

__all__ = ["HtmlWriter"]
