"""Turns search results into render-ready data and markup."""

from .dates import MONTH_NAMES, format_post_date
from .selector import select_presentation
from .templates import (
    PAGE_TEMPLATE,
    RESULTS_TEMPLATE,
    RESULTS_TEMPLATE_DECOUPLED,
    render,
    results_template,
)
from .view_model import build_render_model

__all__ = [
    "MONTH_NAMES",
    "format_post_date",
    "build_render_model",
    "select_presentation",
    "PAGE_TEMPLATE",
    "RESULTS_TEMPLATE",
    "RESULTS_TEMPLATE_DECOUPLED",
    "render",
    "results_template",
]
