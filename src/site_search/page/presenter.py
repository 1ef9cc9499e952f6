"""Applies presentation states to the search page."""

import html

import structlog

from ..models.presentation import Empty, Loading, PresentationState, Results
from ..rendering.templates import RESULTS_TEMPLATE, render
from .regions import Page, RegionName

logger = structlog.get_logger()


def quote_query(query_string: str) -> str:
    """Quote a query for echoing into page markup."""
    return f"&quot;{html.escape(query_string, quote=False)}&quot;"


class PagePresenter:
    """Drives the visibility and content of the search page regions.

    Every call to :meth:`present` sets the final visibility of all
    presentation regions, so the results and empty regions are never shown
    together and presenting the same state twice changes nothing.
    """

    def __init__(self, page: Page, template: str = RESULTS_TEMPLATE):
        """Initialize presenter.

        Args:
            page: Page whose regions are driven
            template: Result list template
        """
        self.page = page
        self.template = template

    def present(self, state: PresentationState) -> None:
        """Show a presentation state on the page.

        Args:
            state: State to show

        Raises:
            TypeError: If the state is not a known presentation state
        """
        if isinstance(state, Results):
            self._present_results(state)
        elif isinstance(state, Empty):
            self._present_empty(state)
        elif isinstance(state, Loading):
            self._present_loading()
        else:
            raise TypeError(f"Unknown presentation state: {state!r}")

        logger.info(
            "presentation_applied",
            mode=state.mode,
            visible=sorted(self.page.visible_regions()),
        )

    def _present_results(self, state: Results) -> None:
        markup = render(self.template, state.model.to_template_data())

        self.page[RegionName.TITLE_QUERY_STRING].set_content(quote_query(state.query_string))
        self.page[RegionName.SEARCH_RESULTS].set_content(markup)

        self.page[RegionName.SEARCH_RESULTS].show()
        self.page[RegionName.PAGE_TITLE].show()
        self.page[RegionName.NO_SEARCH_RESULTS].hide()

    def _present_empty(self, state: Empty) -> None:
        self.page[RegionName.QUERY_STRING].set_content(quote_query(state.query_string))

        self.page[RegionName.PAGE_TITLE].hide()
        self.page[RegionName.SEARCH_RESULTS].hide()
        self.page[RegionName.NO_SEARCH_RESULTS].show()

    def _present_loading(self) -> None:
        self.page[RegionName.PAGE_TITLE].hide()
        self.page[RegionName.SEARCH_RESULTS].hide()
        self.page[RegionName.NO_SEARCH_RESULTS].hide()
