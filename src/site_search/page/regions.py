"""Named, addressable regions of the search page."""

from ..rendering.templates import PAGE_TEMPLATE, render


class RegionName:
    """Names of the search page regions."""

    SEARCH_RESULTS = "searchResults"
    PAGE_TITLE = "pageTitle"
    NO_SEARCH_RESULTS = "noSearchResults"
    QUERY_STRING = "queryString"
    TITLE_QUERY_STRING = "titleQueryString"


class Region:
    """A page region holding markup that can be shown or hidden."""

    def __init__(self, name: str, visible: bool = False, parent: "Region | None" = None):
        """Initialize region.

        Args:
            name: Region name
            visible: Initial visibility
            parent: Enclosing region, if the region is nested
        """
        self.name = name
        self.parent = parent
        self.content = ""
        self._visible = visible

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def displayed(self) -> bool:
        """Whether the region and every enclosing region are visible."""
        if not self._visible:
            return False
        return self.parent is None or self.parent.displayed

    def set_content(self, html: str) -> None:
        self.content = html

    def show(self) -> None:
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    def __repr__(self) -> str:
        state = "visible" if self._visible else "hidden"
        return f"Region({self.name!r}, {state})"


class Page:
    """The search page: a fixed set of named regions rendered into one document.

    Presentation regions start hidden so nothing shows before a search
    completes. The query echo regions are always visible inside their
    enclosing region.
    """

    def __init__(self, title: str = "Search"):
        """Initialize page.

        Args:
            title: Document title
        """
        self.title = title

        page_title = Region(RegionName.PAGE_TITLE)
        no_results = Region(RegionName.NO_SEARCH_RESULTS)
        self._regions: dict[str, Region] = {
            RegionName.PAGE_TITLE: page_title,
            RegionName.TITLE_QUERY_STRING: Region(
                RegionName.TITLE_QUERY_STRING, visible=True, parent=page_title
            ),
            RegionName.SEARCH_RESULTS: Region(RegionName.SEARCH_RESULTS),
            RegionName.NO_SEARCH_RESULTS: no_results,
            RegionName.QUERY_STRING: Region(
                RegionName.QUERY_STRING, visible=True, parent=no_results
            ),
        }

    def region(self, name: str) -> Region:
        """Get a region by name.

        Raises:
            KeyError: If the page has no region with that name
        """
        try:
            return self._regions[name]
        except KeyError:
            raise KeyError(f"Unknown page region: {name}") from None

    def __getitem__(self, name: str) -> Region:
        return self.region(name)

    @property
    def regions(self) -> dict[str, Region]:
        return dict(self._regions)

    def visible_regions(self) -> frozenset[str]:
        """Get the names of all regions currently displayed."""
        return frozenset(name for name, region in self._regions.items() if region.displayed)

    def render(self) -> str:
        """Render the page as an HTML document."""
        return render(PAGE_TEMPLATE, {"title": self.title, "regions": self._regions})
