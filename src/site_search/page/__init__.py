"""Search page regions and the presenter that drives them."""

from .presenter import PagePresenter
from .regions import Page, Region, RegionName

__all__ = ["Page", "Region", "RegionName", "PagePresenter"]
