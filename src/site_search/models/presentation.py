"""Presentation states of the search page."""

from dataclasses import dataclass
from typing import ClassVar, Union

from .search_result import RenderModel


@dataclass(frozen=True)
class Loading:
    """Search in flight, nothing shown yet."""

    mode: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Results:
    """Search matched at least one post."""

    model: RenderModel

    mode: ClassVar[str] = "results"

    @property
    def query_string(self) -> str:
        return self.model.query_string


@dataclass(frozen=True)
class Empty:
    """Search matched nothing."""

    query_string: str

    mode: ClassVar[str] = "empty"


PresentationState = Union[Loading, Results, Empty]
