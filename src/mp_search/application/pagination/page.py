"""Application pagination – Page envelope."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mp_search.application.pagination.window import PaginationWindow

if TYPE_CHECKING:
    from mp_search.application.search.result import SearchResult

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """One returned page plus the total number of matches it was cut from.

    ``size == 0`` describes an unbounded window: the page holds every match
    from ``offset`` onward and counts as the only page, with no previous or
    next page.
    """

    items: list[T]
    total: int
    offset: int = 0
    size: int = 0

    @property
    def page_number(self) -> int:
        """1-based page number of this page."""
        if self.size <= 0:
            return 1
        return self.offset // self.size + 1

    @property
    def total_pages(self) -> int:
        if self.total <= 0:
            return 0
        if self.size <= 0:
            return 1
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.size > 0 and self.offset + self.size < self.total

    @property
    def has_previous(self) -> bool:
        return self.size > 0 and self.offset > 0

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            offset=self.offset,
            size=self.size,
        )

    @classmethod
    def of(cls, result: "SearchResult[T]", window: PaginationWindow) -> "Page[T]":
        """Wrap a search result together with the window that produced it."""
        return cls(
            items=list(result.items),
            total=result.total,
            offset=window.offset,
            size=window.size,
        )


__all__ = ["Page"]
