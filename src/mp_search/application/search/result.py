"""Application search – SearchResult pair."""
from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")

__all__ = ["SearchResult"]


class SearchResult(NamedTuple, Generic[T]):
    """Returned page plus the number of records that matched before paging.

    Unpacks as a pair: ``page, total = state.get_items(records)``.
    """

    items: list[T]
    total: int

    @property
    def returned(self) -> int:
        return len(self.items)
