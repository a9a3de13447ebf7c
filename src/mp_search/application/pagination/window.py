"""Application pagination – PaginationWindow resolver and limit capping.

Two sets of inputs can describe the same window:

* ``page_index`` / ``page_size`` (page-based, authoritative when
  ``page_size > 0``)
* ``offset`` / ``limit`` (classic), with an optional fallback limit used
  only when ``limit`` is unset

A resolved size of ``0`` means "unbounded": everything from ``offset`` to
the end of the collection.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class PaginationFields(Protocol):
    """Anything carrying the four pagination inputs (e.g. ``QueryState``)."""

    limit: int
    offset: int
    page_index: int
    page_size: int


def _non_negative(value: int | None) -> int:
    return value if value is not None and value > 0 else 0


@dataclasses.dataclass(frozen=True, slots=True)
class PaginationWindow:
    """Concrete ``(offset, size)`` pair used to slice a collection."""

    offset: int = 0
    size: int = 0
    page_based: bool = False

    @property
    def is_unbounded(self) -> bool:
        return self.size == 0

    @property
    def end(self) -> int | None:
        """Exclusive end index, ``None`` when unbounded."""
        if self.is_unbounded:
            return None
        return self.offset + self.size

    def slice(self, items: Sequence[T]) -> list[T]:
        """Return the part of *items* covered by this window."""
        return list(items[self.offset:self.end])


def resolve_window(query: PaginationFields, fallback_limit: int = 0) -> PaginationWindow:
    """Reconcile page-based and offset/limit inputs into one window.

    *fallback_limit* is consulted only in offset/limit mode and only when
    ``query.limit`` is unset.  Negative inputs degrade to ``0``.
    """
    page_size = _non_negative(query.page_size)
    if page_size > 0:
        return PaginationWindow(
            offset=_non_negative(query.page_index) * page_size,
            size=page_size,
            page_based=True,
        )

    limit = _non_negative(query.limit)
    if limit == 0:
        limit = _non_negative(fallback_limit)
    return PaginationWindow(offset=_non_negative(query.offset), size=limit)


def cap_limit(query: PaginationFields, max_allowed: int) -> int:
    """Bound the requested row count of *query* by *max_allowed* in place.

    A ceiling of ``0`` (or less) disables capping.  Otherwise an unset limit
    and a limit above the ceiling both become ``max_allowed``; a page size
    above the ceiling is reduced to it while an unset page size stays unset.
    Returns the resulting ``limit``.
    """
    if max_allowed <= 0:
        return query.limit
    if query.limit <= 0 or query.limit > max_allowed:
        query.limit = max_allowed
    if query.page_size > max_allowed:
        query.page_size = max_allowed
    return query.limit


__all__ = ["PaginationFields", "PaginationWindow", "cap_limit", "resolve_window"]
