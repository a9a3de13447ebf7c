"""Application search – query resolution and execution.

The work is split into two pure steps plus an explicit persistence step:

1. :func:`resolve_query` turns a :class:`QueryState` and the caller's hints
   into a frozen :class:`ResolvedQuery` (effective sort, window, limit).
2. :func:`execute` filters, sorts and slices a collection with it.
3. :meth:`ResolvedQuery.apply_to` writes the effective sort and limit back
   onto the state.

:func:`get_items` runs all three, which is what ``QueryState.get_items``
does.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import TypeVar

from mp_search.application.pagination.window import PaginationWindow, resolve_window
from mp_search.application.search.matcher import FieldMatcher
from mp_search.application.search.query import QueryState, SortDefault, SortDirection
from mp_search.application.search.result import SearchResult
from mp_search.application.search.sorting import sort_records
from mp_search.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["ResolvedQuery", "execute", "get_items", "resolve_query"]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ResolvedQuery:
    """Fully resolved, immutable form of a :class:`QueryState`."""

    matcher: FieldMatcher
    sort_column: str
    sort_direction: SortDirection
    window: PaginationWindow
    limit: int
    sort_defaulted: bool = False
    limit_from_fallback: bool = False

    def apply_to(self, state: QueryState) -> None:
        """Persist the effective sort and limit onto *state*."""
        state.sort_column = self.sort_column
        state.sort_direction = self.sort_direction
        state.limit = self.limit


def resolve_query(
    state: QueryState,
    fallback_limit: int = 0,
    default_sort: SortDefault | None = None,
) -> ResolvedQuery:
    """Resolve *state* without modifying it.

    *default_sort* fills the sort only when ``state.sort_column`` is empty;
    an existing column keeps its own direction.  *fallback_limit* is used
    only in offset/limit mode when ``state.limit`` is unset.
    """
    sort_column = state.sort_column
    sort_direction = SortDirection.parse(state.sort_direction)
    sort_defaulted = False
    if not sort_column and default_sort is not None:
        sort_column = default_sort.column
        sort_direction = default_sort.direction
        sort_defaulted = True

    window = resolve_window(state, fallback_limit)
    limit = state.limit
    limit_from_fallback = not window.page_based and window.size != state.limit
    if limit_from_fallback:
        limit = window.size

    return ResolvedQuery(
        matcher=FieldMatcher(state.search_columns, state.term, state.exact_match),
        sort_column=sort_column,
        sort_direction=sort_direction,
        window=window,
        limit=limit,
        sort_defaulted=sort_defaulted,
        limit_from_fallback=limit_from_fallback,
    )


def execute(items: Sequence[T], resolved: ResolvedQuery) -> SearchResult[T]:
    """Filter, sort and slice *items*; the input sequence is not modified."""
    filtered = resolved.matcher.filter(items)
    ordered = sort_records(filtered, resolved.sort_column, resolved.sort_direction)
    return SearchResult(items=resolved.window.slice(ordered), total=len(filtered))


def get_items(
    state: QueryState,
    items: Sequence[T],
    fallback_limit: int = 0,
    default_sort_column: str | None = None,
    default_ascending: bool = True,
) -> SearchResult[T]:
    """Run *state* over *items* and return ``(page, total_match_count)``.

    Side effect: *state* ends up describing the executed query, i.e. a
    defaulted sort column/direction and a limit taken from *fallback_limit*
    are written back onto it.
    """
    resolved = resolve_query(
        state,
        fallback_limit,
        SortDefault.from_args(default_sort_column, default_ascending),
    )
    resolved.apply_to(state)
    if resolved.sort_defaulted:
        logger.debug(
            "search.sort_defaulted",
            sort_column=resolved.sort_column,
            sort_direction=resolved.sort_direction.value,
        )
    if resolved.limit_from_fallback:
        logger.debug("search.limit_from_fallback", limit=resolved.limit)

    result = execute(items, resolved)
    logger.debug(
        "search.executed",
        total=result.total,
        returned=result.returned,
        offset=resolved.window.offset,
        size=resolved.window.size,
        sort_column=resolved.sort_column or None,
        filtering=resolved.matcher.is_active,
    )
    return result
