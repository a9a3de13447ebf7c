"""Application – the in-memory query engine (framework-agnostic)."""

from mp_search.application.pagination import Page, PaginationWindow, cap_limit, resolve_window
from mp_search.application.search import (
    FieldMatcher,
    QueryState,
    ResolvedQuery,
    SearchResult,
    SortDefault,
    SortDirection,
    execute,
    get_items,
    resolve_query,
)

__all__ = [
    "FieldMatcher",
    "Page",
    "PaginationWindow",
    "QueryState",
    "ResolvedQuery",
    "SearchResult",
    "SortDefault",
    "SortDirection",
    "cap_limit",
    "execute",
    "get_items",
    "resolve_query",
    "resolve_window",
]
