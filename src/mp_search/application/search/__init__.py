"""Application search – in-memory search/filter/sort/paginate engine."""
from mp_search.application.search.matcher import FieldKind, FieldMatcher, kind_of, matches_term
from mp_search.application.search.query import QueryState, SortDefault, SortDirection
from mp_search.application.search.result import SearchResult
from mp_search.application.search.schema import SearchRequestModel
from mp_search.application.search.service import ResolvedQuery, execute, get_items, resolve_query
from mp_search.application.search.sorting import sort_records

__all__ = [
    "FieldKind",
    "FieldMatcher",
    "QueryState",
    "ResolvedQuery",
    "SearchRequestModel",
    "SearchResult",
    "SortDefault",
    "SortDirection",
    "execute",
    "get_items",
    "kind_of",
    "matches_term",
    "resolve_query",
    "sort_records",
]
